"""
Protobuf schemas of the two telemetry messages.

The message classes are built from descriptors at import time so no
``protoc`` step is needed. Field numbers follow the community-maintained
``zwift_messages.proto``, with positions (``x``, ``altitude``, ``y``) carried
as integer centimeters. Fields this package does not read are still
declared so their values show up in ``ListFields()`` during debugging.

The community schema has the positions as ``float``. A capture that
encodes them as fixed32 still parses, but the wire-type mismatch sends the
values to unknown fields and the positions read as 0.
"""
from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_FDP = descriptor_pb2.FieldDescriptorProto

PACKAGE = "zwiftcap"

# (name, number, type) of every PlayerState field.
PLAYER_STATE_FIELDS: list[tuple[str, int, int]] = [
    ("id", 1, _FDP.TYPE_INT32),
    ("world_time", 2, _FDP.TYPE_INT64),
    ("distance", 3, _FDP.TYPE_INT32),
    ("road_time", 4, _FDP.TYPE_INT32),
    ("laps", 5, _FDP.TYPE_INT32),
    ("speed", 6, _FDP.TYPE_INT32),
    ("road_position", 8, _FDP.TYPE_INT32),
    ("cadence_uhz", 9, _FDP.TYPE_INT32),
    ("heartrate", 11, _FDP.TYPE_INT32),
    ("power", 12, _FDP.TYPE_INT32),
    ("heading", 13, _FDP.TYPE_INT64),
    ("lean", 14, _FDP.TYPE_INT32),
    ("climbing", 15, _FDP.TYPE_INT32),
    ("time", 16, _FDP.TYPE_INT32),
    ("f19", 19, _FDP.TYPE_INT32),
    ("aux_flags", 20, _FDP.TYPE_INT32),
    ("progress", 21, _FDP.TYPE_INT32),
    ("customisation_id", 22, _FDP.TYPE_INT64),
    ("just_watching", 23, _FDP.TYPE_INT32),
    ("calories", 24, _FDP.TYPE_INT32),
    ("x", 25, _FDP.TYPE_INT32),
    ("altitude", 26, _FDP.TYPE_INT32),
    ("y", 27, _FDP.TYPE_INT32),
    ("watching_rider_id", 28, _FDP.TYPE_INT32),
    ("group_id", 29, _FDP.TYPE_INT32),
    ("sport", 31, _FDP.TYPE_INT64),
]

CLIENT_TO_SERVER_FIELDS: list[tuple[str, int, int]] = [
    ("connected", 1, _FDP.TYPE_INT32),
    ("rider_id", 2, _FDP.TYPE_INT32),
    ("world_time", 3, _FDP.TYPE_INT64),
    ("seqno", 4, _FDP.TYPE_INT32),
    ("state", 7, _FDP.TYPE_MESSAGE),
    ("tag8", 8, _FDP.TYPE_INT64),
    ("tag9", 9, _FDP.TYPE_INT64),
    ("last_update", 10, _FDP.TYPE_INT64),
    ("tag11", 11, _FDP.TYPE_INT64),
    ("last_player_update", 12, _FDP.TYPE_INT64),
]

SERVER_TO_CLIENT_FIELDS: list[tuple[str, int, int]] = [
    ("tag1", 1, _FDP.TYPE_INT32),
    ("rider_id", 2, _FDP.TYPE_INT32),
    ("world_time", 3, _FDP.TYPE_INT64),
    ("seqno", 4, _FDP.TYPE_INT32),
    ("player_states", 8, _FDP.TYPE_MESSAGE),
    ("tag11", 11, _FDP.TYPE_INT64),
    ("tag17", 17, _FDP.TYPE_INT64),
    ("num_msgs", 18, _FDP.TYPE_INT32),
    ("msgnum", 19, _FDP.TYPE_INT32),
]

REPEATED_FIELDS = {("ServerToClient", "player_states")}


def _add_message(file_proto: descriptor_pb2.FileDescriptorProto, name: str, fields) -> None:
    message = file_proto.message_type.add(name=name)
    for field_name, number, field_type in fields:
        label = _FDP.LABEL_REPEATED if (name, field_name) in REPEATED_FIELDS else _FDP.LABEL_OPTIONAL
        field = message.field.add(name=field_name, number=number, type=field_type, label=label)
        if field_type == _FDP.TYPE_MESSAGE:
            field.type_name = f".{PACKAGE}.PlayerState"


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=f"{PACKAGE}/zwift_messages.proto",
        package=PACKAGE,
        syntax="proto2",
    )
    _add_message(file_proto, "PlayerState", PLAYER_STATE_FIELDS)
    _add_message(file_proto, "ClientToServer", CLIENT_TO_SERVER_FIELDS)
    _add_message(file_proto, "ServerToClient", SERVER_TO_CLIENT_FIELDS)
    return file_proto


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(build_file_descriptor().SerializeToString())

PlayerState = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.PlayerState"))
ClientToServer = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.ClientToServer"))
ServerToClient = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f"{PACKAGE}.ServerToClient"))
