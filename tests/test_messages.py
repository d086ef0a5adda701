"""Tests for schema decoding and failure tolerance."""
from zwiftcap.parsing.direction import TaggedMessage
from zwiftcap.parsing.messages import (
    ClientToServer,
    PlayerState,
    ServerToClient,
    decode_client_message,
    decode_server_message,
    decode_tagged,
)
from zwiftcap.parsing.outcome import Outcome

TRAILER = b"\x00\x00\x00\x01"


def _client_bytes(rider_id: int = 7, **fields) -> bytes:
    msg = ClientToServer(connected=1, rider_id=rider_id, world_time=1000)
    msg.state.CopyFrom(PlayerState(id=rider_id, **fields))
    return msg.SerializeToString()


def _server_bytes(*ids: int) -> bytes:
    msg = ServerToClient(tag1=1, world_time=1000)
    for rider_id in ids:
        msg.player_states.add(id=rider_id, power=100 + rider_id)
    return msg.SerializeToString()


def test_client_message_starts_with_field_one_tag():
    assert _client_bytes()[0] == 0x08


def test_decode_server_message_keeps_order():
    entries = decode_server_message(_server_bytes(5, 3, 9))
    assert [e.id for e in entries] == [5, 3, 9]
    assert [e.power for e in entries] == [105, 103, 109]


def test_decode_server_message_without_states():
    assert decode_server_message(_server_bytes()) == []


def test_decode_client_message_single_state():
    entries = decode_client_message(_client_bytes(rider_id=42, power=250))
    assert len(entries) == 1
    assert entries[0].id == 42
    assert entries[0].power == 250


def test_decode_client_message_without_state():
    msg = ClientToServer(connected=1, rider_id=3)
    assert decode_client_message(msg.SerializeToString()) is None
    assert decode_client_message(b"") is None


def test_decode_invalid_bytes_returns_none():
    # field 8, length 5, but only one byte follows
    assert decode_server_message(b"\x42\x05\x01") is None
    # field 7, length 16, truncated
    assert decode_client_message(b"\x3a\x10\x08") is None


def test_decode_accepts_memoryview():
    data = memoryview(_server_bytes(1, 2))
    assert [e.id for e in decode_server_message(data)] == [1, 2]


def test_decode_tagged_server():
    result = decode_tagged(TaggedMessage.from_server(_server_bytes(1, 2, 3)))
    assert result.outcome is Outcome.RECORDS
    assert [e.id for e in result.entries] == [1, 2, 3]
    assert result.window is None


def test_decode_tagged_client_with_header():
    body = _client_bytes(rider_id=11)
    payload = bytes([0x03, 0x99]) + body + TRAILER
    result = decode_tagged(TaggedMessage.to_server(payload))
    assert result.outcome is Outcome.RECORDS
    assert result.window.strategy == "header"
    assert result.window.offset == 2
    assert [e.id for e in result.entries] == [11]


def test_decode_tagged_client_recovered_by_scan():
    body = _client_bytes(rider_id=12)
    payload = bytes([0xFF]) + body + TRAILER
    result = decode_tagged(TaggedMessage.to_server(payload))
    assert result.outcome is Outcome.RECORDS
    assert result.window.strategy == "scan"
    assert result.entries[0].id == 12


def test_decode_tagged_garbage_server_is_decode_failure():
    result = decode_tagged(TaggedMessage.from_server(b"\x42\x05\x01"))
    assert result.outcome is Outcome.DECODE_FAILURE
    assert result.entries == []


def test_decode_tagged_garbage_client_is_decode_failure():
    payload = bytes([0x02, 0x3A, 0x10, 0x08]) + TRAILER
    result = decode_tagged(TaggedMessage.to_server(payload))
    assert result.outcome is Outcome.DECODE_FAILURE
    assert result.entries == []


def test_decode_tagged_default_window_failure_is_decode_failure():
    payload = bytes([0xFF, 0x01, 0x02, 0x03]) + TRAILER
    result = decode_tagged(TaggedMessage.to_server(payload))
    assert result.outcome is Outcome.DECODE_FAILURE
    assert result.window.strategy == "default"
    assert result.entries == []


def test_decode_tagged_short_client_payload_is_framing_miss():
    result = decode_tagged(TaggedMessage.to_server(b"\x01\x02"))
    assert result.outcome is Outcome.FRAMING_MISS
    assert result.window is None


def test_decode_tagged_custom_trailer_length():
    body = _client_bytes(rider_id=4)
    payload = bytes([0x02, 0x55]) + body + b"\xAA"
    result = decode_tagged(TaggedMessage.to_server(payload), trailer_length=1)
    assert result.outcome is Outcome.RECORDS
    assert result.entries[0].id == 4


def test_fixed32_position_is_ignored_not_fatal():
    # field 25 (x) with wire type 5, then id=3
    data = b"\xcd\x01" + b"\x00\x00\x80\x3f" + b"\x08\x03"
    state = PlayerState()
    state.ParseFromString(data)
    assert state.id == 3
    assert state.x == 0
