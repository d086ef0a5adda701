"""
Decoding of located byte windows into raw ``PlayerState`` entries.

Not every datagram on the telemetry port carries a well-formed message, so
decode errors are an expected outcome here and are folded into an empty
result instead of being raised.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from google.protobuf.message import DecodeError

from zwiftcap.parsing.direction import TaggedMessage
from zwiftcap.parsing.framing import TRAILER_LENGTH, FrameWindow, locate_frame
from zwiftcap.parsing.messages.schema import ClientToServer, ServerToClient
from zwiftcap.parsing.outcome import Outcome


@dataclass
class DecodeResult:
    outcome: Outcome
    entries: list[Any] = field(default_factory=list)
    window: Optional[FrameWindow] = None


def _parse(message_cls, window: bytes | memoryview):
    message = message_cls()
    try:
        message.ParseFromString(bytes(window))
    except DecodeError:
        return None
    return message


def decode_server_message(window: bytes | memoryview) -> Optional[list[Any]]:
    """
    Decode a ``ServerToClient`` message.

    Returns:
        Every ``PlayerState`` in encounter order (possibly none), or ``None``
        if the bytes are not a valid message.
    """
    message = _parse(ServerToClient, window)
    if message is None:
        return None
    return list(message.player_states)


def decode_client_message(window: bytes | memoryview) -> Optional[list[Any]]:
    """
    Decode a ``ClientToServer`` message.

    Returns:
        A single-element list holding the embedded ``PlayerState``, or
        ``None`` if the bytes are not a valid message or carry no state.
    """
    message = _parse(ClientToServer, window)
    if message is None or not message.HasField("state"):
        return None
    return [message.state]


def decode_tagged(message: TaggedMessage, trailer_length: int = TRAILER_LENGTH) -> DecodeResult:
    """
    Locate (for client messages) and decode a direction-tagged payload.

    Never raises on bad input: framing and decode problems come back as the
    result's ``outcome`` with no entries.
    """
    if message.is_from_server:
        entries = decode_server_message(message.payload)
        if entries is None:
            return DecodeResult(Outcome.DECODE_FAILURE)
        return DecodeResult(Outcome.RECORDS, entries)

    window = locate_frame(message.payload, trailer_length=trailer_length)
    if window is None:
        return DecodeResult(Outcome.FRAMING_MISS)
    entries = decode_client_message(window.slice(message.payload))
    if entries is None:
        return DecodeResult(Outcome.DECODE_FAILURE, window=window)
    return DecodeResult(Outcome.RECORDS, entries, window)
