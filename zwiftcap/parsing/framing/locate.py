"""
Frame recovery for client-originated payloads.

Client datagrams carry a short header of unknown layout in front of the
protobuf message and four trailing bytes after it. The layout below is
inferred from captures, not from a protocol description:

``[header ...] [message ...] [4 trailing bytes]``

where the first header byte usually holds ``message_offset + 1``. Strategies
are tried in order and the first window wins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from zwiftcap.core.binary import find_byte

# Number of trailing non-message bytes (sequence number or checksum).
TRAILER_LENGTH = 4

# Varint tag of field number 1; the client message always starts with it.
MESSAGE_TAG_PREFIX = 0x08


@dataclass(frozen=True)
class FrameWindow:
    offset: int
    limit: int
    strategy: str

    def __len__(self) -> int:
        return self.limit - self.offset

    def slice(self, payload: bytes | memoryview) -> memoryview:
        return memoryview(payload)[self.offset: self.limit]


class FramingStrategy(Protocol):
    name: str

    def locate(self, payload: memoryview, limit: int) -> Optional[FrameWindow]:
        ...


class HeaderOffsetStrategy:
    """First byte minus one is the message offset."""

    name = "header"

    def locate(self, payload: memoryview, limit: int) -> Optional[FrameWindow]:
        if not payload:
            return None
        offset = payload[0] - 1
        if offset < 0 or offset >= limit:
            return None
        return FrameWindow(offset, limit, self.name)


class TagScanStrategy:
    """First occurrence of the field-1 tag byte before the trailer."""

    name = "scan"

    def __init__(self, tag: int = MESSAGE_TAG_PREFIX) -> None:
        self.tag = tag

    def locate(self, payload: memoryview, limit: int) -> Optional[FrameWindow]:
        offset = find_byte(payload, self.tag, 0, limit)
        if offset is None:
            return None
        return FrameWindow(offset, limit, self.name)


class ZeroOffsetStrategy:
    """Whole payload minus the trailer. Likely to fail decoding."""

    name = "default"

    def locate(self, payload: memoryview, limit: int) -> Optional[FrameWindow]:
        if limit < 0:
            return None
        return FrameWindow(0, limit, self.name)


DEFAULT_STRATEGIES: tuple[FramingStrategy, ...] = (
    HeaderOffsetStrategy(),
    TagScanStrategy(),
    ZeroOffsetStrategy(),
)


def locate_frame(
    payload: bytes | memoryview,
    strategies: Sequence[FramingStrategy] = DEFAULT_STRATEGIES,
    trailer_length: int = TRAILER_LENGTH,
) -> Optional[FrameWindow]:
    """
    Find the protobuf message inside a client-originated payload.

    Args:
        payload: The UDP payload of a client-originated datagram.
        strategies: Strategies to try, in order.
        trailer_length: Number of trailing bytes excluded from the window.

    Returns:
        The half-open ``[offset, limit)`` window of the first strategy that
        found one, or ``None`` if none did.
    """
    view = memoryview(payload)
    limit = len(view) - trailer_length
    if limit < 0:
        return None
    for strategy in strategies:
        window = strategy.locate(view, limit)
        if window is not None:
            return window
    return None
