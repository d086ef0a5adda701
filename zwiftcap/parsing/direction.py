"""
Direction tagging for telemetry datagrams.

The game server sends world updates from the well-known telemetry port, so a
datagram whose source port is that port is server-originated. Anything else
that made it through the capture filter is treated as client-originated.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SERVER_PORT = 3022


class Direction(str, Enum):
    FROM_SERVER = "from_server"
    TO_SERVER = "to_server"


@dataclass(frozen=True)
class TaggedMessage:
    """
    A direction-tagged view over a datagram payload.

    ``payload`` is a ``memoryview`` onto the buffer handed to ``classify``; it
    does not own the bytes and is only meaningful while that buffer is alive.
    """
    direction: Direction
    payload: memoryview

    @classmethod
    def from_server(cls, payload: bytes | memoryview) -> "TaggedMessage":
        return cls(Direction.FROM_SERVER, memoryview(payload))

    @classmethod
    def to_server(cls, payload: bytes | memoryview) -> "TaggedMessage":
        return cls(Direction.TO_SERVER, memoryview(payload))

    @property
    def is_from_server(self) -> bool:
        return self.direction is Direction.FROM_SERVER


def classify(
    source_port: int,
    destination_port: int,
    payload: bytes | memoryview,
    server_port: int = SERVER_PORT,
) -> TaggedMessage:
    """
    Tag a UDP datagram by the endpoint that sent it.

    Args:
        source_port: UDP source port.
        destination_port: UDP destination port. Not used for the decision.
        payload: The UDP payload.
        server_port: The telemetry port the game server sends from.

    Returns:
        A ``TaggedMessage``; every datagram gets exactly one.
    """
    if source_port == server_port:
        return TaggedMessage.from_server(payload)
    return TaggedMessage.to_server(payload)
