from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Optional

from scapy.error import Scapy_Exception
from scapy.layers.inet import UDP
from scapy.layers.l2 import Ether

UDP_HEADER_LENGTH = 8


@dataclass(frozen=True)
class UdpDatagram:
    source_port: int
    destination_port: int
    payload: bytes


def decapsulate(frame: bytes) -> Optional[UdpDatagram]:
    """
    Strip Ethernet, IP and UDP headers off a raw frame.

    Frames are always dissected as Ethernet. Captures with another link
    type (for example Linux cooked captures from ``tcpdump -i any``) come
    back as ``None`` for every frame.

    Returns:
        The UDP ports and payload, or ``None`` if the frame is too short or
        carries no UDP transport.
    """
    if not frame:
        return None
    try:
        packet = Ether(frame)
    except (struct.error, Scapy_Exception):
        return None
    if UDP not in packet:
        return None
    udp = packet[UDP]
    # original excludes link-layer padding; len bounds the payload itself
    raw = udp.original or bytes(udp)
    end = udp.len if udp.len else len(raw)
    return UdpDatagram(udp.sport, udp.dport, bytes(raw[UDP_HEADER_LENGTH:end]))
