from __future__ import annotations

from pathlib import Path
from typing import Optional

from scapy.error import Scapy_Exception
from scapy.layers.inet import IP, UDP
from scapy.layers.inet6 import IPv6
from scapy.layers.l2 import Ether
from scapy.utils import PcapReader

from zwiftcap.capture.base import CaptureOpenError, CaptureSource
from zwiftcap.parsing.direction import SERVER_PORT

ETHERTYPE_IPV4 = 0x0800
ETHERTYPE_IPV6 = 0x86DD
NULL_MAC = "00:00:00:00:00:00"


def as_ethernet(packet) -> Optional[bytes]:
    """
    Raw Ethernet bytes for a packet read from any link type.

    Ethernet packets are returned as recorded. Others (Linux cooked captures
    from ``tcpdump -i any``, raw IP) get their IP layer re-framed behind a
    null Ethernet header, since the decoding pipeline only dissects Ethernet.
    """
    if isinstance(packet, Ether):
        return bytes(packet)
    if IP in packet:
        return bytes(Ether(src=NULL_MAC, dst=NULL_MAC, type=ETHERTYPE_IPV4) / packet[IP])
    if IPv6 in packet:
        return bytes(Ether(src=NULL_MAC, dst=NULL_MAC, type=ETHERTYPE_IPV6) / packet[IPv6])
    return None


class OfflineCapture(CaptureSource):
    """
    Frames from a recorded pcap or pcapng file.

    Frames that are not UDP to or from ``server_port`` are skipped, which
    mirrors the ``udp port`` filter used for live captures. Frames are handed
    out as Ethernet whatever the file's link type.
    """

    def __init__(self, path: str | Path, server_port: int = SERVER_PORT) -> None:
        self.path = Path(path)
        self.server_port = server_port
        self.description = f"file:{self.path}"
        try:
            self._reader = PcapReader(str(self.path))
        except (OSError, Scapy_Exception) as exc:
            raise CaptureOpenError(f"Could not open capture file {self.path}: {exc}") from exc
        self._closed = False

    def _wanted(self, packet) -> bool:
        if UDP not in packet:
            return False
        udp = packet[UDP]
        return self.server_port in (udp.sport, udp.dport)

    def next_frame(self) -> Optional[bytes]:
        if self._closed:
            return None
        while True:
            try:
                packet = self._reader.read_packet()
            except EOFError:
                return None
            if packet is None:
                return None
            if self._wanted(packet):
                frame = as_ethernet(packet)
                if frame is not None:
                    return frame

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._reader.close()
