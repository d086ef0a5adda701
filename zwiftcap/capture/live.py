from __future__ import annotations

from typing import Optional

from scapy.config import conf
from scapy.error import Scapy_Exception

from zwiftcap.capture.base import CaptureOpenError, CaptureSource
from zwiftcap.parsing.direction import SERVER_PORT


class LiveCapture(CaptureSource):
    """Frames from a network interface, restricted by a BPF port filter."""

    def __init__(
        self,
        interface: Optional[str] = None,
        server_port: int = SERVER_PORT,
        bpf_filter: Optional[str] = None,
    ) -> None:
        self.interface = interface or conf.iface
        self.bpf_filter = bpf_filter or f"udp port {server_port}"
        self.description = f"live:{self.interface}"
        try:
            self._socket = conf.L2listen(iface=self.interface, filter=self.bpf_filter)
        except (OSError, Scapy_Exception) as exc:
            raise CaptureOpenError(
                f"Could not open live capture on {self.interface!s} with filter '{self.bpf_filter}': {exc}"
            ) from exc
        self._closed = False

    def next_frame(self) -> Optional[bytes]:
        if self._closed:
            return None
        while True:
            try:
                packet = self._socket.recv()
            except OSError:
                if self._closed:
                    return None
                # unreadable frame, the caller just gets nothing this cycle
                return b""
            if packet is not None:
                return bytes(packet)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._socket.close()
