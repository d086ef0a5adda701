"""
The capture pipeline.

Each pull takes one frame from the source and runs it through
decapsulation, direction tagging, frame location, decoding and
normalization. Per-datagram problems yield an empty list and iteration goes
on; only the source running dry ends it.
"""
from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterator, Optional

from zwiftcap.capture.base import CaptureSource
from zwiftcap.capture.decapsulate import decapsulate
from zwiftcap.capture.live import LiveCapture
from zwiftcap.capture.offline import OfflineCapture
from zwiftcap.config import CaptureSettings, get_settings
from zwiftcap.domain.rider import RiderState, normalize
from zwiftcap.logging import create_logger
from zwiftcap.parsing.direction import SERVER_PORT, classify
from zwiftcap.parsing.framing.locate import TRAILER_LENGTH
from zwiftcap.parsing.messages import decode_tagged
from zwiftcap.parsing.outcome import DatagramResult, Outcome

LOGGER_NAME = "zwiftcap.capture"


def process_frame(
    frame: bytes,
    server_port: int = SERVER_PORT,
    trailer_length: int = TRAILER_LENGTH,
) -> DatagramResult:
    datagram = decapsulate(frame)
    if datagram is None:
        return DatagramResult(Outcome.NO_TRANSPORT)
    message = classify(datagram.source_port, datagram.destination_port, datagram.payload, server_port)
    decoded = decode_tagged(message, trailer_length=trailer_length)
    return DatagramResult(
        outcome=decoded.outcome,
        riders=normalize(decoded.entries),
        direction=message.direction,
        window=decoded.window,
    )


class ZwiftCapture:
    """
    Iterator over rider states, one list per captured datagram.

    Usage::

        with ZwiftCapture.from_file("ride.pcap") as capture:
            for riders in capture:
                ...
    """

    def __init__(
        self,
        source: CaptureSource,
        server_port: int = SERVER_PORT,
        trailer_length: int = TRAILER_LENGTH,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.source = source
        self.server_port = server_port
        self.trailer_length = trailer_length
        self.stats: Counter = Counter()
        self.logger = logger or create_logger(LOGGER_NAME, get_settings().log_ring_size)
        self._exhausted = False
        self._closed = False
        self.logger.info("capture_opened", extra={"details": {"source": source.description}})

    @classmethod
    def live(cls, interface: Optional[str] = None, settings: Optional[CaptureSettings] = None) -> "ZwiftCapture":
        settings = settings or get_settings()
        source = LiveCapture(
            interface=interface or settings.interface,
            server_port=settings.server_port,
            bpf_filter=settings.bpf_filter,
        )
        return cls(source, server_port=settings.server_port, trailer_length=settings.trailer_length)

    @classmethod
    def from_file(cls, path: str | Path, settings: Optional[CaptureSettings] = None) -> "ZwiftCapture":
        settings = settings or get_settings()
        source = OfflineCapture(path, server_port=settings.server_port)
        return cls(source, server_port=settings.server_port, trailer_length=settings.trailer_length)

    def _details(self) -> dict:
        return {
            "source": self.source.description,
            "stats": {outcome.value: count for outcome, count in self.stats.items()},
        }

    def next_result(self) -> Optional[DatagramResult]:
        """Pull one frame; ``None`` once the source is exhausted."""
        if self._exhausted or self._closed:
            return None
        frame = self.source.next_frame()
        if frame is None:
            self._exhausted = True
            self.logger.info("capture_exhausted", extra={"details": self._details()})
            return None
        result = process_frame(frame, self.server_port, self.trailer_length)
        self.stats[result.outcome] += 1
        return result

    def __iter__(self) -> "ZwiftCapture":
        return self

    def __next__(self) -> list[RiderState]:
        result = self.next_result()
        if result is None:
            raise StopIteration
        return result.riders

    def riders(self) -> Iterator[RiderState]:
        for batch in self:
            yield from batch

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.source.close()
        self.logger.info("capture_closed", extra={"details": self._details()})

    def __enter__(self) -> "ZwiftCapture":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
