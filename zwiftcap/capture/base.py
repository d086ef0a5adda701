from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class CaptureOpenError(OSError):
    """The capture source could not be opened."""


class CaptureSource(ABC):
    """
    Anything that hands out raw Ethernet frames one at a time.

    ``next_frame`` blocks until a frame is available and returns ``None``
    once the source is exhausted. A source has a single owner and is not
    safe to share between threads.
    """

    description: str = "capture"

    @abstractmethod
    def next_frame(self) -> Optional[bytes]:
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
