import logging
import threading
from collections import deque
from typing import Any, Deque, Dict, List


class RingBufferHandler(logging.Handler):
    """
    Keeps the latest capture events in memory.

    Each event is a dict with ``event``, ``level``, ``ts`` and ``details``.
    Outcome counters passed as ``details["stats"]`` are merged into
    ``details`` so an event reads like ``{"source": ..., "records": 3}``.
    """

    def __init__(self, max_entries: int = 200):
        super().__init__()
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    @property
    def max_entries(self) -> int:
        return self._events.maxlen

    def resize(self, max_entries: int) -> None:
        with self._lock:
            if max_entries != self._events.maxlen:
                self._events = deque(self._events, maxlen=max_entries)

    def emit(self, record: logging.LogRecord) -> None:
        details: Dict[str, Any] = dict(getattr(record, "details", {}) or {})
        details.update(details.pop("stats", {}) or {})
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": details,
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)


def ring_buffer(logger: logging.Logger) -> RingBufferHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def create_logger(name: str, ring_size: int) -> logging.Logger:
    logger = logging.getLogger(name)
    handler = ring_buffer(logger)
    if handler is not None:
        handler.resize(ring_size)
        return logger
    logger.setLevel(logging.INFO)
    logger.addHandler(RingBufferHandler(max_entries=ring_size))
    logger.propagate = False
    return logger
