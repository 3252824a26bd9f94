"""
Process-wide diagnostic sink for decode failures.

All selectors report to one logger. A ``RingBufferHandler`` keeps the most
recent events in memory so hosts (and tests) can inspect them without
configuring logging output.
"""
import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from mielelink.config import get_settings
from mielelink.const import DIAGNOSTICS_LOGGER_NAME

_setup_lock = threading.Lock()


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str, ring_size: int, level: str | int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    with _setup_lock:
        logger.setLevel(level)
        if logger.handlers:
            return logger
        handler = RingBufferHandler(max_entries=ring_size)
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger


def get_diagnostics() -> logging.Logger:
    """
    Return the shared sink, applying the current log level.

    The ring buffer size is fixed when the sink is first created.
    """
    settings = get_settings()
    return create_logger(DIAGNOSTICS_LOGGER_NAME, settings.log_ring_size, settings.log_level)


def _ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def get_events(logger: Optional[logging.Logger] = None) -> List[Dict]:
    """Return the buffered events of *logger* (the shared sink by default)."""
    handler = _ring_buffer(logger or get_diagnostics())
    return handler.get_events() if handler else []


def clear_events(logger: Optional[logging.Logger] = None) -> None:
    handler = _ring_buffer(logger or get_diagnostics())
    if handler:
        handler.clear()
