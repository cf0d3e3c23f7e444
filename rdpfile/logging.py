import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

from rdpfile.config import get_settings
from rdpfile.domain.keys import SENSITIVE_KEYS

LOGGER_NAME = "rdpfile"
REDACTED_FIELDS = {"line", "field"}


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


def create_logger(name: str, ring_size: int, level: str = "INFO") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(level.upper())
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def get_logger() -> logging.Logger:
    settings = get_settings()
    return create_logger(LOGGER_NAME, settings.log_ring_size, settings.log_level)


def get_ring_buffer(logger: Optional[logging.Logger] = None) -> Optional[RingBufferHandler]:
    logger = logger or get_logger()
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    if not get_settings().redact_secrets or details.get("key") not in SENSITIVE_KEYS:
        return dict(details)
    cleaned = {}
    for key, value in details.items():
        if key in REDACTED_FIELDS:
            cleaned[key] = "***"
        else:
            cleaned[key] = value
    return cleaned


def log_event(logger: logging.Logger, event: str, details: Optional[dict] = None, level: int = logging.INFO) -> None:
    logger.log(level, event, extra={"details": redact(details)})
