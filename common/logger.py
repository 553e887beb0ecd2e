import json
import logging
import time
from typing import Optional

logger = logging.getLogger("model_compare")
logger.setLevel(logging.INFO)

if not logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def _emit(level: int, event: str, fields: dict):
    entry = {"level": logging.getLevelName(level), "event": event, **fields}
    logger.log(level, json.dumps(entry, default=str))


def log_info(event: str, **kwargs):
    """Emit one JSON line per event. Never pass credentials or auth headers."""
    _emit(logging.INFO, event, kwargs)


def log_warning(event: str, **kwargs):
    _emit(logging.WARNING, event, kwargs)


def log_error(event: str, error_code: Optional[str] = None, **kwargs):
    """Emit a JSON error entry; error_code matches the code sent to the client."""
    _emit(logging.ERROR, event, {"error_code": error_code, **kwargs})


class Timer:
    """Context manager for measuring execution time in milliseconds."""

    def __enter__(self):
        self.start = time.time()
        return self

    def __exit__(self, *args):
        self.duration_ms = round((time.time() - self.start) * 1000, 2)
