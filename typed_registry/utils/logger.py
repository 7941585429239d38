import json
import logging
import sys
import time
from typing import Any

_RESERVED = {
    "name",
    "msg",
    "args",
    "levelname",
    "levelno",
    "pathname",
    "filename",
    "module",
    "exc_info",
    "exc_text",
    "stack_info",
    "lineno",
    "funcName",
    "created",
    "msecs",
    "relativeCreated",
    "thread",
    "threadName",
    "processName",
    "process",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """JSON log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        super().__init__()
        self.utc = utc

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": self._timestamp(record.created),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        extras = {k: v for k, v in record.__dict__.items() if k not in _RESERVED}
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)

    def _timestamp(self, created: float) -> str:
        if self.utc:
            return time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(created))
        return time.strftime("%Y-%m-%dT%H:%M:%S%z", time.localtime(created))


class PlainFormatter(logging.Formatter):
    """Plain text log formatter."""

    def __init__(self, *, utc: bool = True) -> None:
        dtfmt = "%Y-%m-%dT%H:%M:%SZ" if utc else "%Y-%m-%d %H:%M:%S%z"
        super().__init__(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt=dtfmt)
        self.converter = time.gmtime if utc else time.localtime


def get_logger(name: str | None = None) -> logging.Logger:
    """Returns a namespaced logger."""
    return logging.getLogger(name or "typed_registry")


def configure_logging(
    *,
    level: str | None = None,
    fmt: str | None = None,
    utc: bool | None = None,
    include_uvicorn: bool = True,
) -> None:
    """Configures root logging from arguments, falling back to LOG_LEVEL, LOG_FORMAT and LOG_UTC."""
    from ..helpers import typed_env, typed_env_string

    env = typed_env()
    level_str = (level if level is not None else env.get_string_or("LOG_LEVEL", "INFO") or "INFO").upper()
    fmt_str = (fmt if fmt is not None else env.get_string_or("LOG_FORMAT", "plain") or "plain").lower()
    use_utc = utc if utc is not None else typed_env_string().get_string_or("LOG_UTC", "1") == "1"

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    root.setLevel(getattr(logging, level_str, logging.INFO))

    handler = logging.StreamHandler(stream=sys.stdout)
    if fmt_str == "json":
        handler.setFormatter(JsonFormatter(utc=use_utc))
    else:
        handler.setFormatter(PlainFormatter(utc=use_utc))

    root.addHandler(handler)

    if include_uvicorn:
        for lname in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            lg = logging.getLogger(lname)
            lg.handlers = []
            lg.propagate = True
            lg.setLevel(getattr(logging, level_str, logging.INFO))

    log = get_logger("typed_registry.boot")
    log.info("logging configured", extra={"level": level_str, "format": fmt_str, "utc": use_utc})
