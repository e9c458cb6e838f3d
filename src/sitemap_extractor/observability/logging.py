from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Any, cast

import structlog

if TYPE_CHECKING:
    from collections.abc import MutableMapping

_SECRET_KEY_PATTERN = re.compile(r"(token|api_key|apikey|authorization|cookie|secret|password)", re.IGNORECASE)
_URL_SECRET_PATTERN = re.compile(r"(token|api_key|apikey|access_token)=([^&\s]+)")
_USERINFO_PATTERN = re.compile(r"(https?://)[^/@\s]+@")
_CONTROL_CHARS = {code: f"\\x{code:02x}" for code in [*range(0x20), 0x7F]} | {
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}
_MAX_VALUE_LENGTH = 4000
_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


def _mask_text(text: str) -> str:
    masked = _USERINFO_PATTERN.sub(r"\1***@", _URL_SECRET_PATTERN.sub(r"\1=***", text.translate(_CONTROL_CHARS)))
    if len(masked) > _MAX_VALUE_LENGTH:
        return f"{masked[:_MAX_VALUE_LENGTH]}..."
    return masked


def _sanitize_value(value: object) -> object:
    match value:
        case str():
            return _mask_text(value)
        case bool() | int() | float() | None:
            return value
        case dict():
            return {key: _sanitize_value(val) for key, val in value.items()}
        case list() | tuple() | set() | frozenset():
            return [_sanitize_value(val) for val in value]
        case _:
            return _mask_text(str(value))


def _sanitize_event(_: object, __: object, event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    return {key: "***" if _SECRET_KEY_PATTERN.search(key) else _sanitize_value(value) for key, value in event_dict.items()}


def parse_level() -> str:
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    return level if level in _LEVELS else "INFO"


def configure_logging() -> structlog.BoundLogger:
    """Configure structlog from LOG_FORMAT (json or console) and LOG_LEVEL."""
    renderer: structlog.types.Processor
    if os.environ.get("LOG_FORMAT", "json").lower() == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    structlog.configure(
        processors=[
            _sanitize_event,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.add_log_level,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(parse_level()),
        cache_logger_on_first_use=True,
    )

    return cast("structlog.BoundLogger", structlog.get_logger())


def get_logger(name: str) -> structlog.BoundLogger:
    return cast("structlog.BoundLogger", structlog.get_logger(name))
