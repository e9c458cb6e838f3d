from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from .errors import ConfigError
from .models import ServiceConfig

if TYPE_CHECKING:
    from pathlib import Path


def _service_table(data: dict[str, Any]) -> dict[str, Any]:
    service = data.get("service", {})
    if not isinstance(service, dict):
        msg = "service must be a table"
        raise ConfigError(msg)
    return service


def load_config(path: Path) -> ServiceConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        msg = f"config not found: {path}"
        raise ConfigError(msg) from exc
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        msg = "toml parse error"
        raise ConfigError(msg) from exc

    service = _service_table(data)
    try:
        return ServiceConfig.from_raw(service)
    except ValidationError as exc:
        msg = f"invalid config: {path}"
        raise ConfigError(msg) from exc


def resolve_config(path: Path | None) -> ServiceConfig:
    if path is None:
        return ServiceConfig()
    return load_config(path)
