from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sitemap_extractor.discovery.http_fetcher import DEFAULT_USER_AGENT
from sitemap_extractor.discovery.locator import DEFAULT_PROBE_TIMEOUT
from sitemap_extractor.discovery.models import DEFAULT_CANDIDATE_PATHS

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_HOST = "0.0.0.0"  # noqa: S104
DEFAULT_PORT = 8080


class ServiceConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    probe_timeout: float = Field(default=DEFAULT_PROBE_TIMEOUT, gt=0)
    resolve_timeout: float | None = Field(default=None, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    candidate_paths: tuple[str, ...] = DEFAULT_CANDIDATE_PATHS

    @field_validator("user_agent")
    @classmethod
    def _validate_user_agent(cls, value: str) -> str:
        if value.strip() == "":
            msg = "must be non-empty"
            raise ValueError(msg)
        return value

    @field_validator("candidate_paths")
    @classmethod
    def _validate_candidate_paths(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            msg = "must be non-empty"
            raise ValueError(msg)
        for path in value:
            if not path.startswith("/"):
                msg = f"must start with '/': {path!r}"
                raise ValueError(msg)
        return value

    @classmethod
    def from_raw(cls, data: Mapping[str, object]) -> ServiceConfig:
        return cls.model_validate(data)
