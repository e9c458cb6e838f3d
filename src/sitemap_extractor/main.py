from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
import uvicorn

from sitemap_extractor.api import create_app
from sitemap_extractor.config import ConfigError, ServiceConfig, resolve_config
from sitemap_extractor.discovery import RequestKind, SitemapError, build_client, build_extractor
from sitemap_extractor.observability import configure_logging, get_logger

if TYPE_CHECKING:
    from sitemap_extractor.discovery import ExtractionResult

logger = get_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

ConfigOption = Annotated[Path | None, typer.Option("-c", "--config", help="TOML file with a [service] table")]


def _load(config_path: Path | None) -> ServiceConfig:
    try:
        return resolve_config(config_path)
    except ConfigError as exc:
        logger.error("config_invalid", path=str(config_path), error=str(exc))
        raise typer.Exit(code=1) from exc


@app.command()
def serve(
    config: ConfigOption = None,
    host: Annotated[str | None, typer.Option(help="Bind address (overrides config)")] = None,
    port: Annotated[int | None, typer.Option(help="Bind port (overrides config)")] = None,
) -> None:
    """Run the HTTP service."""
    configure_logging()
    service_config = _load(config)
    bind_host = host or service_config.host
    bind_port = port or service_config.port
    logger.info("server_starting", host=bind_host, port=bind_port)
    uvicorn.run(create_app(service_config), host=bind_host, port=bind_port, log_config=None)


@app.command()
def domain(
    name: Annotated[str, typer.Argument(help="Domain or URL to discover the sitemap of")],
    config: ConfigOption = None,
) -> None:
    """Locate the sitemap of a domain and print every URL it lists."""
    configure_logging()
    _emit(_run(RequestKind.DOMAIN, name, _load(config)))


@app.command()
def sitemap(
    address: Annotated[str, typer.Argument(help="Absolute sitemap URL")],
    config: ConfigOption = None,
) -> None:
    """Resolve a sitemap address and print every URL it lists."""
    configure_logging()
    _emit(_run(RequestKind.SITEMAP, address, _load(config)))


def _run(kind: RequestKind, value: str, config: ServiceConfig) -> ExtractionResult:
    try:
        return asyncio.run(_extract(kind, value, config))
    except SitemapError as exc:
        logger.error("extraction_failed", type=kind.value, value=value, error=str(exc), kind=type(exc).__name__)
        raise typer.Exit(code=1) from exc


async def _extract(kind: RequestKind, value: str, config: ServiceConfig) -> ExtractionResult:
    async with build_client(user_agent=config.user_agent, timeout=config.resolve_timeout) as client:
        extractor = build_extractor(client, config)
        if kind is RequestKind.DOMAIN:
            return await extractor.from_domain(value)
        return await extractor.from_sitemap(value)


def _emit(result: ExtractionResult) -> None:
    typer.echo(json.dumps(result.to_payload(), ensure_ascii=False))


if __name__ == "__main__":
    app()
