from __future__ import annotations

import json
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sitemap_extractor.config import ServiceConfig
from sitemap_extractor.discovery import (
    InvalidSitemapUrlError,
    RequestKind,
    SitemapError,
    build_client,
    build_extractor,
)
from sitemap_extractor.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    import httpx

    from sitemap_extractor.discovery import ExtractionResult, SitemapExtractor

logger = get_logger(__name__)

USAGE_TEXT = 'To request URLs, POST the link to /sitemap as {"sitemap":"https://example.com/sitemap.xml"}'
PONG_TEXT = "Pong!"


class RequestRejectedError(Exception):
    def __init__(self, status: HTTPStatus, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(message)


def create_app(config: ServiceConfig | None = None, *, client: httpx.AsyncClient | None = None) -> FastAPI:
    """Build the service; without `client` the app lifespan owns one."""
    config = config or ServiceConfig()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if client is not None:
            yield
            return
        async with build_client(user_agent=config.user_agent, timeout=config.resolve_timeout) as owned:
            app.state.extractor = build_extractor(owned, config)
            yield

    app = FastAPI(title="sitemap-extractor", lifespan=lifespan)
    if client is not None:
        app.state.extractor = build_extractor(client, config)

    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _plain_http_error(_: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        if exc.status_code == HTTPStatus.NOT_FOUND:
            return PlainTextResponse(USAGE_TEXT)
        message = "Method not allowed" if exc.status_code == HTTPStatus.METHOD_NOT_ALLOWED else str(exc.detail)
        return PlainTextResponse(message, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestRejectedError)
    async def _rejected(_: Request, exc: RequestRejectedError) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=exc.status)

    @app.post("/sitemap")
    async def sitemap_endpoint(request: Request) -> JSONResponse:
        return await _handle(request, RequestKind.SITEMAP)

    @app.post("/domain")
    async def domain_endpoint(request: Request) -> JSONResponse:
        return await _handle(request, RequestKind.DOMAIN)

    @app.get("/ping", response_class=PlainTextResponse)
    async def ping() -> str:
        return PONG_TEXT

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return USAGE_TEXT


async def _handle(request: Request, kind: RequestKind) -> JSONResponse:
    payload = await _read_payload(request)
    field = kind.value
    if field not in payload:
        raise RequestRejectedError(HTTPStatus.BAD_REQUEST, f"Missing '{field}' field in JSON payload")

    value = payload[field]
    logger.info("request_received", type=field, value=value)

    extractor: SitemapExtractor = request.app.state.extractor
    result = await _extract(extractor, kind, value)
    return JSONResponse(result.to_payload())


async def _read_payload(request: Request) -> dict[str, str]:
    body = await request.body()
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RequestRejectedError(HTTPStatus.BAD_REQUEST, "Invalid JSON payload") from exc
    # A JSON null carries no fields.
    if payload is None:
        return {}
    if not isinstance(payload, dict) or not all(isinstance(value, str) for value in payload.values()):
        raise RequestRejectedError(HTTPStatus.BAD_REQUEST, "Invalid JSON payload")
    return payload


async def _extract(extractor: SitemapExtractor, kind: RequestKind, value: str) -> ExtractionResult:
    if kind is RequestKind.DOMAIN:
        return await _extract_domain(extractor, value)
    try:
        return await extractor.from_sitemap(value)
    except InvalidSitemapUrlError as exc:
        raise RequestRejectedError(HTTPStatus.BAD_REQUEST, "Invalid URL") from exc
    except SitemapError as exc:
        logger.warning("sitemap_resolve_failed", sitemap_url=value, error=str(exc), kind=type(exc).__name__)
        raise RequestRejectedError(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to parse sitemap") from exc


async def _extract_domain(extractor: SitemapExtractor, domain: str) -> ExtractionResult:
    # Locate and resolve failures are reported differently.
    try:
        sitemap_url = await extractor.locate(domain)
    except SitemapError as exc:
        logger.warning("sitemap_locate_failed", domain=domain, error=str(exc), kind=type(exc).__name__)
        raise RequestRejectedError(HTTPStatus.INTERNAL_SERVER_ERROR, str(exc)) from exc
    try:
        return await extractor.from_located(sitemap_url)
    except SitemapError as exc:
        logger.warning("sitemap_resolve_failed", sitemap_url=sitemap_url, error=str(exc), kind=type(exc).__name__)
        raise RequestRejectedError(HTTPStatus.INTERNAL_SERVER_ERROR, "Failed to parse sitemap") from exc
