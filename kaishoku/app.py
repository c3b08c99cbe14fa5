from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from .config import AppConfig, load_config
from .hotpepper.client import DirectorySearchError
from .shops.annotate import search_and_annotate
from .shops.models import ErrorResponse, SearchCriteria, ShopsResponse
from .shops.options import form_options

logger = logging.getLogger(__name__)

_STATIC_DIR = Path(__file__).resolve().parent / "static"

KEYWORD_REQUIRED = "Keyword is required."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _describe_validation_error(errors: list) -> str:
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("query", "body"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request."


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_http_client(request: Request) -> httpx.Client:
    return request.app.state.http_client


def create_app(
    config: AppConfig | None = None,
    http_client: httpx.Client | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> FastAPI:
    """
    Build the FastAPI application.

    Without an explicit ``config`` the environment is read at startup, and a
    missing API key stops the server from starting.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owns_client = False
        if getattr(app.state, "config", None) is None:
            app.state.config = load_config()
        if getattr(app.state, "http_client", None) is None:
            app.state.http_client = httpx.Client()
            owns_client = True
        try:
            yield
        finally:
            if owns_client:
                app.state.http_client.close()
                app.state.http_client = None

    app = FastAPI(title="Kaishoku-kun", version="1.0.0", lifespan=lifespan)
    app.state.config = config
    app.state.http_client = http_client
    app.state.sleep = sleep

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, _describe_validation_error(exc.errors()))

    @app.exception_handler(DirectorySearchError)
    async def _directory_error(request: Request, exc: DirectorySearchError) -> JSONResponse:
        logger.error("Shop search failed: %s", exc)
        return _error(500, str(exc))

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/metadata")
    def metadata() -> dict:
        return form_options()

    @app.get(
        "/api/shops",
        response_model=ShopsResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def shops(
        request: Request,
        keyword: str | None = None,
        budget: str = "",
        smoking: str = "",
        count: str | None = None,
        start: str | None = None,
        config: AppConfig = Depends(get_config),
        client: httpx.Client = Depends(get_http_client),
    ):
        if not keyword or not keyword.strip():
            return _error(400, KEYWORD_REQUIRED)

        # Empty count/start fall back to the defaults.
        params = {"keyword": keyword, "budget": budget, "smoking": smoking}
        if count:
            params["count"] = count
        if start:
            params["start"] = start
        try:
            criteria = SearchCriteria(**params)
        except ValidationError as exc:
            return _error(400, _describe_validation_error(exc.errors()))

        annotated = search_and_annotate(criteria, config, client, sleep=request.app.state.sleep)
        return ShopsResponse(shops=annotated)

    # ── Presentation client ──────────────────────────────────────────────

    app.mount("/static", StaticFiles(directory=str(_STATIC_DIR)), name="static")

    @app.get("/")
    def root():
        return FileResponse(str(_STATIC_DIR / "index.html"))

    return app


app = create_app()
