"""Browser preview adapter: a FastAPI app standing in for the webview host."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Optional
from urllib.parse import SplitResult, quote, urlsplit

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import (
    JSONResponse,
    PlainTextResponse,
    RedirectResponse,
    Response,
    StreamingResponse,
)
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel

from .config import host_config
from .session import VirtualHostSession


logger = logging.getLogger("vhost.api")

CHUNK_SIZE = 64 * 1024
INTERNAL_PREFIX = "/__vhost"


class HealthResponse(BaseModel):
    ok: bool = True
    started: bool
    content_root: str
    start_uri: Optional[str] = None


def _iter_body(body: BinaryIO) -> Iterator[bytes]:
    try:
        while True:
            chunk = body.read(CHUNK_SIZE)
            if not chunk:
                break
            yield chunk
    finally:
        body.close()


def _request_path(request: Request) -> str:
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1").partition("?")[0]
    return quote(request.scope["path"], safe="/")


def create_app(session: Optional[VirtualHostSession] = None) -> FastAPI:
    owns_session = session is None
    if session is None:
        cfg = host_config()
        session = VirtualHostSession(cfg.start_page, content_host=cfg.content_host)

    app = FastAPI(title="vhost")
    app.state.session = session
    app.state.start_uri = None

    def _on_navigate(uri: str) -> None:
        app.state.start_uri = uri

    unsubscribe = session.subscribe(_on_navigate)

    @app.on_event("startup")
    async def _startup() -> None:
        if session.has_started:
            logger.warning("event=session_already_started host=%s", session.content_host)
            app.state.start_uri = session.start_uri
            return
        session.start()
        logger.info(
            "event=preview_ready root=%s start_uri=%s",
            session.content_root_path,
            app.state.start_uri,
        )

    @app.on_event("shutdown")
    async def _shutdown() -> None:
        unsubscribe()
        if owns_session:
            session.dispose()

    @app.get("/", include_in_schema=False)
    async def index():
        if app.state.start_uri is None:
            raise HTTPException(status_code=503, detail="session_not_started")
        return RedirectResponse(urlsplit(app.state.start_uri).path, status_code=307)

    @app.get(f"{INTERNAL_PREFIX}/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            started=session.has_started,
            content_root=str(session.content_root_path),
            start_uri=app.state.start_uri,
        )

    @app.get(f"{INTERNAL_PREFIX}/metrics")
    async def metrics():
        data = generate_latest()
        return PlainTextResponse(data.decode("utf-8"), media_type=CONTENT_TYPE_LATEST)

    @app.get("/{path:path}", include_in_schema=False)
    def serve(path: str, request: Request):
        uri = SplitResult("https", session.content_host, _request_path(request), "", "")
        matched, resolved = session.try_resolve(uri)
        if not matched or resolved is None:
            # Every path is rewritten onto the virtual host, so this is a wiring bug
            logger.error("event=virtual_host_mismatch uri=%s", uri.geturl())
            return JSONResponse({"error": "virtual_host_mismatch"}, status_code=502)

        headers = dict(resolved.headers)
        if resolved.status_code != 200:
            with resolved:
                content = resolved.body.read()
            return Response(
                content,
                status_code=resolved.status_code,
                headers=headers,
            )
        return StreamingResponse(
            _iter_body(resolved.body),
            status_code=resolved.status_code,
            headers=headers,
        )

    return app


__all__ = ["create_app"]
