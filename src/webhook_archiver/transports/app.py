from __future__ import annotations

import contextlib
from typing import Any, Dict, Optional

from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from ..errors import ArchiverError
from ..pipeline import WebhookPipeline
from ..settings import Settings
from ..utils.logging import get_logger

logger = get_logger("webhook_archiver.app")


def _safe_cfg_snapshot(s: Settings) -> Dict[str, Any]:
    return {
        "host": s.host,
        "port": s.port,
        "repo_path": s.repo_path,
        "output_dir": s.output_dir or "<cwd>",
        "archive_ext": s.archive_ext,
        "serialize_per_repo": s.serialize_per_repo,
        "ftp_enabled": s.publish_enabled,
        "ftp_host": s.ftp_host,
        "ftp_remote_dir": s.ftp_remote_dir,
    }


async def health(_request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"}, status_code=200)


async def webhook(request: Request) -> PlainTextResponse | JSONResponse:
    pipeline: WebhookPipeline = request.app.state.pipeline
    logger.info("Received webhook request")

    try:
        payload = await request.json()
    except ValueError as e:
        # Unparseable bodies are treated like a push with no commits
        logger.warning("Webhook body is not valid JSON", error=str(e))
        payload = {}

    try:
        report = await run_in_threadpool(pipeline.run, payload)
    except ArchiverError as e:
        logger.exception("Webhook processing failed", code=e.code, **e.data)
        return JSONResponse({"error": e.to_dict()}, status_code=500)

    logger.info(
        "Webhook processed",
        sync=report.sync.status.value,
        files=len(report.changes),
        archives=[j.archive_path for j in report.jobs],
    )
    return PlainTextResponse("Webhook processed", status_code=200)


def create_app(
    settings: Optional[Settings] = None,
    pipeline: Optional[WebhookPipeline] = None,
) -> Starlette:
    settings = settings or Settings.from_env()
    pipeline = pipeline or WebhookPipeline(settings, logger=get_logger("webhook_archiver.pipeline"))

    @contextlib.asynccontextmanager
    async def lifespan(_app: Starlette):
        logger.info("Webhook archiver started", **_safe_cfg_snapshot(settings))
        yield

    routes = [
        Route("/health", endpoint=health, methods=["GET"]),
        Route("/webhook", endpoint=webhook, methods=["POST"]),
    ]

    app = Starlette(routes=routes, lifespan=lifespan)
    app.state.settings = settings
    app.state.pipeline = pipeline
    return app
