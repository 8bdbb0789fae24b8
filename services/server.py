"""HTTP server exposing the Prometheus metrics endpoint."""
from __future__ import annotations

import asyncio
import logging
import time

from aiohttp import hdrs, web

from config import settings
from services.metrics import Metrics

logger = logging.getLogger(__name__)

METRICS_KEY = web.AppKey("metrics", Metrics)


def _route_name(request: web.Request) -> str:
    resource = request.match_info.route.resource
    if resource is None:
        return "unknown"
    return resource.canonical


@web.middleware
async def response_time_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Record every request in the duration histogram registered at startup."""
    started = time.perf_counter()
    status = 500
    try:
        response = await handler(request)
        status = response.status
        return response
    except web.HTTPException as exc:
        status = exc.status
        raise
    finally:
        elapsed = time.perf_counter() - started
        request.app[METRICS_KEY].observe_request(
            request.method, status, _route_name(request), elapsed
        )


async def metrics_handler(request: web.Request) -> web.Response:
    metrics = request.app[METRICS_KEY]
    try:
        body = metrics.render()
    except Exception:
        logger.exception("Error generating metrics")
        return web.Response(status=500, text="Error generating metrics")
    return web.Response(body=body, headers={hdrs.CONTENT_TYPE: metrics.content_type})


def create_app(metrics: Metrics | None = None) -> web.Application:
    app = web.Application(middlewares=[response_time_middleware])
    app[METRICS_KEY] = metrics or Metrics()
    app.router.add_get("/metrics", metrics_handler)
    return app


async def run_server(host: str | None = None, port: int | None = None) -> None:
    """Serve the application until the surrounding task is cancelled."""
    host = host or settings.HOST
    port = port or settings.PORT

    runner = web.AppRunner(create_app())
    await runner.setup()
    try:
        site = web.TCPSite(runner, host, port)
        await site.start()
        logger.info("Server listening on port %s", port)
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()


__all__ = ["METRICS_KEY", "create_app", "metrics_handler", "response_time_middleware", "run_server"]
