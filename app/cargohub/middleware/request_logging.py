from __future__ import annotations

import logging
import time
import uuid

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from app.cargohub.core.config import settings
from app.cargohub.core.logging import log_json
from app.cargohub.core.metrics import metrics
from app.cargohub.db import session as db_session
from app.cargohub.services.request_log import RequestLogPayload, RequestLogService

logger = logging.getLogger("cargohub.request")

TRACE_HEADER = "X-Trace-ID"
_UNLOGGED_PATHS = {"/health", "/ready", "/api/ops/metrics"}


def build_request_log_payload(
    *,
    request: Request,
    response: Response | None,
    latency_ms: float,
) -> dict:
    route = None
    scope_route = request.scope.get("route")
    if scope_route is not None:
        route = getattr(scope_route, "path", None)
    route = route or request.url.path
    status_code = getattr(response, "status_code", 500)
    return {
        "event": "http_request",
        "trace_id": getattr(request.state, "trace_id", ""),
        "route": route,
        "method": request.method,
        "status_code": status_code,
        "latency_ms": round(latency_ms, 2),
        "api_key_present": bool(request.headers.get(settings.API_KEY_HEADER)),
        "error_code": getattr(request.state, "error_code", None),
        "error_class": getattr(request.state, "error_class", None),
    }


def _persist_request_log(payload: RequestLogPayload) -> None:
    db = db_session.SessionLocal()
    try:
        RequestLogService(db).record(payload)
    finally:
        db.close()


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Trace id propagation, JSON access log, metrics and the persisted request log."""

    async def dispatch(self, request: Request, call_next):
        trace_id = request.headers.get(TRACE_HEADER) or str(uuid.uuid4())
        request.state.trace_id = trace_id
        body = None
        if request.method != "GET":
            body = (await request.body()).decode("utf-8", errors="replace")

        start_time = time.perf_counter()
        response: Response | None = None
        try:
            response = await call_next(request)
            response.headers[TRACE_HEADER] = trace_id
            return response
        finally:
            latency_ms = (time.perf_counter() - start_time) * 1000
            payload = build_request_log_payload(request=request, response=response, latency_ms=latency_ms)
            log_json(logger, payload)
            metrics.record_http_request(
                route=payload["route"],
                method=payload["method"],
                status_code=payload["status_code"],
                latency_ms=latency_ms,
            )
            if settings.REQUEST_LOG_ENABLED and request.url.path not in _UNLOGGED_PATHS:
                await run_in_threadpool(
                    _persist_request_log,
                    RequestLogPayload(
                        api_key=request.headers.get(settings.API_KEY_HEADER),
                        method=request.method,
                        path=request.url.path,
                        status_code=payload["status_code"],
                        trace_id=trace_id,
                        request_body=body,
                    ),
                )
