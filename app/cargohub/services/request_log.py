import logging
from dataclasses import dataclass
from datetime import datetime

from app.cargohub.core.config import settings
from app.cargohub.db.models import RequestLog
from app.cargohub.repos.request_logs import RequestLogRepository

logger = logging.getLogger(__name__)


@dataclass
class RequestLogPayload:
    api_key: str | None
    method: str
    path: str
    status_code: int
    trace_id: str | None
    request_body: str | None


class RequestLogService:
    """Best-effort persistence of the per-request log.

    Strategy: failures are logged and swallowed to avoid breaking request flows.
    """

    def __init__(self, db):
        self.repo = RequestLogRepository(db)

    def record(self, payload: RequestLogPayload) -> None:
        body = payload.request_body
        if body is not None and len(body) > settings.REQUEST_LOG_MAX_BODY:
            body = body[: settings.REQUEST_LOG_MAX_BODY]
        try:
            self.repo.create(
                RequestLog(
                    api_key=payload.api_key or "Unknown",
                    method=payload.method,
                    path=payload.path,
                    status_code=payload.status_code,
                    trace_id=payload.trace_id,
                    request_body=body or None,
                    created_at=datetime.utcnow(),
                )
            )
        except Exception:
            logger.exception(
                "Failed to write request log",
                extra={"method": payload.method, "path": payload.path, "trace_id": payload.trace_id},
            )
