import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException

from app.cargohub.core.error_catalog import AppError, ErrorCatalog, ErrorDefinition
from app.cargohub.core.metrics import metrics

logger = logging.getLogger(__name__)

# status -> code for errors raised by routing itself (unknown path, wrong method)
_ROUTING_ERROR_CODES = {
    400: "BAD_REQUEST",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}

_LOCK_TIMEOUT_MARKERS = ("lock timeout", "deadlock detected", "database is locked", "could not obtain lock")

# location prefixes that say where a field came from, not which field it is
_LOCATION_PARTS = {"body", "query", "path", "header"}


def _trace_id(request: Request) -> str:
    return getattr(request.state, "trace_id", "")


def _is_lock_timeout(exc: Exception) -> bool:
    if not isinstance(exc, OperationalError):
        return False
    message = str(exc).lower()
    return any(marker in message for marker in _LOCK_TIMEOUT_MARKERS)


def _validation_error_details(exc: RequestValidationError) -> dict:
    errors = []
    for error in exc.errors():
        loc = list(error.get("loc", []))
        field = ".".join(str(part) for part in loc if part not in _LOCATION_PARTS)
        errors.append(
            {
                "field": field or None,
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
                "loc": loc,
            }
        )
    return {"errors": errors}


def error_response(code: str, message: str, details: object, trace_id: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"code": code, "message": message, "details": details, "trace_id": trace_id},
    )


def _catalog_response(request: Request, error: ErrorDefinition, details: object, exc: Exception) -> JSONResponse:
    request.state.error_code = error.code
    request.state.error_class = exc.__class__.__name__
    return error_response(error.code, error.message, details, _trace_id(request), error.status_code)


def setup_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return _catalog_response(request, exc.error, exc.details, exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return _catalog_response(request, ErrorCatalog.VALIDATION_ERROR, _validation_error_details(exc), exc)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        code = _ROUTING_ERROR_CODES.get(exc.status_code, "HTTP_ERROR")
        request.state.error_code = code
        request.state.error_class = exc.__class__.__name__
        message = str(exc.detail) if exc.detail is not None else "HTTP error"
        return error_response(code, message, None, _trace_id(request), exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        details = {"type": exc.__class__.__name__}
        if _is_lock_timeout(exc):
            metrics.increment_lock_wait_timeout()
            logger.warning("Lock timeout on %s %s", request.method, request.url.path)
            return _catalog_response(request, ErrorCatalog.LOCK_TIMEOUT, details, exc)
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _catalog_response(request, ErrorCatalog.INTERNAL_ERROR, details, exc)
