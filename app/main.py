from fastapi import FastAPI

from app.cargohub.api import api_router
from app.cargohub.core.config import settings
from app.cargohub.core.errors import setup_exception_handlers
from app.cargohub.core.logging import configure_logging
from app.cargohub.middleware.request_logging import RequestLoggingMiddleware


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title=f"{settings.APP_NAME} API", version="2.0.0")
    app.add_middleware(RequestLoggingMiddleware)
    setup_exception_handlers(app)
    app.include_router(api_router)
    return app


app = create_app()
