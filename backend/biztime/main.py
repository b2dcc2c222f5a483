import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from biztime.core.settings import Settings, get_settings
from biztime.core.observability import setup_logging
from biztime.db import Database

from biztime.api.error_handlers import register_error_handlers
from biztime.api.company import router as company_router
from biztime.api.invoice import router as invoice_router

VERSION = "0.1.0"

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("biztime.access")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
        if settings.DB_CREATE_TABLES:
            db.create_all()
        app.state.db = db
        logger.info("BizTime API started env=%s", settings.ENV)
        try:
            yield
        finally:
            db.dispose()
            logger.info("BizTime API shut down")

    app = FastAPI(title=settings.APP_NAME, version=VERSION, lifespan=lifespan)
    app.state.settings = settings

    if settings.ACCESS_LOG:

        @app.middleware("http")
        async def access_log(request: Request, call_next):
            start = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - start) * 1000
            access_logger.info(
                "%s %s %s %.1fms", request.method, request.url.path, response.status_code, elapsed_ms
            )
            return response

    register_error_handlers(app)

    app.include_router(company_router)
    app.include_router(invoice_router)

    @app.get("/health")
    def health():
        return {
            "ok": True,
            "service": "biztime",
            "env": settings.ENV,
            "version": VERSION,
        }

    return app
