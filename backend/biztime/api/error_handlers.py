"""Global exception handlers: every failure leaves the API as the same envelope.

- BizTimeError -> its own code/status
- RequestValidationError -> ValidationError (422) with field details
- Starlette HTTPException (no route, method not allowed) -> 404 "Not Found"
- Exception -> InternalError (500), never the exception text
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from biztime.core.errors import BizTimeError, InternalError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _respond(exc: BizTimeError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=exc.to_response())


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(BizTimeError)
    async def biztime_error_handler(request: Request, exc: BizTimeError):
        if exc.status >= 500:
            logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        else:
            logger.info("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)
        return _respond(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ]
        logger.warning("Validation error on %s %s: %s", request.method, request.url.path, details)
        return _respond(ValidationError(details=details))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # 404 e 405 do roteador: ninguém atende essa rota
        if exc.status_code in (404, 405):
            return _respond(NotFoundError("Not Found"))

        err = BizTimeError(str(exc.detail), status=exc.status_code)
        err.code = "HTTP_ERROR"
        return _respond(err)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return _respond(InternalError())
