"""Глобальные обработчики ошибок.

Все ответы об ошибках имеют вид {"error": ...}:
    - RequestValidationError (битый JSON) -> 400 со списком issues
    - HTTPException фреймворка (404 маршрута, 405) -> статус и причина
    - любое другое исключение -> 500 без внутренних деталей
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ...application.validation import issue_from_error

logger = structlog.get_logger()


def register_error_handlers(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        issues = [issue_from_error(err).to_dict() for err in exc.errors()]
        logger.warning("request_validation_failed", path=request.url.path, issues=len(issues))
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": issues})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal Server Error"},
        )
