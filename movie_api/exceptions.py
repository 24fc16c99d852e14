"""Exception handlers that keep every error in the ``{status, msg}`` envelope."""

from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "unexpected error"


def error_response(status_code: int, msg: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "msg": msg})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 5xx raised by the endpoints were already logged with their traceback
    if exc.status_code >= 500:
        logger.debug("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
    else:
        logger.info("HTTP %s on %s: %s", exc.status_code, request.url.path, exc.detail)
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.info("Validation error on %s: %s", request.url.path, errors)
    fields = ", ".join(".".join(str(part) for part in err.get("loc", ())[1:]) or "request" for err in errors)
    return error_response(status.HTTP_422_UNPROCESSABLE_ENTITY, f"invalid parameters: {fields}")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s", request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR)
