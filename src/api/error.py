"""HTTP error mapping

Use case errors are raised as ClientError by the routers; request
validation failures are answered with 400 like any other invalid input.
"""

import logging
from typing import Any, Dict, Sequence, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from libs.result import Error

logger = logging.getLogger(__name__)

_LOCATION_ROOTS = {"body", "query", "path"}


class ClientError(Exception):
    """A use case error to be returned to the client"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def error_body(code: str, message: str, details=None) -> Dict[str, Any]:
    body = {"code": code, "message": message}
    if details:
        body["details"] = details
    return {"error": body}


def format_location(loc: Sequence[Union[str, int]]) -> str:
    """Turn ("body", "items", 0, "productId") into "items[0].productId" """
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _LOCATION_ROOTS:
        parts = parts[1:]

    field = ""
    for part in parts:
        if isinstance(part, int):
            field += f"[{part}]"
        else:
            field += f".{part}" if field else str(part)
    return field


async def client_error_handler(request: Request, exc: ClientError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error.code, exc.error.message, exc.error.details),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": format_location(err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", "Invalid request parameters", details),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_ERROR", "Internal server error"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
