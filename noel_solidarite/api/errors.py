"""Exception handlers rendering every API failure as {"error": ...}"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from noel_solidarite.api.dependencies import get_request_id
from noel_solidarite.domain.submission import INVALID_DONATION_DATA, describe_errors, rejection_reason
from noel_solidarite.infrastructure.observability.logging import log_rejection
from noel_solidarite.infrastructure.observability.metrics import record_rejection


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Schema violations become a 400 with a single reason; nothing is stored"""
    errors = exc.errors()
    reason = rejection_reason(errors)

    record_rejection(reason)
    log_rejection(get_request_id(request), reason, request.url.path)

    content = {"error": reason}
    if reason == INVALID_DONATION_DATA:
        content["details"] = describe_errors(errors)
    return JSONResponse(status_code=400, content=content)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logging.error(f"Unhandled error: {exc}", extra={"request_id": get_request_id(request)})
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on an application"""
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
