"""
Exception handlers turning failures into the API's error bodies.

- request validation -> 400 {message, field} (first error only)
- HTTPException      -> its status code with {message}
- anything else      -> 500 {message: "Internal server error"}
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from money_reminders.core.metrics import validation_failures_total

logger = logging.getLogger(__name__)

_LOCATION_PREFIXES = ("body", "path", "query", "header", "cookie")


def first_validation_error(exc: RequestValidationError) -> dict:
    errors = exc.errors()
    if not errors:
        return {"message": "Invalid request"}
    err = errors[0]
    loc = [str(part) for part in err.get("loc", ())]
    if loc and loc[0] in _LOCATION_PREFIXES:
        loc = loc[1:]
    body = {"message": err.get("msg", "Invalid value")}
    # json_invalid locations are character offsets, not fields
    if loc and err.get("type") != "json_invalid":
        body["field"] = ".".join(loc)
    return body


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    body = first_validation_error(exc)
    validation_failures_total.inc()
    logger.info(f"Rejected {request.method} {request.url.path}: {body}")
    return JSONResponse(status_code=400, content=body)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        logger.error(f"HTTP {exc.status_code}: {exc.detail} - {request.url}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc!r} - {request.method} {request.url}")
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
