"""
Exception handlers for the HTTP layer.

Endpoints raise ``HTTPException`` for expected client errors (404, 400).
The handlers below cover the rest: request validation failures are
reported as 400 instead of FastAPI's default 422, and storage or
unexpected errors become a bare 500 whose body carries no detail about
the cause.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from palindrome_api.app.store import MessageStoreError


logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal Server Error"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_exception_handler(request: Request, exc: MessageStoreError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # The server logs the traceback once this exception is re-raised.
    logger.error("Unhandled error on %s %s: %r", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(MessageStoreError, store_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
