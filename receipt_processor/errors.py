"""
Error taxonomy and the FastAPI exception handlers that map it onto responses.

Clients only ever see generic messages; the specific validation reason is
written to the log.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse
from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

logger = logging.getLogger(__name__)

INVALID_RECEIPT_MESSAGE = "The receipt is invalid."
RECEIPT_NOT_FOUND_MESSAGE = "No receipt found for that ID."


class ReceiptValidationError(Exception):
    """A submitted receipt failed one of the validation rules."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ReceiptNotFoundError(Exception):
    """The receipt id is malformed or was never issued."""

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def receipt_validation_handler(request: Request, exc: ReceiptValidationError):
    logger.warning("Invalid receipt: %s", exc.reason)
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_RECEIPT_MESSAGE},
    )


def request_validation_handler(request: Request, exc: RequestValidationError):
    # Only the receipt body is validated by FastAPI itself (unparseable JSON).
    logger.warning("Invalid receipt: malformed_json (%d errors)", len(exc.errors()))
    return JSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_RECEIPT_MESSAGE},
    )


def receipt_not_found_handler(request: Request, exc: ReceiptNotFoundError):
    logger.warning("No receipt with id %r", exc.receipt_id)
    return JSONResponse(
        status_code=HTTP_404_NOT_FOUND,
        content={"detail": RECEIPT_NOT_FOUND_MESSAGE},
    )


def response_encoding_handler(request: Request, exc: ResponseValidationError):
    logger.error("Error encoding response for %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReceiptValidationError, receipt_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ReceiptNotFoundError, receipt_not_found_handler)
    app.add_exception_handler(ResponseValidationError, response_encoding_handler)
