# File: storefront/api/errors.py

"""
Exception handlers.

Every failure leaves the API as ``{"error": ...}`` (or ``{"msg": ...}``)
with the status from the error taxonomy in ``storefront.core.exceptions``.
Body validation errors from pydantic are reported as 400 with a message
chosen by the first offending field, never FastAPI's default 422.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.core.config import get_settings
from storefront.core.exceptions import AppError, StoreError

logger = logging.getLogger(__name__)

MISSING_PARAMETERS = "Please provide all the required parameters."
INVALID_JSON = "Request body is not valid JSON."

# Messages for fields that were sent but hold an unacceptable value.
FIELD_MESSAGES = {
    "email": "Please provide a valid email.",
    "price": "Price and quantity must be valid numbers.",
    "quantity": "Price and quantity must be valid numbers.",
}


def _is_missing(error: Dict[str, Any]) -> bool:
    if error["type"] in ("missing", "model_attributes_type", "dict_type"):
        return True
    value = error.get("input")
    return value is None or value == ""


def _field(error: Dict[str, Any]) -> str:
    loc = error.get("loc", ())
    return str(loc[1]) if len(loc) > 1 else ""


def validation_message(errors: List[Dict[str, Any]]) -> str:
    """
    Pick the client message for a list of pydantic errors.

    Missing fields win over bad values, so a body lacking ``price`` and
    carrying a bad ``email`` still reads as "missing parameters".
    """
    if any(err["type"] == "json_invalid" for err in errors):
        return INVALID_JSON
    if any(_is_missing(err) for err in errors):
        return MISSING_PARAMETERS
    for err in errors:
        field = _field(err)
        if field in FIELD_MESSAGES:
            return FIELD_MESSAGES[field]
    field = _field(errors[0]) if errors else ""
    return f"Invalid value for '{field}'." if field else MISSING_PARAMETERS


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    content = {exc.key: exc.message}
    if isinstance(exc, StoreError) and exc.detail and get_settings().debug:
        content["detail"] = exc.detail
    return JSONResponse(status_code=exc.status_code, content=content)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    content = {"error": "An unexpected error occurred."}
    if get_settings().debug:
        content["detail"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = list(exc.errors())
    message = validation_message(errors)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
