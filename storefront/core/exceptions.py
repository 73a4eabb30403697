# File: storefront/core/exceptions.py

"""
Application errors.

Each error carries the HTTP status it maps to and the JSON key the message
is returned under. The handlers in ``storefront.api.errors`` turn them into
responses.
"""

from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors that become a JSON response."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        key: str = "error",
    ):
        self.message = message
        self.status_code = status_code
        self.key = key
        super().__init__(message)


class ValidationError(AppError):
    """A required field is missing or a value is not acceptable."""

    def __init__(self, message: str):
        super().__init__(message, status_code=status.HTTP_400_BAD_REQUEST)


class NotFoundError(AppError):
    """The requested record (or any record at all) does not exist."""

    def __init__(self, message: str, key: str = "error"):
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND, key=key)


class StoreError(AppError):
    """The data store failed while serving the request."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.detail = detail
