"""Application Exceptions."""

from store_locator.application.common.exceptions.base import ApplicationError
from store_locator.application.common.exceptions.validation import (
    GoogleApiUnavailableError,
    InvalidFilterTagError,
)

__all__ = [
    "ApplicationError",
    "GoogleApiUnavailableError",
    "InvalidFilterTagError",
]
