"""Application and store-layer exception types."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from farmstand.services.validation import FieldError

DEFAULT_ERROR_STATUS = 500
DEFAULT_ERROR_MESSAGE = "SOMETHING WENT WRONG"


class AppError(Exception):
    """Failure carrying the message and HTTP status sent back to the client."""

    def __init__(self, message: str = DEFAULT_ERROR_MESSAGE, status: int = DEFAULT_ERROR_STATUS):
        super().__init__(message)
        self.message = message
        self.status = status


class StoreError(Exception):
    """Base class for failures raised below the service layer."""


class ProductValidationError(StoreError):
    """Raised when product fields violate the declared constraints."""

    def __init__(self, errors: Sequence[FieldError], model: str = "Product") -> None:
        self.errors = tuple(errors)
        details = ", ".join(f"{e.field}: {e.message}" for e in self.errors)
        self.message = f"{model} validation failed: {details}"
        super().__init__(self.message)


class InvalidIdentifierError(StoreError):
    """Raised when an id does not have the shape of a store identifier."""

    def __init__(self, value: str) -> None:
        self.value = value
        self.message = f'Cast to id failed for value "{value}"'
        super().__init__(self.message)
