"""Exception handling for the DynamoDB console gateway."""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.status_code = status_code


from .api import (
    AssetNotFoundError,
    IndexNotFoundError,
    InvalidEnvironmentError,
    MalformedRequestError,
    MissingRequiredKeyError,
    PrimaryKeyMismatchError,
    RequestValidationError,
    TableNotFoundError,
)
from .business import InvalidConfirmationTokenError
from .storage import SerializationError, StorageError, StoreUnavailableError

__all__ = [
    # Base
    "GatewayError",
    # Validation Errors
    "RequestValidationError",
    "InvalidEnvironmentError",
    "TableNotFoundError",
    "IndexNotFoundError",
    "MissingRequiredKeyError",
    "PrimaryKeyMismatchError",
    "MalformedRequestError",
    "AssetNotFoundError",
    # Confirmation Errors
    "InvalidConfirmationTokenError",
    # Storage Errors
    "StorageError",
    "StoreUnavailableError",
    "SerializationError",
]
