"""Storage-related exceptions."""

from typing import Any, Dict, Optional

from . import GatewayError


class StorageError(GatewayError):
    """Base class for storage-related errors."""

    def __init__(
        self, message: str, code: str, details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code=code,
            details=details,
            status_code=400,
        )


class StoreUnavailableError(StorageError):
    """The store call failed; the message carries the underlying error."""

    def __init__(
        self,
        message: str = "Storage operation failed",
        code: str = "STORE_UNAVAILABLE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class SerializationError(StorageError):
    """Record shape not representable in the store's type system."""

    def __init__(
        self,
        message: str = "Record cannot be stored",
        code: str = "SERIALIZATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code, details)
