"""Request validation exceptions."""

from typing import Any, Dict, Optional

from . import GatewayError


class RequestValidationError(GatewayError):
    """400 errors for requests that fail local validation."""

    def __init__(
        self,
        message: str = "Invalid request",
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=400)


class InvalidEnvironmentError(RequestValidationError):
    """Environment outside the fixed set."""

    def __init__(self, environment: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=f"Invalid environment: {environment}",
            code="INVALID_ENVIRONMENT",
            details={"environment": environment, **(details or {})},
        )


class TableNotFoundError(RequestValidationError):
    """Table not declared in the catalog for an environment."""

    def __init__(self, environment: str, table: str):
        super().__init__(
            message=f"table {table} not found for environment {environment}",
            code="TABLE_NOT_FOUND",
            details={"environment": environment, "table": table},
        )


class IndexNotFoundError(RequestValidationError):
    """Index not declared on a catalog table."""

    def __init__(self, table: str, index_name: str):
        super().__init__(
            message=f"index {index_name} not found for table {table}",
            code="INDEX_NOT_FOUND",
            details={"table": table, "index_name": index_name},
        )


class MissingRequiredKeyError(RequestValidationError):
    """A key attribute value the operation needs is absent or empty."""

    def __init__(self, attribute: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"hash key {attribute} is required",
            code="MISSING_REQUIRED_KEY",
            details={"attribute": attribute},
        )
        self.attribute = attribute


class PrimaryKeyMismatchError(RequestValidationError):
    """Caller-asserted primary key name differs from the table's."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            message=f"invalid primary key: expected {expected}, got {actual}",
            code="PRIMARY_KEY_MISMATCH",
            details={"expected": expected, "actual": actual},
        )


class MalformedRequestError(RequestValidationError):
    """Body that cannot be decoded into the expected request shape."""

    def __init__(
        self,
        message: str = "Invalid request body",
        code: str = "MALFORMED_REQUEST",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class AssetNotFoundError(GatewayError):
    """404 for static assets missing from the bundle."""

    def __init__(self, asset: str):
        super().__init__(
            message=f"Asset not found: {asset}",
            code="ASSET_NOT_FOUND",
            details={"asset": asset},
            status_code=404,
        )
