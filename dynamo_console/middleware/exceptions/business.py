"""Delete confirmation exceptions."""

from typing import Any, Dict, Optional

from . import GatewayError


class InvalidConfirmationTokenError(GatewayError):
    """Confirmation token does not match the recomputed one."""

    def __init__(
        self,
        message: str = "Invalid confirmation token. Please confirm the deletion properly.",
        code: str = "INVALID_CONFIRMATION_TOKEN",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details, status_code=400)
