"""Delete confirmation tokens.

The token is ``sha256_hex("DELETE:{environment}:{table}:{primary_value}")``.
Anyone who can call the API can compute it, so it only guards against a delete
sent without a deliberate confirmation step on the client; it is not an
authorization check.
"""

import hashlib
import hmac

from ..middleware.exceptions import InvalidConfirmationTokenError


def generate_delete_token(environment: str, table: str, primary_value: str) -> str:
    """Return the confirmation token expected for deleting one item."""
    data = f"DELETE:{environment}:{table}:{primary_value}"
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def verify_delete_token(
    environment: str, table: str, primary_value: str, token: str
) -> None:
    """Check a caller-supplied token against the recomputed one.

    Raises:
        InvalidConfirmationTokenError: If the tokens differ
    """
    expected = generate_delete_token(environment, table, primary_value)
    if not hmac.compare_digest(expected.encode("utf-8"), (token or "").encode("utf-8")):
        raise InvalidConfirmationTokenError()
