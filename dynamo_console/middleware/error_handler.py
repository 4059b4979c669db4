from http import HTTPStatus
from typing import Any, Dict

from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.middleware_factory import lambda_handler_decorator
from pydantic import ValidationError

from ..models.api import APIErrorResponse
from .exceptions import GatewayError

logger = Logger()

INVALID_INPUT_MESSAGE = "Invalid input"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def create_error_response(status_code: HTTPStatus, message: str) -> Dict[str, Any]:
    """Build an HTTP API proxy response carrying ``{success: false, error}``."""
    return {
        "statusCode": int(status_code),
        "body": APIErrorResponse(error=message).model_dump_json(),
        "headers": {"Content-Type": "application/json"},
        "isBase64Encoded": False,
    }


@lambda_handler_decorator
def error_handler_middleware(handler, event, context):
    """Middleware turning raised errors into the error envelope.

    Gateway errors keep their own status and message. Anything unexpected is
    logged with its traceback and answered with a generic 500.
    """
    try:
        return handler(event, context)

    except GatewayError as e:
        status = HTTPStatus(e.status_code)
        log = logger.warning if status < HTTPStatus.INTERNAL_SERVER_ERROR else logger.error
        log(
            f"Request rejected with {status.value}: {e.message}",
            extra={"error_type": type(e).__name__, "code": e.code, "details": e.details},
        )
        return create_error_response(status, e.message)

    # Model validation outside the request parser
    except ValidationError as e:
        logger.warning("Model validation failed", extra={"errors": e.errors(include_url=False)})
        return create_error_response(
            HTTPStatus.BAD_REQUEST, f"{INVALID_INPUT_MESSAGE}: {e.error_count()} validation error(s)"
        )

    except Exception as e:
        logger.exception(f"Unhandled error: {type(e).__name__}")
        return create_error_response(
            HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE
        )
