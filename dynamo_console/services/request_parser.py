"""Request parsing service for JSON bodies."""

import json
from decimal import Decimal
from typing import Any, Type, TypeVar

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger
from pydantic import BaseModel, ValidationError

from ..middleware.exceptions import MalformedRequestError

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


class RequestParsingService:
    """Service for parsing HTTP request data."""

    def __init__(self, app: APIGatewayHttpResolver, logger: Logger):
        """Initialize request parsing service.

        Args:
            app: The API Gateway resolver instance
            logger: Logger instance
        """
        self.app = app
        self.logger = logger

    def get_json_body(self) -> Any:
        """Decode the request body as JSON.

        Non-integer numbers are decoded as ``Decimal`` so that record values
        reach DynamoDB without going through binary floating point.

        Raises:
            MalformedRequestError: If the body is missing or not valid JSON
        """
        body = self.app.current_event.decoded_body
        if not body:
            raise MalformedRequestError("Invalid request body: body is empty")
        try:
            return json.loads(
                body, parse_float=Decimal, parse_constant=_reject_constant
            )
        except ValueError as e:
            self.logger.warning(f"Request body is not valid JSON: {e}")
            raise MalformedRequestError(f"Invalid request body: {e}")

    def parse(self, model: Type[RequestModel]) -> RequestModel:
        """Decode the request body into a request model.

        Raises:
            MalformedRequestError: If the body does not match the model
        """
        data = self.get_json_body()
        if not isinstance(data, dict):
            raise MalformedRequestError("Invalid request body: expected a JSON object")
        try:
            return model.model_validate(data)
        except ValidationError as e:
            self.logger.warning(
                "Request body failed validation",
                extra={"model": model.__name__, "errors": e.errors(include_url=False)},
            )
            raise MalformedRequestError(
                f"Invalid request body: {_summarize(e)}",
                details={"errors": e.errors(include_url=False, include_context=False)},
            )


def _summarize(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc']) or 'body'}: {item['msg']}"
        for item in error.errors()
    )
