"""Handler for full-record updates (POST /api/update)."""

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger

from ..models.api import MessageResponse, UpdateRequest
from ..models.catalog import Environment
from ..services.item import ItemService
from ..services.request_parser import RequestParsingService


def handle_update(
    app: APIGatewayHttpResolver,
    item_service: ItemService,
    logger: Logger,
) -> MessageResponse:
    """Handle POST /api/update requests.

    The item replaces any stored item with the same key; callers must send
    the complete record.

    Raises:
        MalformedRequestError: If the body is not a valid update request
        InvalidEnvironmentError: If the environment is unknown
        TableNotFoundError: If the table is not in the catalog
        MissingRequiredKeyError: If the item lacks a key attribute
        SerializationError: If the item cannot be stored
        StoreUnavailableError: If the store call fails
    """
    request = RequestParsingService(app, logger).parse(UpdateRequest)
    environment = Environment.parse(request.environment)

    table = item_service.update_item(environment, request.table, request.item)
    primary_value = request.item[table.primary_key]
    return MessageResponse(
        message=f"Successfully updated item with {table.primary_key}={primary_value} in {request.table}"
    )
