"""Handler for confirmed deletes (POST /api/delete)."""

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger

from ..models.api import DeleteRequest, MessageResponse
from ..models.catalog import Environment
from ..services.item import DeleteParams, ItemService
from ..services.request_parser import RequestParsingService


def handle_delete(
    app: APIGatewayHttpResolver,
    item_service: ItemService,
    logger: Logger,
) -> MessageResponse:
    """Handle POST /api/delete requests.

    Raises:
        MalformedRequestError: If the body is not a valid delete request
        InvalidEnvironmentError: If the environment is unknown
        RequestValidationError: If table, primaryKey or primaryValue is empty
        TableNotFoundError: If the table is not in the catalog
        PrimaryKeyMismatchError: If primaryKey is not the table's primary key
        InvalidConfirmationTokenError: If the token does not match
        StoreUnavailableError: If the store call fails
    """
    request = RequestParsingService(app, logger).parse(DeleteRequest)
    params = DeleteParams(
        environment=Environment.parse(request.environment),
        table=request.table,
        primary_key=request.primary_key,
        primary_value=request.primary_value,
        sort_value=request.sort_value,
        confirmation_token=request.confirmation_token,
    )

    item_service.delete_item(params)
    return MessageResponse(
        message=f"Successfully deleted item with {params.primary_key}={params.primary_value} from {params.table}"
    )
