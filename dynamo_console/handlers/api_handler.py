from typing import Callable

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver, CORSConfig
from aws_lambda_powertools.logging import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from ..clients.dynamodb import DynamoDBClient
from ..config.app import AppConfig
from ..config.catalog import Catalog
from ..middleware.error_handler import error_handler_middleware
from ..middleware.logging import logging_middleware
from ..models.api import VersionResponse
from ..services.item import ItemService
from ..services.query import QueryService
from .delete import handle_delete
from .query import handle_query
from .static import handle_index, handle_static_asset
from .tables import handle_get_tables
from .update import handle_update

logger = Logger()


def create_app(
    app_config: AppConfig, catalog: Catalog, dynamodb_client: DynamoDBClient
) -> APIGatewayHttpResolver:
    """Build the API Gateway resolver with every route registered.

    The resolver keeps the current event on itself, so one instance must
    only serve one request at a time.
    """
    cors_config = CORSConfig(
        allow_origin=app_config.cors_allow_origin,
        allow_headers=["Content-Type"],
    )
    app = APIGatewayHttpResolver(cors=cors_config)

    query_service = QueryService(catalog, dynamodb_client)
    item_service = ItemService(catalog, dynamodb_client)

    # --- API Route Handlers ---
    @app.get("/api/tables")
    def get_tables() -> dict:
        """Returns the table catalog for every environment."""
        return handle_get_tables(catalog).model_dump(mode="json")

    @app.post("/api/query")
    def post_query() -> dict:
        """Handle POST /api/query."""
        return handle_query(
            app=app, query_service=query_service, logger=logger
        ).model_dump(mode="json")

    @app.post("/api/update")
    def post_update() -> dict:
        """Handle POST /api/update."""
        return handle_update(
            app=app, item_service=item_service, logger=logger
        ).model_dump(mode="json")

    @app.post("/api/delete")
    def post_delete() -> dict:
        """Handle POST /api/delete."""
        return handle_delete(
            app=app, item_service=item_service, logger=logger
        ).model_dump(mode="json")

    @app.get("/api/version")
    def get_version() -> dict:
        """Returns the application version."""
        return VersionResponse(version=app_config.version).model_dump()

    # --- Static UI ---
    @app.get("/")
    def get_index():
        return handle_index()

    @app.get("/static/<asset>")
    def get_static_asset(asset: str):
        return handle_static_asset(asset)

    return app


def create_lambda_handler(app: APIGatewayHttpResolver) -> Callable[[dict, LambdaContext], dict]:
    """Wrap a resolver with the error and logging middleware."""

    @error_handler_middleware
    @logging_middleware
    def lambda_handler(event: dict, context: LambdaContext) -> dict:
        """Entry point taking an API Gateway HTTP API (v2) event.

        Args:
            event: API Gateway proxy event
            context: Lambda context object, None when served locally

        Returns:
            API Gateway proxy response
        """
        return app.resolve(event, context)

    return lambda_handler
