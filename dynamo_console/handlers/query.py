"""Handler for catalog-driven queries (POST /api/query)."""

from aws_lambda_powertools.event_handler import APIGatewayHttpResolver
from aws_lambda_powertools.logging import Logger

from ..models.api import QueryRequest, QueryResponse
from ..models.catalog import Environment
from ..services.query import QueryParams, QueryService
from ..services.request_parser import RequestParsingService


def handle_query(
    app: APIGatewayHttpResolver,
    query_service: QueryService,
    logger: Logger,
) -> QueryResponse:
    """Handle POST /api/query requests.

    Args:
        app: The API Gateway resolver instance
        query_service: Service running the translated query
        logger: Logger instance

    Returns:
        QueryResponse with the matching records

    Raises:
        MalformedRequestError: If the body is not a valid query request
        InvalidEnvironmentError: If the environment is unknown
        TableNotFoundError: If the table is not in the catalog
        IndexNotFoundError: If the index is not declared on the table
        MissingRequiredKeyError: If the hash key value is missing
        StoreUnavailableError: If the store call fails
    """
    request = RequestParsingService(app, logger).parse(QueryRequest)
    params = QueryParams(
        environment=Environment.parse(request.environment),
        table=request.table,
        index_name=request.index_name,
        values=request.values,
    )

    result = query_service.execute(params)
    logger.info(
        "Query executed",
        extra={
            "environment": params.environment.value,
            "table": params.table,
            "index_name": params.index_name,
            "count": result.count,
            "truncated": result.truncated,
        },
    )
    return QueryResponse(count=result.count, items=result.items)
