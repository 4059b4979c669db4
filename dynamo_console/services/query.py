"""Translation of catalog lookups and key values into DynamoDB reads."""

from typing import Any, Dict, List, Optional, Union

from aws_lambda_powertools.logging import Logger
from boto3.dynamodb.conditions import ConditionBase, Key
from pydantic import BaseModel, Field

from ..clients.dynamodb import DynamoDBClient
from ..config.catalog import Catalog
from ..middleware.exceptions import MissingRequiredKeyError
from ..models.catalog import Environment, IndexDescriptor, TableDescriptor
from ..models.records import from_store_record

logger = Logger()


class PointRead(BaseModel):
    """Single-item fetch by exact primary key."""

    table_name: str
    key: Dict[str, str]


class RangeQuery(BaseModel):
    """Key-condition query on a table or one of its indexes."""

    table_name: str
    index_name: Optional[str] = None
    hash_key: str
    hash_value: str
    range_key: Optional[str] = None
    range_value: Optional[str] = None

    def key_condition(self) -> ConditionBase:
        condition = Key(self.hash_key).eq(self.hash_value)
        if self.range_key and self.range_value:
            condition = condition & Key(self.range_key).eq(self.range_value)
        return condition


StoreOperation = Union[PointRead, RangeQuery]


def build_operation(
    table: TableDescriptor, index: IndexDescriptor, values: Dict[str, str]
) -> StoreOperation:
    """Choose and build the store read for one index and its key values.

    The hash key value is mandatory. A primary index without a range key is
    read with a point read; everything else becomes a query whose range
    condition is added only when a range value is supplied.

    Args:
        table: Table owning the index
        index: Resolved index descriptor
        values: Caller-supplied attribute values

    Returns:
        PointRead or RangeQuery

    Raises:
        MissingRequiredKeyError: If the hash key value is absent or empty
    """
    hash_value = values.get(index.hash_key)
    if not hash_value:
        raise MissingRequiredKeyError(index.hash_key)

    if index.is_primary and not index.range_key:
        return PointRead(table_name=table.name, key={index.hash_key: hash_value})

    range_value = values.get(index.range_key) if index.range_key else None
    return RangeQuery(
        table_name=table.name,
        index_name=None if index.is_primary else index.name,
        hash_key=index.hash_key,
        hash_value=hash_value,
        range_key=index.range_key,
        range_value=range_value or None,
    )


class QueryParams(BaseModel):
    """Validated parameters of one query request."""

    environment: Environment
    table: str
    index_name: str = ""
    values: Dict[str, str] = Field(default_factory=dict)


class QueryResult(BaseModel):
    """Records returned by one query, single page only."""

    count: int = Field(..., ge=0)
    items: List[Dict[str, Any]]
    truncated: bool = Field(
        False, description="The store had more results than were returned"
    )


class QueryService:
    """Runs catalog-driven queries against DynamoDB."""

    def __init__(self, catalog: Catalog, dynamodb_client: DynamoDBClient) -> None:
        self.catalog = catalog
        self.dynamodb_client = dynamodb_client

    def execute(self, params: QueryParams) -> QueryResult:
        """Resolve, translate and run a query.

        Raises:
            TableNotFoundError: If the table is not in the catalog
            IndexNotFoundError: If the index is not declared on the table
            MissingRequiredKeyError: If the hash key value is missing
            StoreUnavailableError: If the store call fails
        """
        table = self.catalog.lookup_table(params.environment, params.table)
        index = self.catalog.lookup_index(
            params.environment, params.table, params.index_name
        )
        operation = build_operation(table, index, params.values)

        if isinstance(operation, PointRead):
            item = self.dynamodb_client.get_item(operation.table_name, operation.key)
            items = [from_store_record(item)] if item else []
            return QueryResult(count=len(items), items=items)

        page = self.dynamodb_client.query(
            operation.table_name, operation.key_condition(), operation.index_name
        )
        if page.truncated:
            logger.warning(
                "Query returned a partial page; remaining results are not fetched",
                extra={
                    "table": operation.table_name,
                    "index_name": operation.index_name,
                    "returned": len(page.items),
                },
            )
        items = [from_store_record(item) for item in page.items]
        return QueryResult(count=len(items), items=items, truncated=page.truncated)
