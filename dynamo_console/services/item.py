"""Full-replace updates and confirmed deletes of single items."""

from typing import Any, Dict, Optional

from aws_lambda_powertools.logging import Logger
from pydantic import BaseModel

from ..clients.dynamodb import DynamoDBClient
from ..config.catalog import Catalog
from ..middleware.exceptions import (
    MissingRequiredKeyError,
    PrimaryKeyMismatchError,
    RequestValidationError,
)
from ..models.catalog import Environment, TableDescriptor
from ..models.records import to_store_record
from .confirmation import verify_delete_token

logger = Logger()


class DeleteParams(BaseModel):
    """Parameters of one confirmed delete."""

    environment: Environment
    table: str
    primary_key: str
    primary_value: str
    sort_value: Optional[str] = None
    confirmation_token: str


class ItemService:
    """Writes and deletes items of catalog tables."""

    def __init__(self, catalog: Catalog, dynamodb_client: DynamoDBClient) -> None:
        self.catalog = catalog
        self.dynamodb_client = dynamodb_client

    def update_item(
        self, environment: Environment, table_name: str, item: Dict[str, Any]
    ) -> TableDescriptor:
        """Store a complete record, replacing any existing one with its key.

        No merge with the stored record happens: attributes missing from
        ``item`` are removed.

        Args:
            environment: Target environment
            table_name: Logical table name
            item: Complete record, keyed by its own key attribute values

        Returns:
            Descriptor of the written table

        Raises:
            TableNotFoundError: If the table is not in the catalog
            MissingRequiredKeyError: If the record lacks a key attribute
            SerializationError: If the record cannot be stored
            StoreUnavailableError: If the store call fails
        """
        table = self.catalog.lookup_table(environment, table_name)
        for attribute in filter(None, (table.primary_key, table.sort_key)):
            value = item.get(attribute)
            if value is None or value == "":
                raise MissingRequiredKeyError(
                    attribute, message=f"item is missing key attribute {attribute}"
                )

        store_item = to_store_record(item)
        self.dynamodb_client.put_item(table.name, store_item)
        logger.info(
            "Item replaced",
            extra={
                "environment": environment.value,
                "table": table.name,
                "primary_value": str(item[table.primary_key]),
            },
        )
        return table

    def delete_item(self, params: DeleteParams) -> TableDescriptor:
        """Delete one item after validating the request and its token.

        Checks run in order: required fields, table, primary key name, sort
        value (tables with a sort key), confirmation token. The store is only
        called once every check has passed.

        Returns:
            Descriptor of the table the item was deleted from

        Raises:
            RequestValidationError: If a required field is empty
            TableNotFoundError: If the table is not in the catalog
            PrimaryKeyMismatchError: If the primary key name is not the table's
            MissingRequiredKeyError: If the sort value is needed but missing
            InvalidConfirmationTokenError: If the token does not match
            StoreUnavailableError: If the store call fails
        """
        if not (params.table and params.primary_key and params.primary_value):
            raise RequestValidationError(
                "Missing required fields: table, primaryKey, and primaryValue are required"
            )

        table = self.catalog.lookup_table(params.environment, params.table)
        if params.primary_key != table.primary_key:
            raise PrimaryKeyMismatchError(table.primary_key, params.primary_key)

        key = {table.primary_key: params.primary_value}
        if table.sort_key:
            if not params.sort_value:
                raise MissingRequiredKeyError(
                    table.sort_key,
                    message=f"sort key {table.sort_key} is required to delete from {params.table}",
                )
            key[table.sort_key] = params.sort_value

        verify_delete_token(
            params.environment.value,
            params.table,
            params.primary_value,
            params.confirmation_token,
        )

        self.dynamodb_client.delete_item(table.name, key)
        logger.info(
            "Item deleted",
            extra={
                "environment": params.environment.value,
                "table": table.name,
                "key": key,
            },
        )
        return table
