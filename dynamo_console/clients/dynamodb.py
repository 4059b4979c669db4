"""Client wrapper for DynamoDB operations."""

from typing import Any, Dict, List, Optional

import boto3
from aws_lambda_powertools.logging import Logger
from boto3.dynamodb.conditions import ConditionBase
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import BaseModel, Field

from ..config.app import AppConfig
from ..middleware.exceptions import StoreUnavailableError

logger = Logger()


class QueryPage(BaseModel):
    """One page of query results as returned by DynamoDB."""

    items: List[Dict[str, Any]] = Field(default_factory=list)
    count: int = Field(0, ge=0)
    last_evaluated_key: Optional[Dict[str, Any]] = Field(
        None, description="Set when the store has more results than this page"
    )

    @property
    def truncated(self) -> bool:
        return self.last_evaluated_key is not None


class DynamoDBClient:
    """Client wrapper for DynamoDB operations.

    Holds one boto3 session and resource. Neither is thread-safe, so each
    worker thread builds its own client.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize DynamoDB client.

        Args:
            config: Application configuration

        Raises:
            botocore.exceptions.ProfileNotFound: If the AWS profile does not exist
        """
        self.config = config
        # "default" is what boto3 resolves without a profile, and leaving it
        # unset keeps environment credentials working when no config file exists
        profile = None if config.aws_profile == "default" else config.aws_profile
        self.session = boto3.Session(
            profile_name=profile, region_name=config.aws_region
        )
        self.dynamodb = self.session.resource(
            "dynamodb", endpoint_url=config.dynamodb_endpoint_url
        )

    def _table(self, table_name: str):
        return self.dynamodb.Table(table_name)  # type: ignore

    def get_item(self, table_name: str, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Get a single item by its full primary key.

        Args:
            table_name: Physical table name
            key: Primary key attributes

        Returns:
            The item, or None if no item has this key

        Raises:
            StoreUnavailableError: If the get operation fails
        """
        logger.debug("Getting item", extra={"table": table_name, "key": key})
        try:
            response = self._table(table_name).get_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"failed to get item: {e}",
                details={"table": table_name, "error": str(e)},
            )
        return response.get("Item")

    def query(
        self,
        table_name: str,
        key_condition: ConditionBase,
        index_name: Optional[str] = None,
    ) -> QueryPage:
        """Run a key-condition query and return its first page only.

        ``LastEvaluatedKey`` is reported back but never followed.

        Args:
            table_name: Physical table name
            key_condition: boto3 key condition on the hash (and range) key
            index_name: Secondary index to query, None for the table itself

        Returns:
            First page of matching items

        Raises:
            StoreUnavailableError: If the query operation fails
        """
        query_params: Dict[str, Any] = {"KeyConditionExpression": key_condition}
        if index_name:
            query_params["IndexName"] = index_name

        logger.debug(
            "Querying table", extra={"table": table_name, "index_name": index_name}
        )
        try:
            response = self._table(table_name).query(**query_params)
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"failed to query: {e}",
                details={"table": table_name, "index_name": index_name, "error": str(e)},
            )

        items = response.get("Items", [])
        return QueryPage(
            items=items,
            count=response.get("Count", len(items)),
            last_evaluated_key=response.get("LastEvaluatedKey"),
        )

    def put_item(self, table_name: str, item: Dict[str, Any]) -> None:
        """Create or fully replace an item.

        Args:
            table_name: Physical table name
            item: Complete item, including its key attributes

        Raises:
            StoreUnavailableError: If the put operation fails
        """
        logger.debug("Putting item", extra={"table": table_name})
        try:
            self._table(table_name).put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"failed to put item: {e}",
                details={"table": table_name, "error": str(e)},
            )

    def delete_item(self, table_name: str, key: Dict[str, Any]) -> None:
        """Delete an item by its full primary key.

        Deleting a key that does not exist is not an error.

        Raises:
            StoreUnavailableError: If the delete operation fails
        """
        logger.debug("Deleting item", extra={"table": table_name, "key": key})
        try:
            self._table(table_name).delete_item(Key=key)
        except (ClientError, BotoCoreError) as e:
            raise StoreUnavailableError(
                f"failed to delete item: {e}",
                details={"table": table_name, "error": str(e)},
            )
