"""Unit tests for the DynamoDB client."""

import unittest
from unittest.mock import MagicMock, patch

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError, EndpointConnectionError

from dynamo_console.clients.dynamodb import DynamoDBClient
from dynamo_console.config.app import AppConfig
from dynamo_console.middleware.exceptions import StoreUnavailableError


def client_error(code: str = "ResourceNotFoundException") -> ClientError:
    return ClientError(
        {"Error": {"Code": code, "Message": "Requested resource not found"}},
        "Query",
    )


class TestDynamoDBClient(unittest.TestCase):
    """Test cases for the DynamoDB client."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = AppConfig(app_env="dev", aws_profile="default", aws_region="ap-southeast-1")

        # Mock boto3 session, resource and table
        self.session_patch = patch("boto3.Session")
        self.mock_session_class = self.session_patch.start()
        self.mock_session = MagicMock()
        self.mock_resource = MagicMock()
        self.mock_table = MagicMock()

        self.mock_session_class.return_value = self.mock_session
        self.mock_session.resource.return_value = self.mock_resource
        self.mock_resource.Table.return_value = self.mock_table

        self.client = DynamoDBClient(self.config)

    def tearDown(self):
        """Tear down test fixtures."""
        self.session_patch.stop()

    def test_default_profile_uses_credential_chain(self):
        """The 'default' profile is left to boto3's own resolution."""
        self.mock_session_class.assert_called_once_with(
            profile_name=None, region_name="ap-southeast-1"
        )
        self.mock_session.resource.assert_called_once_with("dynamodb", endpoint_url=None)

    def test_named_profile_and_endpoint(self):
        """A named profile and endpoint override are passed through."""
        config = AppConfig(
            app_env="dev",
            aws_profile="ops",
            aws_region="eu-west-1",
            dynamodb_endpoint_url="http://localhost:8000",
        )

        DynamoDBClient(config)

        self.mock_session_class.assert_called_with(profile_name="ops", region_name="eu-west-1")
        self.mock_session.resource.assert_called_with(
            "dynamodb", endpoint_url="http://localhost:8000"
        )

    def test_get_item_found(self):
        """get_item returns the stored item."""
        # Arrange
        item = {"id": "42", "name": "Ada"}
        self.mock_table.get_item.return_value = {"Item": item}

        # Act
        result = self.client.get_item("staging-users", {"id": "42"})

        # Assert
        self.mock_resource.Table.assert_called_with("staging-users")
        self.mock_table.get_item.assert_called_once_with(Key={"id": "42"})
        self.assertEqual(item, result)

    def test_get_item_missing_returns_none(self):
        """get_item returns None when no item has the key."""
        self.mock_table.get_item.return_value = {}

        self.assertIsNone(self.client.get_item("staging-users", {"id": "missing"}))

    def test_get_item_error_handling(self):
        """get_item surfaces DynamoDB errors with the underlying message."""
        self.mock_table.get_item.side_effect = client_error()

        with self.assertRaises(StoreUnavailableError) as ctx:
            self.client.get_item("staging-users", {"id": "42"})

        self.assertIn("failed to get item", ctx.exception.message)
        self.assertIn("ResourceNotFoundException", ctx.exception.message)

    def test_query_single_page(self):
        """query returns one page and passes the key condition through."""
        # Arrange
        items = [{"user_id": "u1", "event_time": "1"}, {"user_id": "u1", "event_time": "2"}]
        self.mock_table.query.return_value = {"Items": items, "Count": 2}
        condition = Key("user_id").eq("u1")

        # Act
        page = self.client.query("staging-events", condition)

        # Assert
        self.mock_table.query.assert_called_once_with(KeyConditionExpression=condition)
        self.assertEqual(items, page.items)
        self.assertEqual(2, page.count)
        self.assertFalse(page.truncated)

    def test_query_with_index(self):
        """query sets IndexName for secondary indexes."""
        self.mock_table.query.return_value = {"Items": [], "Count": 0}
        condition = Key("email").eq("ada@example.com")

        self.client.query("staging-users", condition, index_name="email_index")

        self.mock_table.query.assert_called_once_with(
            KeyConditionExpression=condition, IndexName="email_index"
        )

    def test_query_does_not_follow_last_evaluated_key(self):
        """Only the first page is fetched even when more results exist."""
        # Arrange
        self.mock_table.query.side_effect = [
            {
                "Items": [{"user_id": "u1", "event_time": "1"}],
                "Count": 1,
                "LastEvaluatedKey": {"user_id": "u1", "event_time": "1"},
            },
            {"Items": [{"user_id": "u1", "event_time": "2"}], "Count": 1},
        ]

        # Act
        page = self.client.query("staging-events", Key("user_id").eq("u1"))

        # Assert
        self.assertEqual(1, self.mock_table.query.call_count)
        self.assertEqual(1, len(page.items))
        self.assertTrue(page.truncated)

    def test_query_error_handling(self):
        """query surfaces connection failures without retrying."""
        self.mock_table.query.side_effect = EndpointConnectionError(
            endpoint_url="https://dynamodb.ap-southeast-1.amazonaws.com"
        )

        with self.assertRaises(StoreUnavailableError) as ctx:
            self.client.query("staging-users", Key("id").eq("42"))

        self.assertEqual(1, self.mock_table.query.call_count)
        self.assertIn("failed to query", ctx.exception.message)

    def test_put_item(self):
        """put_item writes the item unconditionally."""
        item = {"id": "42", "name": "Ada"}

        self.client.put_item("staging-users", item)

        self.mock_table.put_item.assert_called_once_with(Item=item)

    def test_put_item_error_handling(self):
        """put_item surfaces DynamoDB errors."""
        self.mock_table.put_item.side_effect = client_error("ValidationException")

        with self.assertRaises(StoreUnavailableError):
            self.client.put_item("staging-users", {"id": "42"})

    def test_delete_item(self):
        """delete_item deletes by the given key."""
        self.client.delete_item("staging-users", {"id": "42"})

        self.mock_table.delete_item.assert_called_once_with(Key={"id": "42"})

    def test_delete_item_error_handling(self):
        """delete_item surfaces DynamoDB errors."""
        self.mock_table.delete_item.side_effect = client_error("AccessDeniedException")

        with self.assertRaises(StoreUnavailableError) as ctx:
            self.client.delete_item("staging-users", {"id": "42"})

        self.assertIn("AccessDeniedException", ctx.exception.message)
