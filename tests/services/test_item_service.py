"""Unit tests for ItemService updates and confirmed deletes."""

import unittest
from decimal import Decimal
from unittest.mock import MagicMock

from dynamo_console.clients.dynamodb import DynamoDBClient
from dynamo_console.config.catalog import Catalog
from dynamo_console.middleware.exceptions import (
    InvalidConfirmationTokenError,
    MissingRequiredKeyError,
    PrimaryKeyMismatchError,
    RequestValidationError,
    SerializationError,
    TableNotFoundError,
)
from dynamo_console.models.catalog import Environment
from dynamo_console.services.confirmation import generate_delete_token
from dynamo_console.services.item import DeleteParams, ItemService


class TestUpdateItem(unittest.TestCase):
    """Test cases for ItemService.update_item."""

    def setUp(self):
        self.mock_dynamodb_client = MagicMock(spec=DynamoDBClient)
        self.service = ItemService(Catalog.default(), self.mock_dynamodb_client)

    def test_update_puts_converted_item(self):
        """The whole record is written with numbers as Decimal."""
        # Arrange
        item = {"id": "42", "age": 37, "score": 9.5, "tags": ["a", "b"], "active": True}

        # Act
        table = self.service.update_item(Environment.STAGING, "users", item)

        # Assert
        self.assertEqual("staging-users", table.name)
        self.mock_dynamodb_client.put_item.assert_called_once_with(
            "staging-users",
            {"id": "42", "age": Decimal("37"), "score": Decimal("9.5"), "tags": ["a", "b"], "active": True},
        )

    def test_update_is_repeatable(self):
        item = {"id": "42", "name": "Ada"}

        self.service.update_item(Environment.STAGING, "users", item)
        self.service.update_item(Environment.STAGING, "users", item)

        first, second = self.mock_dynamodb_client.put_item.call_args_list
        self.assertEqual(first, second)

    def test_update_requires_primary_key(self):
        for item in ({"name": "Ada"}, {"id": "", "name": "Ada"}, {"id": None}):
            with self.assertRaises(MissingRequiredKeyError) as ctx:
                self.service.update_item(Environment.STAGING, "users", item)

            self.assertEqual("id", ctx.exception.attribute)

        self.mock_dynamodb_client.put_item.assert_not_called()

    def test_update_requires_sort_key_when_declared(self):
        with self.assertRaises(MissingRequiredKeyError) as ctx:
            self.service.update_item(Environment.STAGING, "events", {"user_id": "u1"})

        self.assertEqual("event_time", ctx.exception.attribute)
        self.mock_dynamodb_client.put_item.assert_not_called()

    def test_update_unknown_table(self):
        with self.assertRaises(TableNotFoundError):
            self.service.update_item(Environment.PRODUCTION, "orders", {"id": "1"})

        self.mock_dynamodb_client.put_item.assert_not_called()

    def test_update_rejects_unstorable_values(self):
        with self.assertRaises(SerializationError):
            self.service.update_item(Environment.STAGING, "users", {"id": "1", "x": float("nan")})

        self.mock_dynamodb_client.put_item.assert_not_called()


class TestDeleteItem(unittest.TestCase):
    """Test cases for ItemService.delete_item validation order."""

    def setUp(self):
        self.mock_dynamodb_client = MagicMock(spec=DynamoDBClient)
        self.service = ItemService(Catalog.default(), self.mock_dynamodb_client)

    def params(self, **overrides):
        values = {
            "environment": Environment.STAGING,
            "table": "users",
            "primary_key": "id",
            "primary_value": "42",
            "confirmation_token": generate_delete_token("staging", "users", "42"),
        }
        values.update(overrides)
        return DeleteParams(**values)

    def test_delete_with_valid_token(self):
        """A confirmed delete reaches the store with the physical table name."""
        # Act
        table = self.service.delete_item(self.params())

        # Assert
        self.assertEqual("staging-users", table.name)
        self.mock_dynamodb_client.delete_item.assert_called_once_with("staging-users", {"id": "42"})

    def test_missing_required_fields(self):
        for field in ("table", "primary_key", "primary_value"):
            with self.assertRaises(RequestValidationError) as ctx:
                self.service.delete_item(self.params(**{field: ""}))

            self.assertIn("Missing required fields", ctx.exception.message)

        self.mock_dynamodb_client.delete_item.assert_not_called()

    def test_unknown_table(self):
        with self.assertRaises(TableNotFoundError):
            self.service.delete_item(self.params(table="orders"))

        self.mock_dynamodb_client.delete_item.assert_not_called()

    def test_primary_key_mismatch(self):
        with self.assertRaises(PrimaryKeyMismatchError) as ctx:
            self.service.delete_item(self.params(primary_key="email"))

        self.assertEqual("invalid primary key: expected id, got email", ctx.exception.message)
        self.mock_dynamodb_client.delete_item.assert_not_called()

    def test_token_mismatch(self):
        """The store is never called when the token does not match."""
        for token in ("", "nope", generate_delete_token("production", "users", "42")):
            with self.assertRaises(InvalidConfirmationTokenError):
                self.service.delete_item(self.params(confirmation_token=token))

        self.mock_dynamodb_client.delete_item.assert_not_called()

    def test_sort_value_required_for_sorted_tables(self):
        params = self.params(
            table="events",
            primary_key="user_id",
            primary_value="u1",
            confirmation_token=generate_delete_token("staging", "events", "u1"),
        )

        with self.assertRaises(MissingRequiredKeyError) as ctx:
            self.service.delete_item(params)

        self.assertEqual("event_time", ctx.exception.attribute)
        self.mock_dynamodb_client.delete_item.assert_not_called()

    def test_delete_with_sort_value(self):
        params = self.params(
            table="events",
            primary_key="user_id",
            primary_value="u1",
            sort_value="2024-01-01T00:00:00Z",
            confirmation_token=generate_delete_token("staging", "events", "u1"),
        )

        self.service.delete_item(params)

        self.mock_dynamodb_client.delete_item.assert_called_once_with(
            "staging-events", {"user_id": "u1", "event_time": "2024-01-01T00:00:00Z"}
        )
