"""Configuration-driven query, update and delete console for DynamoDB tables."""

__version__ = "0.1.0"
