from .dynamodb import DynamoDBClient, QueryPage

__all__ = ["DynamoDBClient", "QueryPage"]
