"""API models for request/response handling."""

from .requests import DeleteRequest, QueryRequest, UpdateRequest
from .responses import (
    APIErrorResponse,
    MessageResponse,
    QueryResponse,
    TablesResponse,
    VersionResponse,
)

__all__ = [
    # Requests
    "DeleteRequest",
    "QueryRequest",
    "UpdateRequest",
    # Responses
    "APIErrorResponse",
    "MessageResponse",
    "QueryResponse",
    "TablesResponse",
    "VersionResponse",
]
