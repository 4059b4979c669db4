"""Request models for API endpoints."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class APIRequest(BaseModel):
    """Base for JSON request bodies using camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QueryRequest(APIRequest):
    """Request body for POST /api/query.

    An empty ``index_name`` selects the table's primary key.
    """

    environment: str = Field(..., description="Target environment")
    table: str = Field(..., description="Logical table name")
    index_name: str = Field("", description="Index name, empty for primary key")
    values: Dict[str, str] = Field(
        default_factory=dict, description="Key attribute values"
    )


class UpdateRequest(APIRequest):
    """Request body for POST /api/update (full replacement of one record)."""

    environment: str = Field(..., description="Target environment")
    table: str = Field(..., description="Logical table name")
    item: Dict[str, Any] = Field(..., description="Complete record to store")


class DeleteRequest(APIRequest):
    """Request body for POST /api/delete.

    ``confirmation_token`` is the SHA-256 hex digest of
    ``DELETE:{environment}:{table}:{primaryValue}``.
    """

    environment: str = Field(..., description="Target environment")
    table: str = Field("", description="Logical table name")
    primary_key: str = Field("", description="Primary key attribute name")
    primary_value: str = Field("", description="Primary key value")
    sort_value: Optional[str] = Field(
        None, description="Sort key value, for tables declaring one"
    )
    confirmation_token: str = Field("", description="Delete confirmation token")
