"""Response models for API endpoints."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class APIErrorResponse(BaseModel):
    """Error envelope shared by every endpoint.

    Attributes:
        success: Always False
        error: Human-readable error message
    """

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(..., description="Human-readable error message")


class TablesResponse(BaseModel):
    """Response for GET /api/tables (catalog dump)."""

    environments: List[str] = Field(..., description="Known environments")
    tables: Dict[str, Dict[str, Any]] = Field(
        ..., description="Table descriptors by environment and table name"
    )


class QueryResponse(BaseModel):
    """Response for POST /api/query."""

    success: bool = Field(True, description="Request outcome")
    count: int = Field(..., ge=0, description="Number of items returned")
    items: List[Dict[str, Any]] = Field(..., description="Matching records")


class MessageResponse(BaseModel):
    """Response for POST /api/update and POST /api/delete."""

    success: bool = Field(True, description="Request outcome")
    message: str = Field(..., description="Outcome description")


class VersionResponse(BaseModel):
    """Response for GET /api/version."""

    version: str = Field(..., description="API version string")
