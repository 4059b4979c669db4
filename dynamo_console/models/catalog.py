"""Catalog descriptors: environments, tables and their indexes."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..middleware.exceptions import InvalidEnvironmentError


class Environment(str, Enum):
    """Deployment environment selecting the physical table set.

    Inherits from str to ensure JSON serialization works correctly.
    """

    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Resolve a caller-supplied environment tag.

        Raises:
            InvalidEnvironmentError: If the value is not one of the fixed set
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnvironmentError(str(value))


class CatalogModel(BaseModel):
    """Immutable model serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class IndexDescriptor(CatalogModel):
    """One queryable access path on a table.

    Attributes:
        name: DynamoDB index name, empty for the table's own primary key
        display_name: Human-readable name
        hash_key: Partition key attribute
        range_key: Sort key attribute, if any
    """

    name: str = Field("", description="Index name (empty for primary key)")
    display_name: str = Field(..., description="Human-readable name")
    hash_key: str = Field(..., min_length=1, description="Partition key attribute")
    range_key: Optional[str] = Field(None, description="Sort key attribute")

    @property
    def is_primary(self) -> bool:
        return self.name == ""


class TableDescriptor(CatalogModel):
    """Static key structure of one logical table.

    Attributes:
        name: Physical DynamoDB table name
        display_name: Human-readable name
        primary_key: Partition key attribute of the table
        sort_key: Sort key attribute of the table, if any
        indexes: Access paths, including the primary one (empty name)
    """

    name: str = Field(..., min_length=1, description="Physical table name")
    display_name: str = Field(..., description="Human-readable name")
    primary_key: str = Field(..., min_length=1, description="Primary key attribute")
    sort_key: Optional[str] = Field(None, description="Sort key attribute")
    indexes: List[IndexDescriptor] = Field(..., description="Queryable indexes")

    @model_validator(mode="after")
    def check_primary_index(self) -> "TableDescriptor":
        names = [index.name for index in self.indexes]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate index names on table {self.name}")

        primary = [index for index in self.indexes if index.is_primary]
        if len(primary) != 1:
            raise ValueError(
                f"Table {self.name} must declare exactly one primary index"
            )
        if primary[0].hash_key != self.primary_key:
            raise ValueError(
                f"Primary index of {self.name} must hash on {self.primary_key}"
            )
        if primary[0].range_key != self.sort_key:
            raise ValueError(
                f"Primary index of {self.name} must range on {self.sort_key}"
            )
        return self

    @property
    def primary_index(self) -> IndexDescriptor:
        return next(index for index in self.indexes if index.is_primary)

    def find_index(self, index_name: str) -> Optional[IndexDescriptor]:
        for index in self.indexes:
            if index.name == index_name:
                return index
        return None
