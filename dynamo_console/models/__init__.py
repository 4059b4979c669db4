"""Catalog, record and API models."""

from .catalog import Environment, IndexDescriptor, TableDescriptor
from .records import AttributeValue, Record, from_store_record, to_store_record

__all__ = [
    "Environment",
    "IndexDescriptor",
    "TableDescriptor",
    "AttributeValue",
    "Record",
    "from_store_record",
    "to_store_record",
]
