"""Table catalog: the fixed registry of tables and indexes per environment."""

import json
from pathlib import Path
from typing import Dict, List, Mapping, Union

from aws_lambda_powertools.logging import Logger
from pydantic import TypeAdapter

from ..middleware.exceptions import IndexNotFoundError, TableNotFoundError
from ..models.catalog import Environment, IndexDescriptor, TableDescriptor

logger = Logger()

_CATALOG_ADAPTER = TypeAdapter(Dict[Environment, Dict[str, TableDescriptor]])


def _default_tables(env: Environment) -> Dict[str, TableDescriptor]:
    prefix = env.value
    return {
        "users": TableDescriptor(
            name=f"{prefix}-users",
            display_name="Users",
            primary_key="id",
            indexes=[
                IndexDescriptor(name="", display_name="User ID (Primary)", hash_key="id"),
                IndexDescriptor(
                    name="email_index", display_name="Email", hash_key="email"
                ),
                IndexDescriptor(
                    name="tenant_id_index", display_name="Tenant ID", hash_key="tenant_id"
                ),
            ],
        ),
        "sessions": TableDescriptor(
            name=f"{prefix}-sessions",
            display_name="Sessions",
            primary_key="session_id",
            indexes=[
                IndexDescriptor(
                    name="", display_name="Session ID (Primary)", hash_key="session_id"
                ),
                IndexDescriptor(
                    name="user_id_device_id_index",
                    display_name="User + Device ID",
                    hash_key="user_id",
                    range_key="device_id",
                ),
            ],
        ),
        "events": TableDescriptor(
            name=f"{prefix}-events",
            display_name="Events",
            primary_key="user_id",
            sort_key="event_time",
            indexes=[
                IndexDescriptor(
                    name="",
                    display_name="User ID + Event Time (Primary)",
                    hash_key="user_id",
                    range_key="event_time",
                ),
                IndexDescriptor(
                    name="event_type_index",
                    display_name="Event Type",
                    hash_key="event_type",
                    range_key="event_time",
                ),
            ],
        ),
    }


class Catalog:
    """Read-only registry mapping (environment, table name) to descriptors.

    Built once at startup and shared by every request. Every environment of
    the closed ``Environment`` set has a registry, possibly empty.
    """

    def __init__(self, tables: Mapping[Environment, Mapping[str, TableDescriptor]]):
        self._tables: Dict[Environment, Dict[str, TableDescriptor]] = {
            env: dict(tables.get(env, {})) for env in Environment
        }

    @classmethod
    def default(cls) -> "Catalog":
        """Build the built-in catalog."""
        return cls({env: _default_tables(env) for env in Environment})

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "Catalog":
        """Load a catalog from a JSON file.

        The file has the shape of the ``tables`` member returned by
        ``GET /api/tables``: ``{env: {tableName: TableDescriptor}}``.

        Raises:
            OSError: If the file cannot be read
            pydantic.ValidationError: If the content is not a valid catalog
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        catalog = cls(_CATALOG_ADAPTER.validate_python(raw))
        logger.info(
            "Loaded table catalog from file",
            extra={"path": str(path), "tables": catalog.table_count()},
        )
        return catalog

    def environments(self) -> List[Environment]:
        return list(self._tables)

    def tables(self, env: Environment) -> Dict[str, TableDescriptor]:
        return dict(self._tables[env])

    def table_count(self) -> int:
        return sum(len(tables) for tables in self._tables.values())

    def lookup_table(self, env: Environment, table_name: str) -> TableDescriptor:
        """Resolve a logical table name.

        Raises:
            TableNotFoundError: If the table is not declared for the environment
        """
        table = self._tables[env].get(table_name)
        if table is None:
            raise TableNotFoundError(env.value, table_name)
        return table

    def lookup_index(
        self, env: Environment, table_name: str, index_name: str
    ) -> IndexDescriptor:
        """Resolve an index; the empty name is the table's primary key.

        Raises:
            TableNotFoundError: If the table is not declared for the environment
            IndexNotFoundError: If the table has no such index
        """
        table = self.lookup_table(env, table_name)
        index = table.find_index(index_name)
        if index is None:
            raise IndexNotFoundError(table_name, index_name)
        return index

    def to_dict(self) -> Dict[str, Dict[str, dict]]:
        """Serialize as ``{env: {tableName: descriptor}}`` with camelCase keys."""
        return {
            env.value: {
                name: table.model_dump(by_alias=True)
                for name, table in tables.items()
            }
            for env, tables in self._tables.items()
        }
