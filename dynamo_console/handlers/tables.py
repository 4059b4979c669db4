"""Handler for the catalog dump (GET /api/tables)."""

from ..config.catalog import Catalog
from ..models.api import TablesResponse


def handle_get_tables(catalog: Catalog) -> TablesResponse:
    """Return every environment and the tables declared for it."""
    return TablesResponse(
        environments=[env.value for env in catalog.environments()],
        tables=catalog.to_dict(),
    )
