# Reexport all handlers

from .delete import handle_delete
from .query import handle_query
from .static import handle_index, handle_static_asset
from .tables import handle_get_tables
from .update import handle_update

__all__ = [
    "handle_delete",
    "handle_get_tables",
    "handle_index",
    "handle_query",
    "handle_static_asset",
    "handle_update",
]
