from .confirmation import generate_delete_token, verify_delete_token
from .item import DeleteParams, ItemService
from .query import PointRead, QueryParams, QueryResult, QueryService, RangeQuery, build_operation
from .request_parser import RequestParsingService

__all__ = [
    "generate_delete_token",
    "verify_delete_token",
    "DeleteParams",
    "ItemService",
    "PointRead",
    "QueryParams",
    "QueryResult",
    "QueryService",
    "RangeQuery",
    "build_operation",
    "RequestParsingService",
]
