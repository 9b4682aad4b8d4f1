"""
Location history read API.

PagedRangeQuery answers numeric-page queries over a device's location
history; validation turns raw query-string parameters into a QueryRequest.

Usage:
    from .queries import PagedRangeQuery

    query = PagedRangeQuery.from_config(config)
    page = query.handle(parse_query_params(params))
"""

from .queries import PagedRangeQuery
from .validation import parse_query_params, validate_request

__all__ = [
    "PagedRangeQuery",
    "parse_query_params",
    "validate_request",
]
