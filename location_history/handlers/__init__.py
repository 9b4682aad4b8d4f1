"""
Request handlers for location history.

Each domain module keeps its read path together with the validation it
relies on:

- locations: paged time-range queries over device location history
"""

from .locations import PagedRangeQuery, parse_query_params, validate_request

__all__ = [
    "PagedRangeQuery",
    "parse_query_params",
    "validate_request",
]
