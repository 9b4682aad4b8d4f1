# Base mixins and utilities
from .base import (
    DynamoDBMixin,
    convert_dynamodb_types,
)

# Domain models
from .domain_models import (
    DEFAULT_PAGE_SIZE,
    LocationRecord,
    PageResult,
    QueryRequest,
)

__all__ = [
    "DynamoDBMixin",
    "convert_dynamodb_types",
    "DEFAULT_PAGE_SIZE",
    "LocationRecord",
    "PageResult",
    "QueryRequest",
]
