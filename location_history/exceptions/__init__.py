# Base exception class
from .base import LocationHistoryError

# Domain-specific exceptions
from .domain_exceptions import (
    RequestValidationError,
    InvalidPageIndex,
    MissingDeviceId,
    IncompleteTimeRange,
    InvalidTimeRange,
    InvalidPageSize,
    StoreError,
    ConnectionError,
    RetryableError,
    TableNotFoundError,
    PageSkipError,
    PageFetchError,
)

__all__ = [
    # Base exception
    "LocationHistoryError",

    # Request validation errors
    "RequestValidationError",
    "IncompleteTimeRange",
    "InvalidPageIndex",
    "InvalidPageSize",
    "InvalidTimeRange",
    "MissingDeviceId",

    # Store errors
    "StoreError",
    "ConnectionError",
    "PageFetchError",
    "PageSkipError",
    "RetryableError",
    "TableNotFoundError",
]
