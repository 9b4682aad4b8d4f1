"""
Domain-Specific Exceptions for Location History

This module consolidates the exceptions raised while answering a paged
location query. Two families exist:

1. Request validation errors - detected before any store access, reported
   to the caller as a bad request and never retried
2. Store errors - any failure of the underlying table, surfaced with the
   failure detail and never retried by the handler itself
"""

from typing import Any, Dict, Optional

from .base import LocationHistoryError


# =============================================================================
# Request Validation Errors
# =============================================================================

class RequestValidationError(LocationHistoryError):
    """Raised when a query request is rejected before reaching the store.

    Subclasses carry a default user-facing message; ``field`` names the
    offending query parameter.
    """

    status_code = 400
    default_message = "Invalid request."
    field: Optional[str] = None

    def __init__(self, message: Optional[str] = None, value: Any = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message (defaults to the class message)
            value: The rejected raw value, kept for diagnostics
        """
        self.value = value
        context = {}
        if self.field:
            context['field'] = self.field
        if value is not None:
            context['value'] = value
        super().__init__(message or self.default_message, None, context)


class InvalidPageIndex(RequestValidationError):
    """Page index is not a non-negative integer."""

    default_message = "The 'page' parameter must be an integer greater than or equal to 0."
    field = "page"


class MissingDeviceId(RequestValidationError):
    """Device identifier is absent or empty."""

    default_message = "The 'deviceId' parameter is required."
    field = "deviceId"


class IncompleteTimeRange(RequestValidationError):
    """Only one of the paired time bounds was supplied."""

    default_message = "'startTimestamp' and 'endTimestamp' must be provided together to filter by time."
    field = "endTimestamp"

    def __init__(self, missing: str = "endTimestamp", message: Optional[str] = None):
        """Initialize incomplete range error.

        Args:
            missing: The bound that was not supplied
            message: Human-readable error message (defaults to the class message)
        """
        self.field = missing
        super().__init__(message)


class InvalidTimeRange(RequestValidationError):
    """Time bounds are not integers or are not strictly ordered."""

    default_message = "'startTimestamp' must be less than 'endTimestamp'."
    field = "startTimestamp"


class InvalidPageSize(RequestValidationError):
    """Page size is not a positive integer."""

    default_message = "The 'limit' parameter must be an integer greater than 0."
    field = "limit"


# =============================================================================
# Store Errors
# =============================================================================

class StoreError(LocationHistoryError):
    """Raised when the location store fails to answer a range query.

    Attributes:
        detail: Underlying failure detail suitable for the caller
    """

    def __init__(self, message: str, detail: Optional[str] = None, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        """Initialize store error.

        Args:
            message: Human-readable error message
            detail: Underlying failure detail (defaults to the message)
            original_error: The original exception that caused this error
            context: Additional context information (e.g., table, operation)
        """
        self.detail = detail if detail is not None else message
        super().__init__(message, original_error, context)

    def to_response_body(self) -> Dict[str, Any]:
        return {'message': self.message, 'error': self.detail}


class ConnectionError(StoreError):
    """Raised when the store cannot be reached or rejects our credentials.

    Used for:
    - Network connectivity issues and invalid endpoints
    - Authentication/authorization failures
    - Unrecognised store failures
    """


class RetryableError(StoreError):
    """Raised when the store fails with a temporary or throttling condition.

    The handler never retries; the caller or surrounding transport may.
    """


class TableNotFoundError(StoreError):
    """Raised when the configured location table does not exist."""

    def __init__(self, table_name: str, detail: Optional[str] = None, original_error: Optional[Exception] = None):
        self.table_name = table_name
        super().__init__(
            f"Table '{table_name}' not found",
            detail,
            original_error,
            {'table_name': table_name}
        )


class PageSkipError(StoreError):
    """A store failure while replaying the queries of preceding pages."""

    def __init__(self, cause: StoreError, page_index: int, skipped: int):
        """Initialize page-skip error.

        Args:
            cause: The store failure raised while skipping
            page_index: Requested page index
            skipped: Number of pages already skipped when the failure occurred
        """
        self.page_index = page_index
        self.skipped = skipped
        super().__init__(
            "Internal error while paging through location history.",
            cause.detail,
            cause,
            {'page': page_index, 'skipped': skipped}
        )


class PageFetchError(StoreError):
    """A store failure while fetching the requested page itself."""

    def __init__(self, cause: StoreError, page_index: int):
        """Initialize page fetch error.

        Args:
            cause: The store failure raised by the final query
            page_index: Requested page index
        """
        self.page_index = page_index
        super().__init__(
            "Internal server error while querying the database.",
            cause.detail,
            cause,
            {'page': page_index}
        )
