from .config import LocationHistoryConfig
from .exceptions import (
    IncompleteTimeRange,
    InvalidPageIndex,
    InvalidPageSize,
    InvalidTimeRange,
    LocationHistoryError,
    MissingDeviceId,
    PageFetchError,
    PageSkipError,
    RequestValidationError,
    StoreError,
)
from .models import (
    LocationRecord,
    PageResult,
    QueryRequest,
)
from .core import (
    ContinuationToken,
    DynamoDBLocationStore,
    OrderedStore,
    RangePage,
    SortKeyRange,
    TableGateway,
    create_location_store,
)
from .handlers import (
    PagedRangeQuery,
    parse_query_params,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "LocationHistoryConfig",

    # Exceptions
    "LocationHistoryError",
    "RequestValidationError",
    "IncompleteTimeRange",
    "InvalidPageIndex",
    "InvalidPageSize",
    "InvalidTimeRange",
    "MissingDeviceId",
    "StoreError",
    "PageFetchError",
    "PageSkipError",

    # Models
    "LocationRecord",
    "PageResult",
    "QueryRequest",

    # Store
    "ContinuationToken",
    "DynamoDBLocationStore",
    "OrderedStore",
    "RangePage",
    "SortKeyRange",
    "TableGateway",
    "create_location_store",

    # Handlers
    "PagedRangeQuery",
    "parse_query_params",
]
