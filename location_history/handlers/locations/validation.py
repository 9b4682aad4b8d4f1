"""
Request validation for paged location queries.

Checks run in a fixed order and stop at the first failure:

1. page index     -> InvalidPageIndex
2. device id      -> MissingDeviceId
3. range pairing  -> IncompleteTimeRange
4. range ordering -> InvalidTimeRange
5. page size      -> InvalidPageSize

``parse_query_params`` applies the same order while converting the raw
query-string map, so a request is classified identically whether it
arrives as strings or as a typed QueryRequest.
"""

import re
from typing import Any, Mapping, Optional, Type

from ...exceptions import (
    IncompleteTimeRange,
    InvalidPageIndex,
    InvalidPageSize,
    InvalidTimeRange,
    MissingDeviceId,
    RequestValidationError,
)
from ...models import DEFAULT_PAGE_SIZE, QueryRequest

TIMESTAMP_NOT_INTEGER = "'startTimestamp' and 'endTimestamp' must be integers."

# ASCII digits with an optional minus sign; no "+", "_", padding or other scripts
INTEGER_PATTERN = re.compile(r"-?[0-9]+")


def _present(raw: Any) -> bool:
    # Empty strings count as absent; "0" is a real value.
    return raw is not None and raw != ""


def _parse_int(raw: Any, error_cls: Type[RequestValidationError], message: Optional[str] = None) -> int:
    if isinstance(raw, bool):
        raise error_cls(message, value=raw)
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str) or not INTEGER_PATTERN.fullmatch(raw):
        raise error_cls(message, value=raw)
    return int(raw)


def check_page_index(page_index: int) -> None:
    if page_index < 0:
        raise InvalidPageIndex(value=page_index)


def check_device_id(device_id: Optional[str]) -> None:
    if not device_id or not device_id.strip():
        raise MissingDeviceId()


def check_time_range_pair(start: Any, end: Any) -> None:
    if _present(start) != _present(end):
        raise IncompleteTimeRange("endTimestamp" if _present(start) else "startTimestamp")


def check_time_range_order(start: Optional[int], end: Optional[int]) -> None:
    if start is not None and end is not None and start >= end:
        raise InvalidTimeRange(value=f"{start}..{end}")


def check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise InvalidPageSize(value=page_size)


def validate_request(request: QueryRequest) -> None:
    """Run the validation phase on a typed request.

    Raises:
        RequestValidationError: The first rule the request breaks
    """
    check_page_index(request.page_index)
    check_device_id(request.device_id)
    check_time_range_pair(request.start_timestamp, request.end_timestamp)
    check_time_range_order(request.start_timestamp, request.end_timestamp)
    check_page_size(request.page_size)


def parse_query_params(params: Optional[Mapping[str, Any]]) -> QueryRequest:
    """Build a validated QueryRequest from a query-string parameter map.

    Args:
        params: ``deviceId``, ``startTimestamp``, ``endTimestamp``, ``limit``
            and ``page``, string-encoded; None is treated as an empty map

    Returns:
        QueryRequest that passes ``validate_request``

    Raises:
        RequestValidationError: The first rule the parameters break
    """
    params = params or {}

    raw_page = params.get("page")
    page_index = _parse_int(raw_page, InvalidPageIndex) if _present(raw_page) else 0
    check_page_index(page_index)

    device_id = params.get("deviceId")
    check_device_id(device_id)

    raw_start = params.get("startTimestamp")
    raw_end = params.get("endTimestamp")
    check_time_range_pair(raw_start, raw_end)
    start = _parse_int(raw_start, InvalidTimeRange, TIMESTAMP_NOT_INTEGER) if _present(raw_start) else None
    end = _parse_int(raw_end, InvalidTimeRange, TIMESTAMP_NOT_INTEGER) if _present(raw_end) else None
    check_time_range_order(start, end)

    raw_limit = params.get("limit")
    page_size = _parse_int(raw_limit, InvalidPageSize) if _present(raw_limit) else DEFAULT_PAGE_SIZE
    check_page_size(page_size)

    return QueryRequest(
        device_id=device_id,
        start_timestamp=start,
        end_timestamp=end,
        page_size=page_size,
        page_index=page_index,
    )
