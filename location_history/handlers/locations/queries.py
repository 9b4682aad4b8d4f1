"""
Paged Location History Read API

Answers "page N of device X's history" on top of a store whose only
pagination primitive is an opaque continuation token. Page N is reached by
replaying the queries for pages 0..N-1, keeping only their tokens, then
issuing the query for page N with the last token.

Retrieving page N therefore costs N+1 store round-trips. Page boundaries
are exactly the store's own chunks, so walking nextPage from any page
yields the following chunk with no gaps or duplicates.
"""

import logging
from typing import Optional

from ...config import LocationHistoryConfig
from ...core import (
    ContinuationToken,
    OrderedStore,
    SortKeyRange,
    create_location_store,
)
from ...exceptions import PageFetchError, PageSkipError, StoreError
from ...models import PageResult, QueryRequest
from .validation import validate_request

logger = logging.getLogger(__name__)


class PagedRangeQuery:
    """
    Read-only paged range query over a device's location history.

    Stateless across calls; a single instance may serve concurrent
    requests as long as the store does.
    """

    def __init__(self, store: OrderedStore):
        """Initialize with the store to query."""
        self.store = store

    @classmethod
    def from_config(cls, config: LocationHistoryConfig) -> 'PagedRangeQuery':
        """Create a handler backed by the configured DynamoDB table."""
        return cls(create_location_store(config))

    def handle(self, request: QueryRequest) -> PageResult:
        """
        Return the requested page of a device's location history.

        Args:
            request: Paged range query

        Returns:
            PageResult; an empty page with no next page when the requested
            index lies beyond the available data

        Raises:
            RequestValidationError: Request rejected before any store access
            PageSkipError: Store failed while skipping preceding pages
            PageFetchError: Store failed while fetching the requested page
        """
        validate_request(request)

        sort_range = None
        if request.has_time_range:
            sort_range = SortKeyRange(request.start_timestamp, request.end_timestamp)

        token = self._skip_to_page(request, sort_range)
        if token is None and request.page_index > 0:
            logger.info(
                f"Page {request.page_index} for device {request.device_id} is beyond the available data"
            )
            return PageResult.empty(request.page_index)

        logger.info(
            f"Fetching page {request.page_index} for device {request.device_id}: "
            f"range={sort_range} limit={request.page_size}"
        )
        try:
            page = self.store.range_query(request.device_id, sort_range, request.page_size, token)
        except StoreError as e:
            logger.error(f"Error querying page {request.page_index} for device {request.device_id}: {e}")
            raise PageFetchError(e, request.page_index) from e

        return PageResult(
            items=page.items,
            count=len(page.items),
            page_index=request.page_index,
            next_page_index=None if page.exhausted else request.page_index + 1,
        )

    def _skip_to_page(
        self,
        request: QueryRequest,
        sort_range: Optional[SortKeyRange],
    ) -> Optional[ContinuationToken]:
        """Replay pages 0..page_index-1 and return the token that resumes at page_index.

        Returns None when page_index is 0 or when the data runs out first;
        callers tell the two apart by page_index.
        """
        token = None
        for skipped in range(request.page_index):
            try:
                page = self.store.range_query(request.device_id, sort_range, request.page_size, token)
            except StoreError as e:
                logger.error(f"Error skipping page {skipped} for device {request.device_id}: {e}")
                raise PageSkipError(e, request.page_index, skipped) from e

            if page.exhausted:
                return None
            logger.debug(f"Skipped page {skipped} ({page.item_count} records) for device {request.device_id}")
            token = page.next_token
        return token
