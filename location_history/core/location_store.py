"""
Ordered location store.

Defines the range-query contract the paged handler is written against and
its DynamoDB implementation. The contract:

- equality match on the partition key (device id)
- optional inclusive interval on the numeric sort key (timestamp)
- ascending order, at most ``limit`` records per call
- a ContinuationToken on the returned page whenever the store has more
  records; the token is only valid for an identical query shape
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from boto3.dynamodb.conditions import Key

from ..config import LocationHistoryConfig
from ..exceptions import StoreError
from ..models import LocationRecord
from .table_gateway import TableGateway, create_table_gateway

logger = logging.getLogger(__name__)

PARTITION_KEY = "deviceId"
SORT_KEY = "timestamp"


class ContinuationToken:
    """
    Opaque resume position produced by a store.

    Only the store that issued a token knows what it wraps; callers thread
    it into the next ``range_query`` call and nothing else.
    """

    __slots__ = ("_position",)

    def __init__(self, position: Any):
        self._position = position

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContinuationToken):
            return NotImplemented
        return self._position == other._position

    def __hash__(self) -> int:
        return hash(repr(self._position))

    def __repr__(self) -> str:
        return "ContinuationToken(<opaque>)"


@dataclass(frozen=True)
class SortKeyRange:
    """Inclusive ``[start, end]`` interval on the sort key."""

    start: int
    end: int


@dataclass
class RangePage:
    """One chunk of a range query as returned by the store."""

    items: List[LocationRecord] = field(default_factory=list)
    item_count: int = 0
    next_token: Optional[ContinuationToken] = None

    @property
    def exhausted(self) -> bool:
        return self.next_token is None


class OrderedStore(Protocol):
    """Range-query primitive the paged handler depends on."""

    def range_query(
        self,
        partition_key: str,
        sort_range: Optional[SortKeyRange],
        limit: int,
        continuation_token: Optional[ContinuationToken] = None,
    ) -> RangePage:
        ...


class DynamoDBLocationStore:
    """
    Location history table queried through a TableGateway.

    The continuation token wraps DynamoDB's ``LastEvaluatedKey`` and is fed
    back as ``ExclusiveStartKey``.
    """

    def __init__(self, gateway: TableGateway):
        self.gateway = gateway

    @property
    def table_name(self) -> str:
        return self.gateway.table_name

    def build_query(
        self,
        partition_key: str,
        sort_range: Optional[SortKeyRange],
        limit: int,
        continuation_token: Optional[ContinuationToken] = None,
    ) -> Dict[str, Any]:
        """Build boto3 Query kwargs for one chunk of the range."""
        key_condition = Key(PARTITION_KEY).eq(partition_key)
        if sort_range is not None:
            key_condition = key_condition & Key(SORT_KEY).between(sort_range.start, sort_range.end)

        query_kwargs = {
            'KeyConditionExpression': key_condition,
            'ScanIndexForward': True,  # oldest first
            'Limit': limit,
        }
        if continuation_token is not None:
            query_kwargs['ExclusiveStartKey'] = continuation_token._position
        return query_kwargs

    def range_query(
        self,
        partition_key: str,
        sort_range: Optional[SortKeyRange],
        limit: int,
        continuation_token: Optional[ContinuationToken] = None,
    ) -> RangePage:
        """
        Fetch one chunk of a device's location history.

        Args:
            partition_key: Device identifier
            sort_range: Optional inclusive timestamp interval
            limit: Maximum records to return
            continuation_token: Token from the previous chunk, None to start

        Returns:
            RangePage with the records and the token for the next chunk

        Raises:
            StoreError: The query failed or returned a malformed record
        """
        query_kwargs = self.build_query(partition_key, sort_range, limit, continuation_token)
        logger.debug(
            f"Query {self.table_name}: deviceId={partition_key} range={sort_range} "
            f"limit={limit} resume={continuation_token is not None}"
        )

        response = self.gateway.query(**query_kwargs)

        try:
            items = [LocationRecord.from_dynamodb_item(item) for item in response.get('Items', [])]
        except ValueError as e:
            raise StoreError(f"Malformed location record in {self.table_name}", str(e), e) from e

        last_key = response.get('LastEvaluatedKey')
        return RangePage(
            items=items,
            item_count=response.get('Count', len(items)),
            next_token=ContinuationToken(last_key) if last_key else None,
        )


def create_location_store(config: LocationHistoryConfig) -> DynamoDBLocationStore:
    """
    Factory function to create the DynamoDB-backed location store.

    Args:
        config: Store configuration; ``config.table_name`` selects the table

    Returns:
        Configured DynamoDBLocationStore
    """
    return DynamoDBLocationStore(create_table_gateway(config))
