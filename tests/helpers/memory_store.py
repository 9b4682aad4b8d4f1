"""
In-memory OrderedStore for tests.

Chunks records the way DynamoDB does for a partition/sort-key query: a
continuation token is returned only when records remain after the chunk.
Every call is recorded so tests can assert round-trip counts and the exact
token threaded into each call.
"""

from typing import Dict, Iterable, List, Optional, Set

from location_history.core import ContinuationToken, RangePage, SortKeyRange
from location_history.exceptions import StoreError
from location_history.models import LocationRecord


def make_records(device_id: str, timestamps: Iterable[int]) -> List[LocationRecord]:
    """Build records with a coordinate payload for each timestamp."""
    return [
        LocationRecord(deviceId=device_id, timestamp=ts, lat=-12.0 - ts / 1000, lng=-77.0)
        for ts in timestamps
    ]


class InMemoryLocationStore:
    """OrderedStore over a list of LocationRecord."""

    def __init__(self, records: Iterable[LocationRecord], fail_on_calls: Optional[Set[int]] = None):
        """
        Args:
            records: Records in any order
            fail_on_calls: Zero-based call numbers that raise StoreError
        """
        self.records = sorted(records, key=lambda r: (r.device_id, r.timestamp))
        self.fail_on_calls = fail_on_calls or set()
        self.calls: List[Dict] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def range_query(
        self,
        partition_key: str,
        sort_range: Optional[SortKeyRange],
        limit: int,
        continuation_token: Optional[ContinuationToken] = None,
    ) -> RangePage:
        call_number = len(self.calls)
        self.calls.append({
            'partition_key': partition_key,
            'sort_range': sort_range,
            'limit': limit,
            'continuation_token': continuation_token,
        })
        if call_number in self.fail_on_calls:
            raise StoreError("Simulated store failure", "ProvisionedThroughputExceededException: slow down")

        matching = [
            r for r in self.records
            if r.device_id == partition_key
            and (sort_range is None or sort_range.start <= r.timestamp <= sort_range.end)
        ]
        offset = continuation_token._position if continuation_token is not None else 0
        chunk = matching[offset:offset + limit]
        next_offset = offset + len(chunk)
        return RangePage(
            items=chunk,
            item_count=len(chunk),
            next_token=ContinuationToken(next_offset) if next_offset < len(matching) else None,
        )
