"""
Location History Domain Models

Request, record and page models for the paged location query:

- LocationRecord: one stored position, keyed by (deviceId, timestamp)
- QueryRequest: typed form of a paged range query
- PageResult: one page of records plus the index of the next page
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .base import DynamoDBMixin

DEFAULT_PAGE_SIZE = 10


class LocationRecord(DynamoDBMixin, BaseModel):
    """
    A single location sample for a device.

    Only the key attributes are modelled; every other stored attribute
    (coordinates, speed, battery, ...) is carried through as JSON-native values.
    """

    device_id: str = Field(..., alias="deviceId", description="Partition key: device identifier")
    timestamp: Union[int, float] = Field(..., description="Sort key: numeric sample time (DynamoDB N)")

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True
    )

    def to_response_item(self) -> Dict[str, Any]:
        """Return the record as stored, using the table's attribute names."""
        return self.model_dump(by_alias=True)


class QueryRequest(BaseModel):
    """
    Typed paged range query over one device's location history.

    Both timestamps are present or both absent; when present the start is
    strictly lower than the end. These rules are enforced by the handler's
    validation phase so a violation maps onto a specific error kind.
    """

    device_id: Optional[str] = Field(None, description="Device identifier (required)")
    start_timestamp: Optional[int] = Field(None, description="Inclusive lower time bound")
    end_timestamp: Optional[int] = Field(None, description="Inclusive upper time bound")
    page_size: int = Field(DEFAULT_PAGE_SIZE, description="Maximum records per page")
    page_index: int = Field(0, description="Zero-based page to return")

    @property
    def has_time_range(self) -> bool:
        return self.start_timestamp is not None and self.end_timestamp is not None


class PageResult(BaseModel):
    """One page of location records."""

    items: List[LocationRecord] = Field(default_factory=list)
    count: int = Field(0, description="Number of records on this page")
    page_index: int = Field(..., serialization_alias="page")
    next_page_index: Optional[int] = Field(None, serialization_alias="nextPage")

    @classmethod
    def empty(cls, page_index: int) -> 'PageResult':
        """Page requested beyond the available data."""
        return cls(items=[], count=0, page_index=page_index, next_page_index=None)

    @property
    def has_next_page(self) -> bool:
        return self.next_page_index is not None

    def to_response_body(self) -> Dict[str, Any]:
        """Serialise as ``{items, count, page, nextPage}``."""
        return {
            'items': [item.to_response_item() for item in self.items],
            'count': self.count,
            'page': self.page_index,
            'nextPage': self.next_page_index,
        }
