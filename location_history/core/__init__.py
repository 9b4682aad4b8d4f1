"""
Core infrastructure components for location history queries.

- TableGateway: Thin wrapper over the boto3 DynamoDB Table
- OrderedStore: Range-query contract the paged handler depends on
- DynamoDBLocationStore: OrderedStore backed by a TableGateway
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error
from .location_store import (
    ContinuationToken,
    DynamoDBLocationStore,
    OrderedStore,
    RangePage,
    SortKeyRange,
    create_location_store,
)

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
    "ContinuationToken",
    "DynamoDBLocationStore",
    "OrderedStore",
    "RangePage",
    "SortKeyRange",
    "create_location_store",
]
