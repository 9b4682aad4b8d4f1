"""
Test configuration and fixtures for location history queries.

Provides configuration, an in-memory store and a moto-backed location
table seeded with ascending records.
"""

import sys
from decimal import Decimal
from pathlib import Path

# Add parent directory to path so we can import location_history
sys.path.insert(0, str(Path(__file__).parent.parent))

import boto3
import pytest
from moto import mock_aws

from location_history import (
    LocationHistoryConfig,
    PagedRangeQuery,
    create_location_store,
)
from tests.helpers import InMemoryLocationStore, make_records


@pytest.fixture
def mock_config():
    """Configuration for mocked testing."""
    return LocationHistoryConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        table_name="test_locations",
        enable_debug_logging=False
    )


@pytest.fixture
def five_records():
    """Five ascending records for device dev1 (timestamps 100..500)."""
    return make_records("dev1", [100, 200, 300, 400, 500])


@pytest.fixture
def memory_store(five_records):
    """In-memory store holding five records for dev1 and two for dev2."""
    return InMemoryLocationStore(five_records + make_records("dev2", [150, 250]))


@pytest.fixture
def memory_query(memory_store):
    """PagedRangeQuery over the in-memory store."""
    return PagedRangeQuery(memory_store)


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def locations_table(mock_dynamodb_resource):
    """Create the locations table for testing."""
    table = mock_dynamodb_resource.create_table(
        TableName='test_locations',
        KeySchema=[
            {'AttributeName': 'deviceId', 'KeyType': 'HASH'},
            {'AttributeName': 'timestamp', 'KeyType': 'RANGE'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'deviceId', 'AttributeType': 'S'},
            {'AttributeName': 'timestamp', 'AttributeType': 'N'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )
    return table


@pytest.fixture
def seeded_locations_table(locations_table):
    """Locations table holding five dev1 records and two dev2 records."""
    for ts in [500, 300, 100, 400, 200]:
        locations_table.put_item(Item={
            'deviceId': 'dev1',
            'timestamp': ts,
            'lat': Decimal('-12.0464'),
            'lng': Decimal('-77.0428'),
            'speed': 3,
        })
    for ts in [150, 250]:
        locations_table.put_item(Item={
            'deviceId': 'dev2',
            'timestamp': ts,
            'lat': Decimal('40.4168'),
            'lng': Decimal('-3.7038'),
        })
    return locations_table


@pytest.fixture
def dynamodb_query(mock_config, seeded_locations_table):
    """PagedRangeQuery backed by the moto locations table."""
    return PagedRangeQuery(create_location_store(mock_config))
