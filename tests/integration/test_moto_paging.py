"""
End-to-end paging against a moto DynamoDB table.

The table holds five dev1 records (timestamps 100..500, written out of
order) and two dev2 records; pages are read through the Lambda handler.
"""

import base64
import json
from decimal import Decimal

import pytest
from boto3.dynamodb.types import Binary

from location_history import api
from location_history.core import create_location_store


def query(handler, **params):
    response = handler({'queryStringParameters': params})
    return response['statusCode'], json.loads(response['body'])


@pytest.fixture
def handler(dynamodb_query):
    return api.create_lambda_handler(dynamodb_query)


class TestMotoPaging:
    """Scenarios over a real Query/LastEvaluatedKey implementation."""

    def test_first_page(self, handler):
        status, body = query(handler, deviceId='dev1', limit='2', page='0')

        assert status == 200
        assert [item['timestamp'] for item in body['items']] == [100, 200]
        assert body['count'] == 2
        assert body['page'] == 0
        assert body['nextPage'] == 1

    def test_last_page(self, handler):
        status, body = query(handler, deviceId='dev1', limit='2', page='2')

        assert status == 200
        assert [item['timestamp'] for item in body['items']] == [500]
        assert body['count'] == 1
        assert body['nextPage'] is None

    def test_beyond_data(self, handler):
        status, body = query(handler, deviceId='dev1', limit='2', page='5')

        assert status == 200
        assert body == {'items': [], 'count': 0, 'page': 5, 'nextPage': None}

    def test_walk_all_pages(self, handler):
        seen = []
        page = 0
        while page is not None:
            status, body = query(handler, deviceId='dev1', limit='2', page=str(page))
            assert status == 200
            seen.extend(item['timestamp'] for item in body['items'])
            page = body['nextPage']

        assert seen == [100, 200, 300, 400, 500]

    def test_time_range_is_inclusive(self, handler):
        status, body = query(handler, deviceId='dev1', startTimestamp='200', endTimestamp='400')

        assert status == 200
        assert [item['timestamp'] for item in body['items']] == [200, 300, 400]
        assert body['nextPage'] is None

    def test_payload_numbers_are_json_numbers(self, handler):
        _, body = query(handler, deviceId='dev1', limit='1')

        assert body['items'][0] == {
            'deviceId': 'dev1', 'timestamp': 100, 'lat': -12.0464, 'lng': -77.0428, 'speed': 3
        }

    def test_devices_are_isolated(self, handler):
        _, body = query(handler, deviceId='dev2')

        assert [item['timestamp'] for item in body['items']] == [150, 250]
        assert {item['deviceId'] for item in body['items']} == {'dev2'}

    def test_invalid_range(self, handler):
        status, body = query(handler, deviceId='dev1', startTimestamp='100', endTimestamp='50')

        assert status == 400
        assert body['message'] == "'startTimestamp' must be less than 'endTimestamp'."

    def test_idempotent(self, handler):
        assert query(handler, deviceId='dev1', limit='2', page='1') == \
            query(handler, deviceId='dev1', limit='2', page='1')

    def test_fractional_timestamp(self, handler, seeded_locations_table):
        seeded_locations_table.put_item(Item={'deviceId': 'dev9', 'timestamp': Decimal('1700000000.5')})

        status, body = query(handler, deviceId='dev9', startTimestamp='1700000000', endTimestamp='1700000001')

        assert status == 200
        assert body['items'] == [{'deviceId': 'dev9', 'timestamp': 1700000000.5}]

    def test_binary_attribute_is_base64(self, handler, seeded_locations_table):
        seeded_locations_table.put_item(Item={'deviceId': 'dev8', 'timestamp': 1, 'blob': Binary(b'\x01\x02')})

        status, body = query(handler, deviceId='dev8')

        assert status == 200
        assert body['items'] == [{'deviceId': 'dev8', 'timestamp': 1, 'blob': base64.b64encode(b'\x01\x02').decode()}]


class TestMissingTable:
    def test_missing_table_is_a_store_error(self, mock_config, mock_dynamodb_resource):
        handler = api.create_lambda_handler(
            api.PagedRangeQuery(create_location_store(mock_config))
        )

        status, body = query(handler, deviceId='dev1')

        assert status == 500
        assert body['message'] == "Internal server error while querying the database."
        assert body['error']
