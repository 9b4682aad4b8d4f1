#!/usr/bin/env python3
"""
Basic usage examples for the location history query handler.

This example demonstrates:
1. Setting up configuration
2. Walking a device's history page by page
3. Querying a time window
4. Invoking the Lambda entry point with an API Gateway style event
"""

import json

from location_history import (
    LocationHistoryConfig,
    LocationHistoryError,
    PagedRangeQuery,
    QueryRequest,
)
from location_history.api import create_lambda_handler


def main():
    """Demonstrate paged location queries."""

    # 1. Configure the store (TABLE_NAME, AWS_REGION, ... from the environment)
    print("1. Setting up configuration...")
    config = LocationHistoryConfig.from_env()

    # For local development, you might use:
    # config = LocationHistoryConfig.for_local_development()

    query = PagedRangeQuery.from_config(config)

    try:
        # 2. Walk every page for a device
        print("2. Walking all pages for device 'tracker-001'...")
        page_index = 0
        while page_index is not None:
            page = query.handle(QueryRequest(device_id="tracker-001", page_size=25, page_index=page_index))
            print(f"   Page {page.page_index}: {page.count} records")
            page_index = page.next_page_index

        # 3. Only the records inside a time window
        print("3. Querying a one hour window...")
        window = query.handle(QueryRequest(
            device_id="tracker-001",
            start_timestamp=1700000000000,
            end_timestamp=1700003600000,
        ))
        for record in window.items:
            print(f"   {record.timestamp}: {record.to_response_item()}")

        # 4. Through the Lambda entry point
        print("4. Invoking the Lambda handler...")
        handler = create_lambda_handler(query)
        response = handler({"queryStringParameters": {"deviceId": "tracker-001", "limit": "5", "page": "1"}})
        print(f"   {response['statusCode']}: {json.loads(response['body'])}")

    except LocationHistoryError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
