"""
AWS Lambda entry point for paged location history queries.

API Gateway proxy event in, proxy response out:

- 200 ``{items, count, page, nextPage}``
- 400 ``{message}`` for rejected requests
- 500 ``{message, error}`` for store failures

The query handler and its store are created once per process from
environment configuration and reused across warm invocations.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional

from .config import LocationHistoryConfig
from .exceptions import RequestValidationError, StoreError
from .handlers import PagedRangeQuery, parse_query_params
from .models import convert_dynamodb_types

logger = logging.getLogger(__name__)

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}

SERIALISATION_FAILED = "Internal server error while encoding the response."

_default_query: Optional[PagedRangeQuery] = None


def build_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps(convert_dynamodb_types(body)),
    }


def configure_logging(config: LocationHistoryConfig) -> None:
    """Lower the package log level when debug logging is enabled."""
    package_logger = logging.getLogger(__name__.rsplit(".", 1)[0])
    if config.enable_debug_logging:
        package_logger.setLevel(logging.DEBUG)


def get_default_query() -> PagedRangeQuery:
    """Return the process-wide handler, creating it from the environment on first use."""
    global _default_query
    if _default_query is None:
        config = LocationHistoryConfig.from_env()
        configure_logging(config)
        logger.info(f"Serving location history from table '{config.table_name}'")
        _default_query = PagedRangeQuery.from_config(config)
    return _default_query


def handle_query_params(query: PagedRangeQuery, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Answer one request and map every outcome onto a proxy response.

    Args:
        query: Paged range query handler
        params: Raw query-string parameters (may be None)

    Returns:
        API Gateway proxy response
    """
    try:
        request = parse_query_params(params)
        page = query.handle(request)
    except RequestValidationError as e:
        logger.info(f"Rejected location query: {e}")
        return build_response(e.status_code, e.to_response_body())
    except StoreError as e:
        logger.error(f"Location query failed: {e}")
        return build_response(e.status_code, e.to_response_body())

    try:
        return build_response(200, page.to_response_body())
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to serialise page {page.page_index} for device {request.device_id}: {e}")
        return build_response(500, {"message": SERIALISATION_FAILED, "error": str(e)})


def create_lambda_handler(query: PagedRangeQuery) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """Bind a Lambda handler to an explicit query handler (tests, custom stores)."""

    def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
        return handle_query_params(query, (event or {}).get("queryStringParameters"))

    return handler


def lambda_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """AWS Lambda entry point."""
    return handle_query_params(get_default_query(), (event or {}).get("queryStringParameters"))
