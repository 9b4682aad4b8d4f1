"""
Base Model Components and Mixins

This module provides the DynamoDB conversion mixin shared by the models
that are read straight out of the location table.

## DynamoDBMixin

boto3's resource layer hands back DynamoDB-specific Python types. Location
records are returned to HTTP clients as JSON, so attributes are normalised
on the way in:

- integral ``Decimal`` -> ``int`` (timestamps, counters)
- fractional ``Decimal`` -> ``float`` (latitude, longitude, accuracy)
- ``Binary``/``bytes`` (B) -> base64 ``str``
- string, number and binary sets (SS/NS/BS) -> sorted ``list``
- nested maps and lists are converted recursively
"""

import base64
import logging
from decimal import Decimal
from typing import Any, Dict

from boto3.dynamodb.types import Binary
from pydantic import BaseModel

logger = logging.getLogger(__name__)


def convert_dynamodb_types(obj: Any) -> Any:
    """Recursively convert boto3 DynamoDB values to JSON-native Python values."""
    if isinstance(obj, dict):
        return {k: convert_dynamodb_types(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_dynamodb_types(list_item) for list_item in obj]
    elif isinstance(obj, (set, frozenset)):
        return sorted((convert_dynamodb_types(member) for member in obj), key=str)
    elif isinstance(obj, Decimal):
        return int(obj) if obj % 1 == 0 else float(obj)
    elif isinstance(obj, Binary):
        return base64.b64encode(obj.value).decode("ascii")
    elif isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    return obj


class DynamoDBMixin(BaseModel):
    """
    Mixin for models stored as DynamoDB items.

    Provides ``from_dynamodb_item`` so read paths never deal with
    boto3's ``Decimal``/``Binary``/set representations directly.
    """

    @classmethod
    def from_dynamodb_item(cls, item: Dict[str, Any]):
        """
        Create model instance from DynamoDB item.

        Args:
            item: DynamoDB item dictionary as returned by the boto3 resource layer

        Returns:
            Model instance holding only JSON-native values

        Raises:
            ValueError: If the item is not a valid instance of the model
        """
        try:
            return cls.model_validate(convert_dynamodb_types(item))
        except Exception as e:
            logger.error(f"Failed to convert DynamoDB item to {cls.__name__}: {e}")
            raise ValueError(f"Failed to convert DynamoDB item to {cls.__name__}: {e}") from e
