"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around the boto3 Table resource
holding location history. The gateway:

1. Creates the boto3 session/resource lazily and reuses it across calls
   (warm Lambda containers keep the connection pool)
2. Exposes the raw Query operation the location store is built on
3. Maps botocore failures onto the StoreError hierarchy

Everything query-specific (key conditions, pagination tokens, record
conversion) lives in the location store, not here.
"""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import LocationHistoryConfig
from ..exceptions import (
    ConnectionError,
    RetryableError,
    StoreError,
    TableNotFoundError,
)

logger = logging.getLogger(__name__)

RETRYABLE_ERROR_CODES = frozenset([
    'ProvisionedThroughputExceededException',
    'RequestLimitExceeded',
    'ThrottlingException',
    'InternalServerError',
    'ServiceUnavailable',
    'ServiceUnavailableException',
    'RequestTimeoutException',
])

AUTH_ERROR_CODES = frozenset([
    'UnrecognizedClientException',
    'AccessDeniedException',
    'InvalidSignatureException',
    'IncompleteSignatureException',
    'ExpiredTokenException',
])


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str
) -> StoreError:
    """Map DynamoDB ClientError to store exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "Query")
        table_name: The DynamoDB table name

    Returns:
        Appropriate StoreError subclass; ``detail`` carries the AWS message
    """
    error_code = error.response.get('Error', {}).get('Code', 'Unknown')
    error_message = error.response.get('Error', {}).get('Message', str(error))

    full_message = f"{operation} on {table_name}: {error_message}"
    context = {'table_name': table_name, 'operation': operation, 'error_code': error_code}

    if error_code == 'ResourceNotFoundException':
        return TableNotFoundError(table_name, error_message, original_error=error)

    elif error_code in RETRYABLE_ERROR_CODES:
        return RetryableError(f"Throttling/service unavailable - {full_message}", error_message, error, context)

    elif error_code in AUTH_ERROR_CODES:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", error_message, error, context)

    elif error_code == 'ValidationException':
        return StoreError(f"Query rejected by DynamoDB - {full_message}", error_message, error, context)

    # Default to ConnectionError for unknown errors
    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", error_message, error, context)


class TableGateway:
    """
    Thin gateway for the location history table.

    Provides the raw Query operation with error mapping. The table name is
    fixed at construction, injected once from configuration.
    """

    def __init__(self, config: LocationHistoryConfig, table_name: Optional[str] = None):
        """Initialize table gateway.

        Args:
            config: Store configuration
            table_name: Name of the DynamoDB table (defaults to ``config.table_name``)
        """
        self.config = config
        self.table_name = table_name or config.table_name
        self._dynamodb = None
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", str(e), e) from e
        return self._dynamodb

    @property
    def table(self):
        """Get boto3 DynamoDB Table resource."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except StoreError:
                raise
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", str(e), e) from e
        return self._table

    def query(self, **kwargs) -> Dict[str, Any]:
        """
        Execute DynamoDB Query operation.

        Raw pass-through to boto3 with error handling.

        Args:
            **kwargs: All boto3 query parameters

        Returns:
            Raw DynamoDB response

        Raises:
            StoreError: Any ClientError or botocore transport failure
        """
        try:
            return self.table.query(**kwargs)
        except ClientError as e:
            raise map_dynamodb_error(e, "Query", self.table_name) from e
        except BotoCoreError as e:
            logger.error(f"Query on {self.table_name} failed before reaching DynamoDB: {e}")
            raise ConnectionError(f"Query on {self.table_name} failed: {e}", str(e), e) from e


def create_table_gateway(config: LocationHistoryConfig) -> TableGateway:
    """
    Factory function to create a TableGateway for the configured table.

    Args:
        config: Store configuration

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(config, config.table_name)
