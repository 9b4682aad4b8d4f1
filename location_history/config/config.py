import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()

DEFAULT_TABLE_NAME = "locations"


class LocationHistoryConfig(BaseModel):
    """Configuration for the location history store and handler."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    table_name: str = Field(
        default_factory=lambda: os.getenv("TABLE_NAME") or DEFAULT_TABLE_NAME,
        description="Name of the table holding location history"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts for failed requests"
    )

    timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("LOCATION_HISTORY_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for store queries"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('table_name')
    @classmethod
    def validate_table_name(cls, v):
        """Validate table name."""
        if not v or not v.strip():
            raise ValueError("Table name must not be empty")
        return v.strip()

    @classmethod
    def from_env(cls) -> 'LocationHistoryConfig':
        """Create configuration from environment variables.

        Returns:
            LocationHistoryConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, table_name: str = DEFAULT_TABLE_NAME) -> 'LocationHistoryConfig':
        """Create configuration for local DynamoDB development.

        Args:
            table_name: Table to query on the local endpoint

        Returns:
            LocationHistoryConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            table_name=table_name,
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
