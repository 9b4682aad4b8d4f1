from .config import DEFAULT_TABLE_NAME, LocationHistoryConfig

__all__ = [
    "DEFAULT_TABLE_NAME",
    "LocationHistoryConfig",
]
