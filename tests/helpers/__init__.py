"""
Test helpers for location history.

Provides an in-memory OrderedStore and record builders so the paging
logic can be tested without DynamoDB.
"""

from .memory_store import InMemoryLocationStore, make_records

__all__ = [
    'InMemoryLocationStore',
    'make_records',
]
