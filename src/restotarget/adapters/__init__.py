"""Adapters implementing the targeting store port."""

from .memory_store import InMemoryTargetingStore
from .sqlite_store import SqliteTargetingStore

__all__ = ["InMemoryTargetingStore", "SqliteTargetingStore"]
