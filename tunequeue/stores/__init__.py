"""Lookup provider implementations."""

from tunequeue.stores.memory import MemoryMediaStore

__all__ = ["MemoryMediaStore"]
