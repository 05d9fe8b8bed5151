"""Adapters - I/O implementations of ports."""

from .memory_store import InMemoryTaskStore
from .json_file import JsonFileTaskStore, TaskStoreError

__all__ = [
    "InMemoryTaskStore",
    "JsonFileTaskStore",
    "TaskStoreError",
]
