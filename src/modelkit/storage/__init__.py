"""Persistence adapters."""

from modelkit.storage.binding import bind_adapter
from modelkit.storage.memory import MemoryAdapter
from modelkit.storage.protocol import PersistenceAdapter

__all__ = [
    "PersistenceAdapter",
    "MemoryAdapter",
    "bind_adapter",
]
