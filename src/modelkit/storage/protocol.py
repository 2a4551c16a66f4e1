"""Persistence adapter protocol.

An adapter performs the actual durable storage for a model type. The model
core never talks to a database itself; `bind_adapter` turns an adapter into
persistence middleware.

Usage:
    adapter = MemoryAdapter()
    bind_adapter(User, adapter)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PersistenceAdapter(Protocol):
    """Asynchronous create/update/delete of attribute records.

    Each operation receives the model's database representation
    (`Model.to_db()`) and reports failure by raising.
    """

    async def create(self, attrs: dict[str, Any]) -> Any:
        """Store a new record.

        Returns:
            Identity assigned to the record, or None if attrs already carried it.
        """
        ...

    async def update(self, attrs: dict[str, Any]) -> None:
        """Replace an existing record."""
        ...

    async def delete(self, attrs: dict[str, Any]) -> None:
        """Remove an existing record."""
        ...
