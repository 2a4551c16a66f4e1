"""In-memory persistence adapter.

Simple dict-based adapter suitable for single-process use and testing.

Usage:
    adapter = MemoryAdapter()
    bind_adapter(User, adapter)
    await User(name="ann").save()
    adapter.get(1)  # {"_id": 1, "name": "ann"}
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from typing import Any

from modelkit.config import get_settings

logger = logging.getLogger(__name__)


class MemoryAdapter:
    """Stores deep copies of attribute records keyed by identity.

    Identities are allocated as increasing integers unless the record being
    created already carries one.

    Args:
        id_attribute: Attribute holding the identity. Defaults to the
            configured `id_attribute`.
    """

    def __init__(self, id_attribute: str | None = None):
        self._id_attribute = id_attribute or get_settings().id_attribute
        self._records: dict[Any, dict[str, Any]] = {}
        self._next_id = 1

    def _allocate(self) -> int:
        while self._next_id in self._records:
            self._next_id += 1
        identity = self._next_id
        self._next_id += 1
        return identity

    def _require(self, attrs: dict[str, Any]) -> Any:
        identity = attrs.get(self._id_attribute)
        if identity not in self._records:
            raise KeyError(f"No record with {self._id_attribute}={identity!r}")
        return identity

    async def create(self, attrs: dict[str, Any]) -> Any:
        """Store a new record and return its identity.

        Raises:
            KeyError: If a record with the given identity already exists.
        """
        identity = attrs.get(self._id_attribute)
        if identity is None:
            identity = self._allocate()
        elif identity in self._records:
            raise KeyError(f"Record with {self._id_attribute}={identity!r} already exists")

        record = copy.deepcopy(attrs)
        record[self._id_attribute] = identity
        self._records[identity] = record
        logger.debug("Created record %r", identity)
        return identity

    async def update(self, attrs: dict[str, Any]) -> None:
        """Replace a stored record.

        Raises:
            KeyError: If no record has the given identity.
        """
        identity = self._require(attrs)
        self._records[identity] = copy.deepcopy(attrs)
        logger.debug("Updated record %r", identity)

    async def delete(self, attrs: dict[str, Any]) -> None:
        """Remove a stored record.

        Raises:
            KeyError: If no record has the given identity.
        """
        identity = self._require(attrs)
        del self._records[identity]
        logger.debug("Deleted record %r", identity)

    def get(self, identity: Any) -> dict[str, Any] | None:
        """Return a copy of the stored record, or None."""
        record = self._records.get(identity)
        return copy.deepcopy(record) if record is not None else None

    def __contains__(self, identity: object) -> bool:
        return identity in self._records

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
