"""Model persistence.

Models persist through persistence middleware registered with
`Model.use("create" | "update" | "delete", step)`; `modelkit.storage`
binds an adapter this way. A model is *created* once its identity attribute
(`id_attribute`, "_id" by default) holds a value.

`create` and `update` persist a model, `save` picks whichever fits the
model's state, `delete` removes it. Each call checks the state, validates
and fires the "before" events immediately, then returns an awaitable that
runs the middleware:

    await user.save()

Given a completion callback, the call instead schedules the middleware as a
task on the running event loop and returns that task; awaiting it is
optional:

    user.delete(callback=lambda err: ...)

Errors come in two kinds:

1. A call that does not fit the model's state raises `StateError` (and a
   failed `validate` raises) right away. No middleware runs.
2. An exception raised by a middleware step stops the remaining steps, skips
   the success events and is re-raised from the awaitable, or handed to the
   callback when one is given.

Events:
    before-create, before-update, before-delete, before-save
    create, update, delete, save (after success)
    load (after `from_db`)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Mapping
from typing import Any, ClassVar, Self

from modelkit.core.types import CompletionCallback
from modelkit.errors import StateError

logger = logging.getLogger(__name__)

# Strong references to persistence tasks started with a callback
_background_tasks: set[asyncio.Task[Any]] = set()


class PersistMixin:
    """Lifecycle checks, persistence events and database representation."""

    id_attribute: ClassVar[str]
    json_id_field: ClassVar[str]
    attributes: dict[str, Any]

    def is_created(self) -> bool:
        """Check whether the model has an identity, i.e. was created."""
        return self.attributes.get(self.id_attribute) is not None

    def validate(self) -> None:
        """Validate the model before create/update.

        No-op by default. Override and raise `ValidationError` to reject.
        """

    def create(self, callback: CompletionCallback | None = None) -> Awaitable[Self]:
        """Create the model through the "create" middleware.

        Args:
            callback: Called with None on success or the middleware error.
                When given, the middleware is scheduled on the running loop.

        Returns:
            Awaitable resolving to this model (a scheduled task with a callback).

        Raises:
            StateError: If the model was already created.
            RuntimeError: If a callback is given outside a running event loop.
        """
        if self.is_created():
            raise StateError("Model must not have been previously created")
        _require_loop(callback)
        self.validate()
        self.trigger("before-create")  # type: ignore[attr-defined]
        self.trigger("before-save")  # type: ignore[attr-defined]
        return self._start("create", ("create", "save"), callback)

    def update(self, callback: CompletionCallback | None = None) -> Awaitable[Self]:
        """Update the model through the "update" middleware.

        Raises:
            StateError: If the model was not created yet.
        """
        if not self.is_created():
            raise StateError("Model must be created before updating")
        _require_loop(callback)
        self.validate()
        self.trigger("before-update")  # type: ignore[attr-defined]
        self.trigger("before-save")  # type: ignore[attr-defined]
        return self._start("update", ("update", "save"), callback)

    def delete(self, callback: CompletionCallback | None = None) -> Awaitable[Self]:
        """Delete the model through the "delete" middleware.

        Raises:
            StateError: If the model was not created yet.
        """
        if not self.is_created():
            raise StateError("Model must be created before deleting")
        _require_loop(callback)
        self.trigger("before-delete")  # type: ignore[attr-defined]
        return self._start("delete", ("delete",), callback)

    def save(self, callback: CompletionCallback | None = None) -> Awaitable[Self]:
        """Update the model if it was created, otherwise create it."""
        if self.is_created():
            return self.update(callback)
        return self.create(callback)

    def _start(
        self,
        action: str,
        events: tuple[str, ...],
        callback: CompletionCallback | None,
    ) -> Awaitable[Self]:
        coro = self._persist(action, events, callback)
        if callback is None:
            return coro
        task = asyncio.get_running_loop().create_task(coro)
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
        return task

    async def _persist(
        self,
        action: str,
        events: tuple[str, ...],
        callback: CompletionCallback | None,
    ) -> Self:
        logger.debug("%s: running %s middleware", type(self).__name__, action)
        try:
            await self._persist_middleware(action)  # type: ignore[attr-defined]
        except Exception as exc:
            logger.debug("%s: %s failed: %r", type(self).__name__, action, exc)
            if callback is None:
                raise
            callback(exc)
            return self

        if action != "delete":
            self._reset_changed()  # type: ignore[attr-defined]
        for event in events:
            self.trigger(event)  # type: ignore[attr-defined]
        logger.debug("%s: %s finished", type(self).__name__, action)
        if callback is not None:
            callback(None)
        return self

    def to_db(self) -> dict[str, Any]:
        """Return the attributes as stored by the database layer (no getter middleware)."""
        return dict(self.attributes)

    def from_db(self, attrs: Mapping[str, Any]) -> Self:
        """Replace all attributes with values loaded from the database.

        Loaded values are not marked changed and fire no "change:<name>"
        events. Fires "load".
        """
        self.attributes = dict(attrs)
        self._reset_changed()  # type: ignore[attr-defined]
        self.trigger("load")  # type: ignore[attr-defined]
        return self

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready dict with the identity exposed as `json_id_field`."""
        data: dict[str, Any] = super().to_json()  # type: ignore[misc]
        if self.id_attribute in data:
            identity = data.pop(self.id_attribute)
            if identity is not None:
                data[self.json_id_field] = identity
        return data


def _require_loop(callback: CompletionCallback | None) -> None:
    """Fail before any side effect when a callback call cannot be scheduled."""
    if callback is None:
        return
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        raise RuntimeError(
            "Persisting with a callback requires a running event loop; "
            "await the call or use run_sync() instead"
        ) from None
