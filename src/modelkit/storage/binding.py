"""Bind a persistence adapter to a model type as persistence middleware."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from modelkit.storage.protocol import PersistenceAdapter

if TYPE_CHECKING:
    from modelkit.model.model import Model


def bind_adapter[M: Model](model_cls: type[M], adapter: PersistenceAdapter) -> type[M]:
    """Register create/update/delete middleware delegating to adapter.

    The steps are appended to the type's persistence chains, after any
    middleware already registered. A non-None identity returned by
    `adapter.create` is set on the model.

    Args:
        model_cls: Model type to persist.
        adapter: Adapter performing the storage.

    Returns:
        The model type, for chaining.

    Raises:
        TypeError: If adapter does not implement PersistenceAdapter.
    """
    if not isinstance(adapter, PersistenceAdapter):
        raise TypeError(f"{type(adapter).__name__} does not implement PersistenceAdapter")

    async def create(model: Any) -> None:
        identity = await adapter.create(model.to_db())
        if identity is not None:
            model.set(model.id_attribute, identity)

    async def update(model: Any) -> None:
        await adapter.update(model.to_db())

    async def delete(model: Any) -> None:
        await adapter.delete(model.to_db())

    model_cls.use("create", create).use("update", update).use("delete", delete)
    return model_cls
