"""Builder assembling a model type from its parts in one call.

Usage:
    User = define_model(
        "User",
        defaults={"role": "member"},
        listeners={"change:email": reset_verification},
        middleware=[("set:email", str.lower), ("get:name", str.title)],
        validate=require_email,
        adapter=MemoryAdapter(),
    )
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Mapping
from typing import TYPE_CHECKING, Any

from modelkit.model.model import Model
from modelkit.storage.binding import bind_adapter

if TYPE_CHECKING:
    from modelkit.storage.protocol import PersistenceAdapter

type Registrations = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _pairs(registrations: Registrations | None) -> list[tuple[str, Callable[..., Any]]]:
    """Flatten a mapping or pair sequence; values may be one callable or several."""
    if registrations is None:
        return []
    items = registrations.items() if isinstance(registrations, Mapping) else registrations
    pairs: list[tuple[str, Callable[..., Any]]] = []
    for name, value in items:
        if callable(value):
            pairs.append((name, value))
        else:
            pairs.extend((name, fn) for fn in value)
    return pairs


def define_model(
    name: str,
    *,
    base: type[Model] = Model,
    defaults: Mapping[str, Any] | None = None,
    listeners: Registrations | None = None,
    middleware: Registrations | None = None,
    validate: Callable[[Any], None] | None = None,
    adapter: PersistenceAdapter | None = None,
) -> type[Model]:
    """Define a model type with its defaults, listeners and middleware.

    Registrations are applied in the order given: listeners, middleware, then
    the adapter's persistence middleware.

    Args:
        name: Name of the new type.
        base: Type to derive from.
        defaults: Initial attributes of new instances (deep-copied per instance).
        listeners: Event names mapped to listeners, as for `Model.on`.
        middleware: Middleware names mapped to functions, as for `Model.use`.
        validate: Called with the model before create/update; raises to reject.
        adapter: Persistence adapter bound with `bind_adapter`.

    Returns:
        The new model type.
    """
    namespace: dict[str, Any] = {}

    if defaults is not None:
        initial = dict(defaults)

        def _defaults(self: Model) -> dict[str, Any]:
            return copy.deepcopy(initial)

        namespace["defaults"] = _defaults

    if validate is not None:
        check = validate

        def _validate(self: Model) -> None:
            check(self)

        namespace["validate"] = _validate

    cls = base.extend(name, namespace)

    for events, callback in _pairs(listeners):
        cls.on(events, callback)
    for middleware_name, fn in _pairs(middleware):
        cls.use(middleware_name, fn)

    if adapter is not None:
        bind_adapter(cls, adapter)

    return cls
