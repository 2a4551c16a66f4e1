"""Model middleware.

Two kinds of middleware run during specific model tasks:

Getter/setter middleware ("get:<attr>", "set:<attr>") changes a value as it
is read or written. It is synchronous, receives only the value and returns
the new value.

Persistence middleware ("create", "update", "delete") runs when a model is
persisted. It receives the model and may be a coroutine function. A step
reports failure by raising; later steps are then skipped.

Middleware of each kind runs in the order it was registered.

Usage:
    User.use("set:email", str.lower)

    @User.use("create")
    async def insert(user):
        user.set("_id", await db.insert(user.to_db()))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar, Self, overload

from modelkit.core.chains import ModelChains
from modelkit.core.middleware import (
    apply_value_middleware,
    parse_middleware_name,
    run_persist_steps,
)

logger = logging.getLogger(__name__)

type Middleware = Callable[..., Any]


class MiddlewareMixin:
    """Middleware registration and execution against the type's chains."""

    __chains__: ClassVar[ModelChains]

    @overload
    @classmethod
    def use(cls, name: str, fn: Middleware) -> type[Self]: ...

    @overload
    @classmethod
    def use(cls, name: str, fn: None = None) -> Callable[[Middleware], Middleware]: ...

    @classmethod
    def use(
        cls, name: str, fn: Middleware | None = None
    ) -> type[Self] | Callable[[Middleware], Middleware]:
        """Register middleware on this type.

        Args:
            name: "get:<attr>", "set:<attr>", "create", "update" or "delete".
            fn: Middleware function, or None to use as a decorator.

        Returns:
            This type, or a decorator when no function is given.

        Raises:
            ValueError: If name is not a known middleware name.
        """
        target = parse_middleware_name(name)

        def register(f: Middleware) -> Middleware:
            cls.__chains__.add_middleware(target, f)
            logger.debug("%s: using %r for %s", cls.__name__, f, name)
            return f

        if fn is None:
            return register
        register(fn)
        return cls

    def _get_middleware(self, name: str, value: Any) -> Any:
        return apply_value_middleware(type(self).__chains__.getters, name, value)

    def _set_middleware(self, name: str, value: Any) -> Any:
        return apply_value_middleware(type(self).__chains__.setters, name, value)

    async def _persist_middleware(self, action: str) -> None:
        await run_persist_steps(type(self).__chains__.persist[action], self)
