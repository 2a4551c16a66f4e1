"""Model events.

Model types register listeners with `Model.on`; model objects fire them with
`Model.trigger`. Listeners are called with the triggering model as their
first argument.

Usage:
    @User.on("save load")
    def remember(user):
        cache[user.get("_id")] = user

    User.on("change:email", lambda user: user.set("verified", False))
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, ClassVar, Self, overload

from modelkit.core.chains import ModelChains
from modelkit.core.events import dispatch, split_events
from modelkit.core.types import Listener

logger = logging.getLogger(__name__)


class EventsMixin:
    """Per-type listener registration and instance-level triggering.

    Also owns the type's `ModelChains`: every subclass starts with a clone of
    its parent's chains.
    """

    __chains__: ClassVar[ModelChains] = ModelChains()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Resolves to the nearest parent's chains until reassigned here
        cls.__chains__ = cls.__chains__.clone()

    @overload
    @classmethod
    def on(cls, events: str, callback: Listener) -> type[Self]: ...

    @overload
    @classmethod
    def on(cls, events: str, callback: None = None) -> Callable[[Listener], Listener]: ...

    @classmethod
    def on(
        cls, events: str, callback: Listener | None = None
    ) -> type[Self] | Callable[[Listener], Listener]:
        """Listen to one or more whitespace-separated events on this type.

        Supports two forms:
            User.on("save", callback)     # returns User, chainable
            @User.on("save load")         # decorator, returns the callback

        Args:
            events: Whitespace-separated event names.
            callback: Listener called as `callback(model, *args)`.

        Returns:
            This type, or a decorator when no callback is given.

        Raises:
            ValueError: If events holds no event name.
        """
        names = split_events(events)

        def register(fn: Listener) -> Listener:
            for name in names:
                cls.__chains__.add_listener(name, fn)
            logger.debug("%s: listening on %s with %r", cls.__name__, ", ".join(names), fn)
            return fn

        if callback is None:
            return register
        register(callback)
        return cls

    def trigger(self, event: str, *args: Any) -> Self:
        """Call this type's listeners for event. Unknown events are a no-op."""
        dispatch(type(self).__chains__.listeners, self, event, args)
        return self
