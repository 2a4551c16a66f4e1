"""Pure event functions: event-list parsing and listener dispatch."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from modelkit.core.types import Listener


def split_events(events: str) -> list[str]:
    """Split a whitespace-separated event list.

    Args:
        events: One or more event names, e.g. "initialize save load".

    Returns:
        Event names in the order given.

    Raises:
        ValueError: If no event name is present.
    """
    names = events.split()
    if not names:
        raise ValueError(f"No event names in {events!r}")
    return names


def dispatch(
    listeners: Sequence[tuple[str, Listener]],
    target: Any,
    event: str,
    args: tuple[Any, ...] = (),
) -> int:
    """Call every listener registered for event, in registration order.

    Listeners added while dispatching are not called for the current event.
    Exceptions raised by a listener propagate and stop the dispatch.

    Args:
        listeners: (event name, callback) pairs.
        target: Object passed to each callback as its first argument.
        event: Triggered event name.
        args: Extra positional arguments for the callbacks.

    Returns:
        Number of listeners called.
    """
    called = 0
    for name, callback in tuple(listeners):
        if name == event:
            callback(target, *args)
            called += 1
    return called
