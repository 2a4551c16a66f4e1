"""Pure middleware functions: name parsing and chain execution.

Middleware names:
    "get:<attr>"  -- getter transformer for one attribute
    "set:<attr>"  -- setter transformer for one attribute
    "create", "update", "delete"  -- persistence steps
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from modelkit.core.types import PersistStep, ValueMiddleware

PERSIST_ACTIONS: tuple[str, ...] = ("create", "update", "delete")


class MiddlewareKind(Enum):
    """Chain a middleware function belongs to."""

    GET = auto()
    SET = auto()
    PERSIST = auto()


@dataclass(frozen=True, slots=True)
class MiddlewareTarget:
    """Parsed middleware name."""

    kind: MiddlewareKind
    key: str
    """Attribute name for GET/SET, action name for PERSIST."""


def parse_middleware_name(name: str) -> MiddlewareTarget:
    """Parse a middleware name into its target chain.

    Args:
        name: Middleware name, e.g. "set:email" or "create".

    Returns:
        Target describing which chain and key the middleware applies to.

    Raises:
        ValueError: If the name is not a getter, setter or persistence action.
    """
    prefix, sep, attr = name.partition(":")
    if sep:
        if prefix == "get" and attr:
            return MiddlewareTarget(MiddlewareKind.GET, attr)
        if prefix == "set" and attr:
            return MiddlewareTarget(MiddlewareKind.SET, attr)
    elif name in PERSIST_ACTIONS:
        return MiddlewareTarget(MiddlewareKind.PERSIST, name)
    raise ValueError(
        f"Unknown middleware {name!r}. "
        f"Expected 'get:<attr>', 'set:<attr>' or one of {', '.join(PERSIST_ACTIONS)}"
    )


def apply_value_middleware(
    chain: Sequence[tuple[str, ValueMiddleware]],
    attr: str,
    value: Any,
) -> Any:
    """Run value through every transformer registered for attr.

    Each matching transformer sees the previous transformer's result.

    Args:
        chain: (attribute name, transformer) pairs in registration order.
        attr: Attribute being read or written.
        value: Initial value.

    Returns:
        Transformed value (unchanged when nothing matches).
    """
    for name, fn in chain:
        if name == attr:
            value = fn(value)
    return value


async def run_persist_steps(steps: Sequence[PersistStep], model: Any) -> None:
    """Run persistence steps in order.

    The base step does no work but always yields to the event loop, so
    completion is asynchronous even with an empty chain. Steps may be
    coroutine functions or plain callables; awaitable results are awaited.

    Args:
        steps: Persistence steps in registration order.
        model: Model being persisted, passed to each step.

    Raises:
        Exception: Whatever a step raises. Remaining steps do not run.
    """
    await asyncio.sleep(0)
    for step in tuple(steps):
        result = step(model)
        if inspect.isawaitable(result):
            await result
