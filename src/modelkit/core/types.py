"""Core type definitions for modelkit."""

from collections.abc import Awaitable, Callable
from typing import Any

type Listener = Callable[..., Any]
"""Event listener. Called as `listener(model, *args)`."""

type ValueMiddleware = Callable[[Any], Any]
"""Getter/setter middleware. Receives a value and returns the transformed value."""

type PersistStep = Callable[[Any], Awaitable[None] | None]
"""Persistence middleware. Called as `step(model)`; raising reports failure."""

type CompletionCallback = Callable[[BaseException | None], Any]
"""Completion callback of a persistence call. Receives the error, or None on success."""
