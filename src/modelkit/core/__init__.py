"""Core functionalities: stateless chain primitives.

Architecture Note:
    core/ contains pure functions and plain records with no model knowledge.
    The model mixins in model/ own the per-type state and call into core/.
"""

from modelkit.core.chains import ModelChains
from modelkit.core.equality import deep_equal
from modelkit.core.events import dispatch, split_events
from modelkit.core.middleware import (
    PERSIST_ACTIONS,
    MiddlewareKind,
    MiddlewareTarget,
    apply_value_middleware,
    parse_middleware_name,
    run_persist_steps,
)
from modelkit.core.types import CompletionCallback, Listener, PersistStep, ValueMiddleware

__all__ = [
    # Types
    "Listener",
    "ValueMiddleware",
    "PersistStep",
    "CompletionCallback",
    # Chains
    "ModelChains",
    # Equality
    "deep_equal",
    # Events
    "split_events",
    "dispatch",
    # Middleware
    "PERSIST_ACTIONS",
    "MiddlewareKind",
    "MiddlewareTarget",
    "parse_middleware_name",
    "apply_value_middleware",
    "run_persist_steps",
]
