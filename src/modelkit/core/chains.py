"""Per-type registration state: listener and middleware chains.

Every model type owns one `ModelChains`. Deriving a type clones the parent's
chains, so registrations made on the parent before the derived type exists
are inherited, while later registrations on either side stay independent.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from modelkit.core.middleware import PERSIST_ACTIONS, MiddlewareKind, MiddlewareTarget
from modelkit.core.types import Listener, PersistStep, ValueMiddleware


def _empty_persist() -> dict[str, list[PersistStep]]:
    return {action: [] for action in PERSIST_ACTIONS}


@dataclass(slots=True)
class ModelChains:
    """Ordered interceptor lists of a single model type.

    All lists are append-only and invoked in registration order.
    """

    listeners: list[tuple[str, Listener]] = field(default_factory=list)
    """(event name, callback) pairs."""

    getters: list[tuple[str, ValueMiddleware]] = field(default_factory=list)
    """(attribute name, transformer) pairs applied by `get`."""

    setters: list[tuple[str, ValueMiddleware]] = field(default_factory=list)
    """(attribute name, transformer) pairs applied by `set`."""

    persist: dict[str, list[PersistStep]] = field(default_factory=_empty_persist)
    """Persistence steps keyed by action (create, update, delete)."""

    def clone(self) -> ModelChains:
        """Snapshot these chains for a derived type.

        Returns:
            New chains holding copies of every list. Callables are shared.
        """
        return ModelChains(
            listeners=list(self.listeners),
            getters=list(self.getters),
            setters=list(self.setters),
            persist={action: list(steps) for action, steps in self.persist.items()},
        )

    def add_listener(self, event: str, callback: Listener) -> None:
        self.listeners.append((event, callback))

    def add_middleware(self, target: MiddlewareTarget, fn: ValueMiddleware | PersistStep) -> None:
        """Append middleware to the chain selected by target.

        Args:
            target: Parsed middleware name.
            fn: Value transformer (get/set) or persistence step.
        """
        if target.kind is MiddlewareKind.GET:
            self.getters.append((target.key, fn))  # type: ignore[arg-type]
        elif target.kind is MiddlewareKind.SET:
            self.setters.append((target.key, fn))  # type: ignore[arg-type]
        else:
            self.persist[target.key].append(fn)  # type: ignore[arg-type]
