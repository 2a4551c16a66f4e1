"""Model attributes.

Attributes hold a model's state. They are written with `Model.set` and read
with `Model.get`, both running through getter/setter middleware.
`Model.is_changed` reports attributes changed since the model was created,
last saved or last loaded.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Self

from modelkit.core.equality import deep_equal


class AttributesMixin:
    """Attribute storage with change tracking.

    Expects `trigger`, `_get_middleware` and `_set_middleware` from the
    events and middleware mixins.
    """

    attributes: dict[str, Any]
    _changed: set[str]

    def defaults(self) -> dict[str, Any]:
        """Initial attributes of a new model. Override to provide defaults."""
        return {}

    def _reset_changed(self) -> None:
        self._changed = set()

    def is_changed(self, name: str | None = None) -> bool:
        """Check whether attributes changed since the last create, save or load.

        Args:
            name: Attribute to check. When omitted, checks every attribute.

        Returns:
            True if the attribute (or any attribute) changed.
        """
        if name is None:
            return bool(self._changed)
        return name in self._changed

    @property
    def changed(self) -> frozenset[str]:
        """Names of attributes changed since the last create, save or load."""
        return frozenset(self._changed)

    def get(self, *names: str | Iterable[str]) -> Any:
        """Return attribute value(s), passed through getter middleware.

        Forms:
            model.get()                # {name: value} for every attribute
            model.get("a")             # value of "a" (None when unset)
            model.get("a", "b")        # {"a": ..., "b": ...}
            model.get(["a", "b"])      # {"a": ..., "b": ...}

        Args:
            names: Attribute names, or iterables of names.

        Returns:
            A single value for one string argument, else a dict.
        """
        if not names:
            return self._get_many(list(self.attributes))
        if len(names) == 1 and isinstance(names[0], str):
            return self._get_one(names[0])

        flat: list[str] = []
        for name in names:
            if isinstance(name, str):
                flat.append(name)
            else:
                flat.extend(name)
        return self._get_many(flat)

    def _get_one(self, name: str) -> Any:
        return self._get_middleware(name, self.attributes.get(name))  # type: ignore[attr-defined]

    def _get_many(self, names: list[str]) -> dict[str, Any]:
        return {name: self._get_one(name) for name in names}

    def set(self, *args: Any, **kwargs: Any) -> Self:
        """Set attribute value(s).

        Forms:
            model.set("name", value)
            model.set({"name": value, ...})
            model.set(name=value, ...)

        Each value passes through setter middleware and is then compared with
        the stored value using `deep_equal` (type-strict, NaN equals NaN).
        Only a different value (or a previously unset attribute) is stored,
        marked changed and announced with a "change:<name>" event.

        Returns:
            This model.

        Raises:
            TypeError: If the arguments match none of the forms.
        """
        if len(args) == 2:
            if kwargs:
                raise TypeError("set(name, value) does not accept keyword attributes")
            self._set_one(args[0], args[1])
            return self
        if len(args) > 2 or (len(args) == 1 and not isinstance(args[0], Mapping)):
            raise TypeError("set() expects (name, value), a mapping, or keyword attributes")

        values: dict[str, Any] = dict(args[0]) if args else {}
        values.update(kwargs)
        for name, value in values.items():
            self._set_one(name, value)
        return self

    def _set_one(self, name: str, value: Any) -> None:
        value = self._set_middleware(name, value)  # type: ignore[attr-defined]
        if name in self.attributes and deep_equal(self.attributes[name], value):
            return
        self.attributes[name] = value
        self._changed.add(name)
        self.trigger(f"change:{name}")  # type: ignore[attr-defined]

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-ready dict of every attribute (via getter middleware)."""
        return self.get()
