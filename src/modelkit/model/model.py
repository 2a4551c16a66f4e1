"""Model: base type for application entities.

`Model` is composed from one mixin per capability: events, attributes,
middleware and persistence. Define a model type by subclassing `Model`
(or with `Model.extend()`); listeners and middleware registered on a type
apply to that type and to types derived from it afterwards.

Usage:
    class User(Model):
        def defaults(self):
            return {"role": "member"}

    User.on("change:email", lambda user: user.set("verified", False))
    User.use("set:email", str.lower)

    user = User(email="Ann@Example.com")
    user.get("email")  # "ann@example.com"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from modelkit.config import get_settings
from modelkit.model.attributes import AttributesMixin
from modelkit.model.events import EventsMixin
from modelkit.model.middleware import MiddlewareMixin
from modelkit.model.persist import PersistMixin


class Model(PersistMixin, AttributesMixin, MiddlewareMixin, EventsMixin):
    """Entity with attributes, change tracking, events, middleware and persistence.

    Construction sets `attributes` to `defaults()`, fires "initialize" and
    then sets the given attributes (marking them changed).

    Args:
        attrs: Initial attributes.
        **kwargs: Initial attributes given as keywords.
    """

    id_attribute: ClassVar[str] = get_settings().id_attribute
    json_id_field: ClassVar[str] = get_settings().json_id_field

    def __init__(self, attrs: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        self.attributes = self.defaults()
        self._reset_changed()
        self.trigger("initialize")

        if attrs or kwargs:
            self.set(attrs or {}, **kwargs)

    @classmethod
    def extend(
        cls, name: str | None = None, namespace: Mapping[str, Any] | None = None
    ) -> type[Self]:
        """Create a derived model type.

        Equivalent to a `class` statement deriving from this type. The derived
        type starts with a copy of this type's listeners and middleware.

        Args:
            name: Name of the new type. Defaults to this type's name.
            namespace: Class attributes and methods of the new type.

        Returns:
            The new subclass.
        """
        return type(name or cls.__name__, (cls,), dict(namespace or {}))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attributes!r})"
