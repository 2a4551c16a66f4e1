"""Model type and the mixins it is composed from."""

from modelkit.model.attributes import AttributesMixin
from modelkit.model.builder import define_model
from modelkit.model.events import EventsMixin
from modelkit.model.middleware import MiddlewareMixin
from modelkit.model.model import Model
from modelkit.model.persist import PersistMixin

__all__ = [
    "Model",
    "define_model",
    "EventsMixin",
    "AttributesMixin",
    "MiddlewareMixin",
    "PersistMixin",
]
