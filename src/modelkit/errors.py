"""Exceptions raised by model operations.

State and validation errors are raised synchronously by the persistence call
itself. Errors reported by persistence middleware are the middleware's own
exceptions, forwarded unchanged through the returned awaitable (or callback).
"""


class ModelError(Exception):
    """Base class for errors raised by modelkit."""

    pass


class StateError(ModelError):
    """Raised when a persistence action is invalid for the model's lifecycle state.

    Creating an already created model, or updating/deleting a model that was
    never created.
    """

    pass


class ValidationError(ModelError):
    """Raised by `Model.validate` overrides to reject a create or update."""

    pass
