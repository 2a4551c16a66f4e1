"""modelkit: models with attributes, change tracking, events, middleware and persistence.

Usage:
    from modelkit import MemoryAdapter, Model, bind_adapter

    class User(Model):
        def defaults(self):
            return {"role": "member"}

    User.use("set:email", str.lower)

    @User.on("save")
    def announce(user):
        print("saved", user.get("email"))

    bind_adapter(User, MemoryAdapter())

    user = User(email="Ann@Example.com")
    await user.save()
    user.to_json()  # {"role": "member", "email": "ann@example.com", "id": 1}
"""

__version__ = "0.1.0"

# Configuration
from modelkit.config import ModelSettings, get_settings

# Errors
from modelkit.errors import ModelError, StateError, ValidationError

# Model
from modelkit.model import Model, define_model

# Runtime
from modelkit.runtime import run_sync

# Storage
from modelkit.storage import MemoryAdapter, PersistenceAdapter, bind_adapter

__all__ = [
    # Version
    "__version__",
    # Model
    "Model",
    "define_model",
    # Errors
    "ModelError",
    "StateError",
    "ValidationError",
    # Storage
    "PersistenceAdapter",
    "MemoryAdapter",
    "bind_adapter",
    # Runtime
    "run_sync",
    # Config
    "ModelSettings",
    "get_settings",
]
