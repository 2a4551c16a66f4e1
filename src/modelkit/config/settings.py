"""Configuration settings using Pydantic Settings.

Provides typed defaults for model identity handling with environment
variable support.

Usage:
    from modelkit.config import ModelSettings

    # Load from environment variables (MODELKIT_*)
    settings = ModelSettings()

    # Or override with explicit values
    settings = ModelSettings(id_attribute="pk", json_id_field="key")

Note:
    `Model` reads the process settings once, when `modelkit.model` is first
    imported. Subclasses override `id_attribute` / `json_id_field` as class
    attributes for per-type changes.
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install modelkit"
    ) from e


class ModelSettings(BaseSettings):  # type: ignore[misc]
    """Defaults applied to model types.

    Attributes:
        id_attribute: Internal attribute holding the model identity. Its
            presence (non-None value) marks a model as created.
        json_id_field: Public name the identity is exposed under by `to_json()`.

    Environment Variables:
        MODELKIT_ID_ATTRIBUTE
        MODELKIT_JSON_ID_FIELD
    """

    model_config = SettingsConfigDict(
        env_prefix="MODELKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    id_attribute: str = "_id"
    json_id_field: str = "id"


_settings: ModelSettings | None = None


def get_settings() -> ModelSettings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ModelSettings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next `get_settings()` reloads the environment."""
    global _settings
    _settings = None
