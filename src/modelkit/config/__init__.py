"""Configuration module using Pydantic Settings.

Usage:
    from modelkit.config import ModelSettings, get_settings

    settings = get_settings()
    settings.id_attribute  # "_id" unless MODELKIT_ID_ATTRIBUTE is set
"""

from modelkit.config.settings import ModelSettings, get_settings, reset_settings

__all__ = [
    "ModelSettings",
    "get_settings",
    "reset_settings",
]
