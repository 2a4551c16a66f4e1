"""Tests for settings loading."""

import pytest

from modelkit import Model
from modelkit.config import ModelSettings, get_settings, reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


def test_defaults(monkeypatch):
    monkeypatch.delenv("MODELKIT_ID_ATTRIBUTE", raising=False)
    monkeypatch.delenv("MODELKIT_JSON_ID_FIELD", raising=False)

    settings = ModelSettings()

    assert settings.id_attribute == "_id"
    assert settings.json_id_field == "id"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MODELKIT_ID_ATTRIBUTE", "pk")
    monkeypatch.setenv("MODELKIT_JSON_ID_FIELD", "key")

    settings = get_settings()

    assert settings.id_attribute == "pk"
    assert settings.json_id_field == "key"


def test_get_settings_is_cached_until_reset():
    first = get_settings()
    assert get_settings() is first

    reset_settings()
    assert get_settings() is not first


def test_model_uses_settings_loaded_at_import():
    """Model reads identity names once; later env changes do not affect it."""
    assert Model.id_attribute == "_id"
    assert Model.json_id_field == "id"
