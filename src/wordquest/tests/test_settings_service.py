"""Tests for the settings accessor."""
import json

import pytest

from wordquest.models.player_models import PlayerSettings
from wordquest.services.settings_service import SETTINGS_KEY, SettingsService
from wordquest.services.store_service import StoreService


def test_defaults_when_nothing_saved(settings_service: SettingsService) -> None:
    """Test that a fresh install reads the documented defaults."""
    loaded = settings_service.load()
    assert loaded == PlayerSettings()
    assert loaded.speech_rate == 0.8
    assert loaded.speech_volume == 0.9
    assert loaded.font_size == "medium"
    assert loaded.language == "filipino"
    assert loaded.visual_cues is True
    assert loaded.haptic_feedback is False
    assert loaded.show_phonetics is False


def test_partial_blob_merges_over_defaults(store: StoreService, settings_service: SettingsService) -> None:
    """Test that saved values win and missing ones fall back."""
    store.set(SETTINGS_KEY, json.dumps({"language": "english", "haptic_feedback": True, "extra": 1}))
    loaded = settings_service.load()
    assert loaded.language == "english"
    assert loaded.haptic_feedback is True
    assert loaded.speech_rate == 0.8


def test_invalid_values_replaced(store: StoreService, settings_service: SettingsService) -> None:
    """Test that invalid values are dropped individually."""
    store.set(SETTINGS_KEY, json.dumps({
        "language": "klingon",
        "font_size": "huge",
        "haptic_feedback": "yes",
        "speech_rate": 1.2,
    }))
    loaded = settings_service.load()
    assert loaded.language == "filipino"
    assert loaded.font_size == "medium"
    assert loaded.haptic_feedback is False
    assert loaded.speech_rate == 1.2


def test_corrupt_blob(store: StoreService, settings_service: SettingsService) -> None:
    """Test that unparseable JSON yields defaults."""
    store.set(SETTINGS_KEY, "{not json")
    assert settings_service.load() == PlayerSettings()


def test_update(settings_service: SettingsService) -> None:
    """Test updating and persisting settings."""
    updated = settings_service.update(show_phonetics=True, font_size="large")
    assert updated.show_phonetics is True
    assert settings_service.load().font_size == "large"

    with pytest.raises(ValueError):
        settings_service.update(volume=11)


def test_toggle(settings_service: SettingsService) -> None:
    """Test flipping boolean settings."""
    assert settings_service.toggle("haptic_feedback").haptic_feedback is True
    assert settings_service.toggle("haptic_feedback").haptic_feedback is False
    with pytest.raises(ValueError):
        settings_service.toggle("language")


def test_toggle_language(settings_service: SettingsService) -> None:
    """Test switching between the two languages."""
    assert settings_service.toggle_language().language == "english"
    assert settings_service.load().language == "english"
    assert settings_service.toggle_language().language == "filipino"
