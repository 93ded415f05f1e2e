"""Tests for configuration settings."""
import os

import pytest

from wordquest.config import settings


def test_base_directories_exist():
    """Test that all required directories exist."""
    from wordquest.config import AUDIO_DIR, BASE_DIR, DATA_DIR, SPEECH_CACHE_DIR

    assert BASE_DIR.exists()
    assert DATA_DIR.exists()
    assert AUDIO_DIR.exists()
    assert SPEECH_CACHE_DIR.exists()


def test_settings_defaults():
    """Test default settings values."""
    assert settings.lesson.reveal_delay == 1.5
    assert settings.lesson.onboarding_delay == 1.5
    assert settings.lesson.input_debounce == 0.5
    assert settings.lesson.starting_hearts == 3
    assert settings.lesson.dashboard_hearts == 5
    assert settings.lesson.gold_award == 25
    assert settings.lesson.starting_gold == 50
    assert settings.lesson.promotion_threshold == 3
    assert settings.game.default_language == "filipino"
    assert settings.game.default_player_name == "Bata"
    assert settings.game.guest_player_name == "Hero"
    assert settings.monitoring.enabled is False


def test_settings_instances_are_independent():
    """Test that each Settings instance gets its own sections."""
    from wordquest.config import Settings

    custom = Settings()
    custom.lesson.reveal_delay = 0.1
    assert settings.lesson.reveal_delay == 1.5
    custom.validate()


def test_validate_rejects_bad_values():
    """Test that validation catches invalid settings."""
    from wordquest.config import Settings

    bad = Settings()
    bad.lesson.reveal_delay = -1
    with pytest.raises(ValueError):
        bad.validate()

    bad = Settings()
    bad.game.default_language = "klingon"
    with pytest.raises(ValueError):
        bad.validate()

    bad = Settings()
    bad.lesson.promotion_threshold = 0
    with pytest.raises(ValueError):
        bad.validate()


if __name__ == "__main__":
    pytest.main([__file__])
