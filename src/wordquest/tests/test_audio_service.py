"""Tests for word pronunciation."""
import asyncio
import threading
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from wordquest.config import settings
from wordquest.services.audio_service import AudioService, sanitize_filename
from wordquest.services.localization import Language
from wordquest.services.settings_service import SettingsService


@pytest.fixture
def clips_dir(tmp_path: Path) -> Path:
    path = tmp_path / "audio"
    path.mkdir()
    return path


@pytest.fixture
def player() -> Mock:
    return Mock()


@pytest.fixture
def audio(settings_service: SettingsService, clips_dir: Path, tmp_path: Path, player: Mock) -> AudioService:
    return AudioService(settings_service, clips_dir=clips_dir, cache_dir=tmp_path / "cache", player=player)


@pytest.fixture
def speech_enabled(monkeypatch):
    monkeypatch.setattr(settings.audio, "speech_enabled", True)


def fake_tts(*args, **kwargs) -> Mock:
    tts = Mock()
    tts.save.side_effect = lambda path: Path(path).write_bytes(b"ID3")
    return tts


def test_sanitize_filename() -> None:
    assert sanitize_filename("Bulaklak") == "bulaklak"
    assert sanitize_filename("ice cream!") == "ice_cream_"


@pytest.mark.asyncio
async def test_plays_recorded_clip(audio: AudioService, clips_dir: Path, player: Mock) -> None:
    """Test that an existing clip is played by its canonical key."""
    clip = clips_dir / "aso.mp3"
    clip.write_bytes(b"ID3")
    assert await audio.speak("aso", "dog", "english") is True
    player.assert_called_once_with(clip)


@pytest.mark.asyncio
async def test_missing_clip_without_speech(audio: AudioService, player: Mock) -> None:
    """Test that nothing plays when the clip is missing and speech is off."""
    assert await audio.speak("pusa", "cat", "english") is False
    player.assert_not_called()


@pytest.mark.asyncio
async def test_missing_clip_falls_back_to_speech(
    audio: AudioService, player: Mock, speech_enabled
) -> None:
    """Test the speech fallback uses the display term and a slow voice."""
    with patch("wordquest.services.audio_service.gTTS", side_effect=fake_tts) as tts:
        assert await audio.speak("pusa", "cat", Language.ENGLISH) is True
    tts.assert_called_once_with(text="cat", lang="en", tld="com", slow=False)
    played = player.call_args[0][0]
    assert played.name == "en_cat.mp3"
    assert played.exists()


@pytest.mark.asyncio
async def test_speech_voice_follows_language(
    audio: AudioService, settings_service: SettingsService, speech_enabled
) -> None:
    """Test the Filipino voice and slow speech for low speech rates."""
    settings_service.update(speech_rate=0.5)
    with patch("wordquest.services.audio_service.gTTS", side_effect=fake_tts) as tts:
        await audio.speak("pusa", "pusa", "filipino")
    tts.assert_called_once_with(text="pusa", lang="tl", tld="com.ph", slow=True)


@pytest.mark.asyncio
async def test_speech_failure_reports_false(audio: AudioService, speech_enabled) -> None:
    """Test that a synthesis error is reported, not raised."""
    with patch("wordquest.services.audio_service.gTTS", side_effect=ConnectionError("offline")):
        assert await audio.speak("aso", "aso", "filipino") is False


@pytest.mark.asyncio
async def test_play_word_reports_through_callback(audio: AudioService, clips_dir: Path) -> None:
    """Test the fire-and-forget API."""
    (clips_dir / "manok.mp3").write_bytes(b"ID3")
    outcomes = []
    task = audio.play_word("manok", "chicken", "english", on_done=outcomes.append)
    await task
    await asyncio.sleep(0)
    assert outcomes == [True]


def test_play_word_without_loop(audio: AudioService) -> None:
    """Test that playback outside an event loop reports failure at once."""
    outcomes = []
    assert audio.play_word("aso", "aso", "filipino", on_done=outcomes.append) is None
    assert outcomes == [False]


@pytest.mark.asyncio
async def test_sound_test_message(audio: AudioService, clips_dir: Path) -> None:
    """Test the settings screen sound test."""
    assert await audio.test_sound() == "Hindi ma-play ang tunog"
    (clips_dir / "soundtest.mp3").write_bytes(b"ID3")
    assert await audio.test_sound() is None


@pytest.mark.asyncio
async def test_settings_read_on_loop_thread(
    audio: AudioService, settings_service: SettingsService, monkeypatch, speech_enabled
) -> None:
    """Test that the playback worker never touches the settings session."""
    settings_service.update(speech_rate=0.5)
    loop_thread = threading.current_thread()
    load = settings_service.load

    def load_on_loop_thread():
        if threading.current_thread() is not loop_thread:
            raise AssertionError("settings loaded from a worker thread")
        return load()

    monkeypatch.setattr(settings_service, "load", load_on_loop_thread)
    with patch("wordquest.services.audio_service.gTTS", side_effect=fake_tts) as tts:
        assert await audio.speak("pusa", "pusa", "filipino") is True
    tts.assert_called_once_with(text="pusa", lang="tl", tld="com.ph", slow=True)
