"""Word pronunciation playback with a speech-synthesis fallback."""
import asyncio
import logging
import re
import shlex
import subprocess
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union

from gtts import gTTS

from wordquest import monitoring
from wordquest.config import settings
from wordquest.services.localization import Language, t
from wordquest.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

Player = Callable[[Path], None]
AudioCallback = Callable[[bool], None]

# gTTS language and Google domain per game language
SPEECH_VOICES: Dict[Language, Tuple[str, str]] = {
    Language.ENGLISH: ("en", "com"),
    Language.FILIPINO: ("tl", "com.ph"),
}

SOUND_TEST_CLIP = "soundtest"


class AudioUnavailableError(RuntimeError):
    """Raised when a clip or the playback device cannot be used."""


def sanitize_filename(word: str) -> str:
    """Sanitize word for use in filename."""
    # Replace any non-alphanumeric characters with underscore
    return re.sub(r'[^a-zA-Z0-9]', '_', word.lower())


class AudioService:
    """Plays pre-recorded clips, synthesizing speech when a clip is missing.

    Playback is fire and forget: ``play_word`` schedules the work on the
    running loop and reports the outcome through a callback; nothing in the
    game waits for it.
    """

    def __init__(
        self,
        settings_service: SettingsService,
        clips_dir: Optional[Path] = None,
        cache_dir: Optional[Path] = None,
        player: Optional[Player] = None,
    ):
        """Initialize with the settings accessor and optional overrides."""
        self.settings_service = settings_service
        self.clips_dir = Path(clips_dir or settings.paths.audio_dir)
        self.cache_dir = Path(cache_dir or settings.paths.speech_cache_dir)
        self.player = player or self._command_player

    @staticmethod
    def _command_player(path: Path) -> None:
        """Play a file with the configured external command."""
        command = settings.audio.player_command
        if not command:
            raise AudioUnavailableError("No audio player configured")
        subprocess.run(
            [*shlex.split(command), str(path)],
            check=True,
            timeout=settings.audio.playback_timeout,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def clip_path(self, key: str) -> Path:
        """Conventional location of a pre-recorded clip."""
        return self.clips_dir / f"{sanitize_filename(key)}.mp3"

    def _play_clip(self, key: str) -> None:
        path = self.clip_path(key)
        if not path.exists():
            raise AudioUnavailableError(f"No clip at {path}")
        self.player(path)

    def _synthesize(self, text: str, language: Language, slow: bool) -> Path:
        """Generate speech for text with gTTS, reusing a cached file."""
        lang, tld = SPEECH_VOICES[language]
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        suffix = "_slow" if slow else ""
        path = self.cache_dir / f"{lang}_{sanitize_filename(text)}{suffix}.mp3"
        if not path.exists():
            tts = gTTS(text=text, lang=lang, tld=tld, slow=slow)
            tts.save(str(path))
            logger.info(f"Speech generated for: {text}, file: {path.name}")
        return path

    def _speak_blocking(self, key: str, text: str, language: Language, slow: bool) -> bool:
        """Runs in a worker thread; must not touch the database session."""
        try:
            self._play_clip(key)
            return True
        except (AudioUnavailableError, OSError, subprocess.SubprocessError) as e:
            logger.info(f"Audio file not available, using speech for: {text} ({e})")

        if not settings.audio.speech_enabled:
            return False
        monitoring.audio_fallbacks.labels(language=language.value).inc()
        try:
            path = self._synthesize(text, language, slow=slow)
            self.player(path)
            return True
        except Exception as e:
            logger.warning(f"Speech fallback failed for: {text}, error: {e}")
            return False

    async def speak(self, key: str, text: str, language: Union[Language, str]) -> bool:
        """Play the clip for key, or speak text; returns whether anything played."""
        language = Language.from_code(language)
        # Settings are read on the loop thread, which owns the session
        slow = self.settings_service.load().speech_rate < 0.75
        return await asyncio.to_thread(self._speak_blocking, key, text, language, slow)

    def play_word(
        self,
        key: str,
        text: str,
        language: Union[Language, str],
        on_done: Optional[AudioCallback] = None,
    ) -> Optional[asyncio.Task]:
        """Start playback in the background; on_done receives the outcome."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.info("No running event loop, audio unavailable")
            if on_done:
                on_done(False)
            return None

        task = loop.create_task(self.speak(key, text, language))
        if on_done:
            task.add_done_callback(
                lambda done: on_done(not done.cancelled() and done.exception() is None and done.result())
            )
        return task

    async def test_sound(self) -> Optional[str]:
        """Play the sound test; returns an informational message on failure."""
        language = Language.from_code(self.settings_service.load().language)
        played = await self.speak(SOUND_TEST_CLIP, t("testSpeech", language), language)
        return None if played else t("soundNotAvailable", language)
