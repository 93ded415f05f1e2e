"""Best-effort vibration cues."""
import logging
from enum import Enum
from typing import Callable, Optional, Sequence

from wordquest.services.localization import t
from wordquest.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

Vibrator = Callable[[Sequence[int]], None]


class HapticPattern(Enum):
    """Named vibration patterns in milliseconds (on, off, on, ...)."""
    ADVANCE = (200,)
    CORRECT = (100, 50, 100)  # short-pause-short
    WRONG = (200, 100, 200)  # long-pause-long
    TAP = (50,)
    START_LESSON = (150,)
    TEST = (100, 50, 100, 50, 200)


class HapticService:
    """Triggers vibration patterns when the device and the settings allow it."""

    def __init__(self, settings_service: SettingsService, vibrator: Optional[Vibrator] = None):
        """Initialize with the settings accessor and an optional device vibrator."""
        self.settings_service = settings_service
        self.vibrator = vibrator

    @property
    def available(self) -> bool:
        return self.vibrator is not None

    def trigger(self, pattern: HapticPattern) -> bool:
        """Vibrate; a silent no-op when unsupported or disabled."""
        if not self.available or not self.settings_service.load().haptic_feedback:
            return False
        try:
            self.vibrator(pattern.value)
        except Exception as e:
            logger.info(f"Vibration failed for {pattern.name}: {e}")
            return False
        return True

    def test(self) -> Optional[str]:
        """Vibrate the test pattern; returns an informational message when it cannot."""
        player_settings = self.settings_service.load()
        if player_settings.haptic_feedback and self.available:
            if self.trigger(HapticPattern.TEST):
                return None
            return t("vibrationNotAvailable", player_settings.language)
        if not self.available:
            return t("vibrationNotAvailable", player_settings.language)
        return t("enableHapticFirst", player_settings.language)
