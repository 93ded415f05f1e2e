"""Read access to the device settings blob."""
import json
import logging
from dataclasses import replace

from wordquest.models.player_models import PlayerSettings
from wordquest.services.store_service import StoreService

logger = logging.getLogger(__name__)

SETTINGS_KEY = "wordquest.settings"


class SettingsService:
    """Single accessor for settings; callers re-read at the point of use."""

    def __init__(self, store: StoreService):
        """Initialize the service with the durable store."""
        self.store = store

    def load(self) -> PlayerSettings:
        """Stored settings merged over defaults; defaults when absent or corrupt."""
        raw = self.store.get(SETTINGS_KEY)
        if raw is None:
            return PlayerSettings()
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Settings blob is not valid JSON, using defaults: {e}")
            return PlayerSettings()
        return PlayerSettings.from_dict(data)

    def save(self, player_settings: PlayerSettings) -> bool:
        return self.store.set(SETTINGS_KEY, json.dumps(player_settings.to_dict()))

    def update(self, **changes) -> PlayerSettings:
        """Apply changes on top of the current settings and persist them."""
        current = self.load()
        unknown = set(changes) - set(current.to_dict())
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        # Invalid values fall back to defaults, same as on load
        updated = PlayerSettings.from_dict({**current.to_dict(), **changes})
        self.save(updated)
        logger.info(f"Settings updated: {changes}")
        return updated

    def toggle(self, name: str) -> PlayerSettings:
        """Flip a boolean setting."""
        current = self.load()
        value = getattr(current, name, None)
        if not isinstance(value, bool):
            raise ValueError(f"{name} is not a boolean setting")
        updated = replace(current, **{name: not value})
        self.save(updated)
        logger.info(f"Setting {name} toggled to {not value}")
        return updated

    def toggle_language(self) -> PlayerSettings:
        current = self.load()
        language = "english" if current.language == "filipino" else "filipino"
        updated = replace(current, language=language)
        self.save(updated)
        logger.info(f"Language switched to {language}")
        return updated
