"""Models for the player profile, personas and per-device settings."""
from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Tuple
import logging

from wordquest.config import settings


logger = logging.getLogger(__name__)


class Persona(Enum):
    """Character chosen at onboarding."""
    WIZARD = "wizard"
    ASTRONAUT = "astronaut"
    HERO = "hero"
    PRINCESS = "princess"
    DEFAULT = "default"

    @classmethod
    def from_id(cls, persona_id: Any) -> "Persona":
        """Resolve a persona id, falling back to DEFAULT for unknown ids."""
        if isinstance(persona_id, Persona):
            return persona_id
        # The landing screen used to call the wizard "explorer"
        if persona_id == "explorer":
            return cls.WIZARD
        try:
            return cls(persona_id)
        except ValueError:
            logger.debug(f"Unknown persona id {persona_id!r}, using default")
            return cls.DEFAULT


# Order in which personas are offered on the landing screen
SELECTABLE_PERSONAS: Tuple[Persona, ...] = (
    Persona.WIZARD,
    Persona.ASTRONAUT,
    Persona.HERO,
    Persona.PRINCESS,
)


@dataclass(frozen=True)
class PersonaTheme:
    """Static look and copy for a persona."""
    emoji: str
    title_key: str
    power_key: str
    greeting: str  # formatted with title and name
    motivational: str


PERSONA_THEMES: Dict[Persona, PersonaTheme] = {
    Persona.WIZARD: PersonaTheme(
        emoji="🧙‍♀️",
        title_key="wordWizard",
        power_key="magicReadingPowers",
        greeting="Greetings, {title} {name}!",
        motivational="Channel your magical reading powers!",
    ),
    Persona.ASTRONAUT: PersonaTheme(
        emoji="🚀",
        title_key="spaceReader",
        power_key="cosmicKnowledge",
        greeting="Hello, {title} {name}!",
        motivational="Navigate through words among the stars!",
    ),
    Persona.HERO: PersonaTheme(
        emoji="🦸‍♂️",
        title_key="bookHero",
        power_key="superLearning",
        greeting="Welcome, {title} {name}!",
        motivational="Use your super learning powers!",
    ),
    Persona.PRINCESS: PersonaTheme(
        emoji="👸",
        title_key="storyPrincess",
        power_key="fairyTaleMagic",
        greeting="Good day, {title} {name}!",
        motivational="Create magical stories with your reading!",
    ),
    Persona.DEFAULT: PersonaTheme(
        emoji="📚",
        title_key="reader",
        power_key="readyToLearn",
        greeting="Kumusta, {name}!",
        motivational="Let's start your reading journey!",
    ),
}


def _non_negative_int(data: Dict[str, Any], key: str, default: int, minimum: int = 0) -> int:
    value = data.get(key, default)
    # bool is an int subclass but never a valid counter
    if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
        raise ValueError(f"Invalid {key}: {value!r}")
    return value


@dataclass(frozen=True)
class PlayerProfile:
    """Identity and durable progression of the single local player."""
    name: str = settings.game.default_player_name
    persona: Persona = Persona.DEFAULT
    level: int = 1
    stars: int = 0
    hearts: int = settings.lesson.starting_hearts
    gold: int = settings.lesson.starting_gold

    @property
    def is_onboarded(self) -> bool:
        """Whether onboarding has replaced the default sentinel name."""
        return bool(self.name) and self.name != settings.game.default_player_name

    @property
    def theme(self) -> PersonaTheme:
        return PERSONA_THEMES[self.persona]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data = asdict(self)
        data["persona"] = self.persona.value
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "PlayerProfile":
        """Build a profile from stored data, raising ValueError on bad shape."""
        if not isinstance(data, dict):
            raise ValueError(f"Profile must be an object, got {type(data).__name__}")
        defaults = cls()
        name = data.get("name", defaults.name)
        if not isinstance(name, str):
            raise ValueError(f"Invalid name: {name!r}")
        return cls(
            name=name,
            persona=Persona.from_id(data.get("persona", data.get("character", defaults.persona.value))),
            level=_non_negative_int(data, "level", defaults.level, minimum=1),
            stars=_non_negative_int(data, "stars", defaults.stars),
            hearts=_non_negative_int(data, "hearts", defaults.hearts),
            gold=_non_negative_int(data, "gold", defaults.gold),
        )


FONT_SIZES = ("small", "medium", "large", "xl")


@dataclass(frozen=True)
class PlayerSettings:
    """Device settings owned by the settings screen; read-only for the game core."""
    speech_rate: float = 0.8
    speech_volume: float = 0.9
    font_size: str = "medium"
    high_contrast: bool = False
    reduced_motion: bool = False
    language: str = field(default_factory=lambda: settings.game.default_language)
    show_phonetics: bool = False
    visual_cues: bool = True
    haptic_feedback: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "PlayerSettings":
        """Merge stored values over defaults, dropping unknown or invalid ones."""
        defaults = cls()
        if not isinstance(data, dict):
            return defaults
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name not in data:
                continue
            value = data[f.name]
            default = getattr(defaults, f.name)
            if isinstance(default, bool):
                valid = isinstance(value, bool)
            elif isinstance(default, float):
                valid = isinstance(value, (int, float)) and not isinstance(value, bool) and 0 <= value <= 2
            elif f.name == "font_size":
                valid = value in FONT_SIZES
            elif f.name == "language":
                valid = value in ("filipino", "english")
            else:
                valid = isinstance(value, type(default))
            if valid:
                values[f.name] = float(value) if isinstance(default, float) else value
            else:
                logger.debug(f"Ignoring invalid setting {f.name}={value!r}")
        return cls(**values)
