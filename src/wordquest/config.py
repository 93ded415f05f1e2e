"""Configuration settings for the game."""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Define base directory
BASE_DIR = Path(__file__).parent.parent.parent

# Load environment variables from .env file
env_file = ".env.test" if os.getenv("ENV") == "test" else ".env"
load_dotenv(env_file)


# Define data directories from environment variables
DATA_DIR = Path(os.getenv("DATA_DIR", "./data"))
AUDIO_DIR = Path(os.getenv("AUDIO_DIR", str(DATA_DIR / "audio")))
SPEECH_CACHE_DIR = DATA_DIR / "speech_cache"

SUPPORTED_LANGUAGES = ("filipino", "english")


def ensure_directories() -> None:
    """Ensure all required directories exist."""
    directories = [
        DATA_DIR,
        AUDIO_DIR,
        SPEECH_CACHE_DIR,
    ]

    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)


@dataclass
class PathSettings:
    """Path configuration settings."""
    base_dir: Path = BASE_DIR
    data_dir: Path = DATA_DIR
    audio_dir: Path = AUDIO_DIR
    speech_cache_dir: Path = SPEECH_CACHE_DIR


@dataclass
class DatabaseSettings:
    """Database configuration settings."""
    url: str = os.getenv("DATABASE_URL", "sqlite:///wordquest.db")
    echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"


@dataclass
class LoggingSettings:
    """Logging configuration settings."""
    level: str = os.getenv("LOG_LEVEL", "WARNING")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    dir: Optional[str] = os.getenv("LOG_DIR", None)
    rotation: str = os.getenv("LOG_ROTATION", "midnight")
    interval: int = int(os.getenv("LOG_INTERVAL", "1"))
    backup_count: int = int(os.getenv("LOG_BACKUP_COUNT", "7"))


@dataclass
class LessonSettings:
    """Lesson pacing and reward settings."""
    reveal_delay: float = float(os.getenv("REVEAL_DELAY", "1.5"))  # seconds
    onboarding_delay: float = float(os.getenv("ONBOARDING_DELAY", "1.5"))  # seconds
    input_debounce: float = float(os.getenv("INPUT_DEBOUNCE", "0.5"))  # seconds
    starting_hearts: int = int(os.getenv("STARTING_HEARTS", "3"))
    dashboard_hearts: int = int(os.getenv("DASHBOARD_HEARTS", "5"))
    gold_award: int = int(os.getenv("GOLD_AWARD", "25"))
    starting_gold: int = int(os.getenv("STARTING_GOLD", "50"))
    promotion_threshold: int = int(os.getenv("PROMOTION_THRESHOLD", "3"))


@dataclass
class AudioSettings:
    """Audio playback settings."""
    player_command: str = os.getenv("AUDIO_PLAYER", "")
    playback_timeout: float = float(os.getenv("AUDIO_PLAYBACK_TIMEOUT", "10"))
    speech_enabled: bool = os.getenv("SPEECH_ENABLED", "true").lower() == "true"


@dataclass
class MonitoringSettings:
    """Metrics exporter settings."""
    enabled: bool = os.getenv("MONITORING_ENABLED", "false").lower() == "true"
    port: int = int(os.getenv("MONITORING_PORT", "9090"))


@dataclass
class GameSettings:
    """Defaults for a fresh install."""
    default_language: str = os.getenv("DEFAULT_LANGUAGE", "filipino")
    default_player_name: str = "Bata"
    guest_player_name: str = "Hero"


def get_path_settings() -> PathSettings:
    """Get path settings."""
    return PathSettings()


def get_database_settings() -> DatabaseSettings:
    """Get database settings."""
    return DatabaseSettings()


def get_logging_settings() -> LoggingSettings:
    """Get logging settings."""
    return LoggingSettings()


def get_lesson_settings() -> LessonSettings:
    """Get lesson settings."""
    return LessonSettings()


def get_audio_settings() -> AudioSettings:
    """Get audio settings."""
    return AudioSettings()


def get_monitoring_settings() -> MonitoringSettings:
    """Get monitoring settings."""
    return MonitoringSettings()


def get_game_settings() -> GameSettings:
    """Get game settings."""
    return GameSettings()


@dataclass
class Settings:
    """Main settings class that combines all configuration settings."""
    paths: PathSettings = field(default_factory=get_path_settings)
    database: DatabaseSettings = field(default_factory=get_database_settings)
    logging: LoggingSettings = field(default_factory=get_logging_settings)
    lesson: LessonSettings = field(default_factory=get_lesson_settings)
    audio: AudioSettings = field(default_factory=get_audio_settings)
    monitoring: MonitoringSettings = field(default_factory=get_monitoring_settings)
    game: GameSettings = field(default_factory=get_game_settings)

    def validate(self) -> None:
        """Validate settings and raise ValueError if invalid."""
        for name in ("reveal_delay", "onboarding_delay", "input_debounce"):
            if getattr(self.lesson, name) < 0:
                raise ValueError(f"{name.upper()} cannot be negative")

        if self.lesson.starting_hearts < 1:
            raise ValueError("STARTING_HEARTS must be positive")

        if self.lesson.dashboard_hearts < 0:
            raise ValueError("DASHBOARD_HEARTS cannot be negative")

        if self.lesson.gold_award < 0 or self.lesson.starting_gold < 0:
            raise ValueError("Gold amounts cannot be negative")

        if self.lesson.promotion_threshold < 1:
            raise ValueError("PROMOTION_THRESHOLD must be at least 1")

        if self.game.default_language not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"DEFAULT_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}"
            )

        if not 0 < self.monitoring.port < 65536:
            raise ValueError("MONITORING_PORT must be a valid port number")


# Create global settings instance
settings = Settings()
settings.validate()
