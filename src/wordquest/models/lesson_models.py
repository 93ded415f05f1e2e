"""Models for lesson, navigation and input data structures."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LessonPhase(Enum):
    """Phases of a lesson session."""
    LEARN = "learn"
    PRACTICE = "practice"
    COMPLETED = "completed"


class Screen(Enum):
    """Top-level screens of the application."""
    LANDING = "landing"
    DASHBOARD = "dashboard"
    LESSON = "lesson"
    SHOP = "shop"
    SETTINGS = "settings"
    CELEBRATION = "celebration"


class Verdict(Enum):
    """Feedback band shown on the lesson summary."""
    EXCELLENT = "excellent"
    GOOD = "good"
    KEEP_LEARNING = "keep_learning"


@dataclass(frozen=True)
class LessonSummary:
    """Result of a completed lesson, before rewards are applied."""
    final_score: int
    question_count: int
    percent: int
    gold_to_earn: int
    verdict: Verdict


@dataclass(frozen=True)
class LessonReward:
    """What a confirmed lesson added to the profile."""
    score: int
    stars_earned: int
    gold_earned: int
    leveled_up: bool


class ActionKind(Enum):
    """Logical actions the input router can emit."""
    # Landing
    SELECT_PERSONA = "select_persona"
    QUICK_START = "quick_start"
    # Dashboard
    START_LESSON = "start_lesson"
    OPEN_SHOP = "open_shop"
    OPEN_SETTINGS = "open_settings"
    RESET = "reset"
    # Lesson
    PLAY_AUDIO = "play_audio"
    ADVANCE = "advance"
    ANSWER = "answer"
    CONFIRM = "confirm"
    EXIT = "exit"
    # Celebration, shop, settings
    ACKNOWLEDGE = "acknowledge"
    BACK = "back"
    TOGGLE_LANGUAGE = "toggle_language"
    TOGGLE_HAPTICS = "toggle_haptics"
    TOGGLE_PHONETICS = "toggle_phonetics"
    TOGGLE_MOTION = "toggle_motion"
    TEST_SOUND = "test_sound"
    TEST_VIBRATION = "test_vibration"


@dataclass(frozen=True)
class InputAction:
    """A logical action, with the option index for indexed actions."""
    kind: ActionKind
    index: Optional[int] = None
