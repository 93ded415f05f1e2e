"""Keyboard routing: physical keys to logical actions per screen and phase."""
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from wordquest.config import settings
from wordquest.models.lesson_models import ActionKind, InputAction, LessonPhase, Screen
from wordquest.models.player_models import SELECTABLE_PERSONAS
from wordquest.services.scheduler_service import SchedulerService

logger = logging.getLogger(__name__)

ENABLE_TASK = "input.enable"

UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"
ENTER, SPACE, ESCAPE, BACKSPACE = "enter", "space", "escape", "backspace"

KEY_ALIASES: Dict[str, str] = {
    "": ENTER,
    "\n": ENTER,
    "return": ENTER,
    " ": SPACE,
    "esc": ESCAPE,
    "q": ESCAPE,
    "arrowup": UP,
    "arrowdown": DOWN,
    "arrowleft": LEFT,
    "arrowright": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
    "tab": DOWN,
    "\b": BACKSPACE,
}


def normalize_key(raw: str) -> str:
    """Map a key name or a typed line to a canonical key."""
    if raw == " ":
        return SPACE
    key = raw.strip().lower()
    return KEY_ALIASES.get(key, key)


@dataclass(frozen=True)
class InputContext:
    """Action table for one screen or lesson phase.

    ``controls`` is the navigable control set the focus cursor walks over.
    Digit keys jump to ``controls[digit - 1]`` up to ``digit_limit``; extra
    keys (Escape, Backspace) are bound in ``bindings``.
    """
    name: str
    controls: Tuple[InputAction, ...]
    default_focus: int = 0
    digit_limit: int = 4
    bindings: Dict[str, InputAction] = field(default_factory=dict)
    accepts_input: bool = True


def _indexed(kind: ActionKind, count: int) -> Tuple[InputAction, ...]:
    return tuple(InputAction(kind, i) for i in range(count))


def build_context(screen: Screen, lesson=None) -> InputContext:
    """Action table for the active screen (and lesson phase, when in a lesson)."""
    if screen is Screen.LANDING:
        return InputContext(
            name="landing",
            controls=_indexed(ActionKind.SELECT_PERSONA, len(SELECTABLE_PERSONAS))
            + (InputAction(ActionKind.QUICK_START),),
        )

    if screen is Screen.DASHBOARD:
        return InputContext(
            name="dashboard",
            controls=(
                InputAction(ActionKind.START_LESSON),
                InputAction(ActionKind.OPEN_SHOP),
                InputAction(ActionKind.OPEN_SETTINGS),
                InputAction(ActionKind.RESET),
            ),
            # Escape on the dashboard resets progress
            bindings={ESCAPE: InputAction(ActionKind.RESET)},
        )

    if screen is Screen.LESSON and lesson is not None:
        exit_binding = {ESCAPE: InputAction(ActionKind.EXIT)}
        if lesson.phase is LessonPhase.LEARN:
            return InputContext(
                name="lesson.learn",
                controls=(InputAction(ActionKind.PLAY_AUDIO), InputAction(ActionKind.ADVANCE)),
                default_focus=1,
                bindings=exit_binding,
            )
        if lesson.phase is LessonPhase.PRACTICE:
            option_count = len(lesson.current_question.options)
            return InputContext(
                name="lesson.practice",
                controls=_indexed(ActionKind.ANSWER, option_count),
                digit_limit=min(3, option_count),
                bindings=exit_binding,
                accepts_input=not lesson.awaiting_result,
            )
        return InputContext(
            name="lesson.completed",
            controls=(InputAction(ActionKind.CONFIRM), InputAction(ActionKind.EXIT)),
            bindings=exit_binding,
        )

    if screen is Screen.CELEBRATION:
        acknowledge = InputAction(ActionKind.ACKNOWLEDGE)
        return InputContext(
            name="celebration",
            controls=(acknowledge,),
            bindings={ESCAPE: acknowledge},
        )

    if screen is Screen.SHOP:
        back = InputAction(ActionKind.BACK)
        return InputContext(
            name="shop",
            controls=(back,),
            bindings={ESCAPE: back, BACKSPACE: back},
        )

    if screen is Screen.SETTINGS:
        back = InputAction(ActionKind.BACK)
        return InputContext(
            name="settings",
            controls=(
                InputAction(ActionKind.TOGGLE_LANGUAGE),
                InputAction(ActionKind.TOGGLE_HAPTICS),
                InputAction(ActionKind.TOGGLE_PHONETICS),
                InputAction(ActionKind.TOGGLE_MOTION),
                InputAction(ActionKind.TEST_SOUND),
                InputAction(ActionKind.TEST_VIBRATION),
                back,
            ),
            bindings={ESCAPE: back, BACKSPACE: back},
        )

    return InputContext(name=screen.value, controls=(), accepts_input=False)


class InputRouter:
    """Turns keys into actions for whichever screen is mounted.

    After a screen mounts, keys are dropped for a short debounce window so a
    key that dismissed the previous screen cannot act on the new one.
    """

    def __init__(self, scheduler: SchedulerService, debounce: Optional[float] = None):
        self.scheduler = scheduler
        self.debounce = settings.lesson.input_debounce if debounce is None else debounce
        self.context: Optional[InputContext] = None
        self.focus_index = 0
        self.enabled = False

    def mount(self, context: InputContext) -> None:
        """Attach a new screen; input stays disabled until the debounce elapses."""
        self.context = context
        self.focus_index = context.default_focus
        self.enabled = False
        if self.debounce > 0:
            self.scheduler.schedule(ENABLE_TASK, self.debounce, self._enable)
        else:
            self._enable()
        logger.debug(f"Input mounted for {context.name}")

    def refresh(self, context: InputContext) -> None:
        """Swap the action table within the same screen, keeping input enabled."""
        if self.context is None or self.context.name != context.name:
            self.focus_index = context.default_focus
        elif context.controls:
            self.focus_index %= len(context.controls)
        self.context = context

    def unmount(self) -> None:
        self.scheduler.cancel(ENABLE_TASK)
        self.context = None
        self.enabled = False

    def _enable(self) -> None:
        self.enabled = True

    @property
    def focused_control(self) -> Optional[InputAction]:
        if not self.context or not self.context.controls:
            return None
        return self.context.controls[self.focus_index]

    def move(self, delta: int) -> None:
        """Move the focus cursor with wraparound."""
        if self.context and self.context.controls:
            self.focus_index = (self.focus_index + delta) % len(self.context.controls)

    def handle_key(self, raw_key: str) -> Optional[InputAction]:
        """Resolve a key to an action, or None when it means nothing here."""
        context = self.context
        if context is None or not self.enabled or not context.accepts_input:
            return None
        key = normalize_key(raw_key)

        if key in (UP, LEFT):
            self.move(-1)
            return None
        if key in (DOWN, RIGHT):
            self.move(1)
            return None
        if key in (ENTER, SPACE):
            return self.focused_control
        if key.isdigit() and len(key) == 1:
            position = int(key)
            if 1 <= position <= min(context.digit_limit, len(context.controls)):
                self.focus_index = position - 1
                return context.controls[position - 1]
            return None
        return context.bindings.get(key)
