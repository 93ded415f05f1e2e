"""Top-level screen state machine."""
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from wordquest import monitoring
from wordquest.config import settings
from wordquest.models.lesson_models import ActionKind, InputAction, LessonReward, Screen
from wordquest.models.player_models import SELECTABLE_PERSONAS, Persona, PlayerProfile
from wordquest.models.shop_models import SHOP_ITEMS, ShopItem
from wordquest.services.audio_service import AudioService
from wordquest.services.content_catalog import ContentCatalog
from wordquest.services.haptic_service import HapticPattern, HapticService
from wordquest.services.lesson_service import LessonSession
from wordquest.services.localization import Language, t
from wordquest.services.progression_service import ProgressionService
from wordquest.services.scheduler_service import SchedulerService
from wordquest.services.settings_service import SettingsService

logger = logging.getLogger(__name__)

ONBOARD_TASK = "navigator.onboard"

ScreenListener = Callable[[Screen, Screen], None]


@dataclass(frozen=True)
class DashboardView:
    """Everything the dashboard shows about the player."""
    name: str
    emoji: str
    title: str
    power: str
    greeting: str
    motivational: str
    level: int
    stars: int
    gold: int
    hearts: int


@dataclass(frozen=True)
class ShopEntry:
    item: ShopItem
    affordable: bool


class ScreenNavigator:
    """Selects the active screen and routes lesson outcomes into progression.

    Every transition that changes the profile saves it first and then swaps
    profile and screen together, so listeners never see a new screen paired
    with a stale profile.
    """

    def __init__(
        self,
        progression: ProgressionService,
        settings_service: SettingsService,
        scheduler: SchedulerService,
        haptics: Optional[HapticService] = None,
        audio: Optional[AudioService] = None,
        catalog: Optional[ContentCatalog] = None,
        lesson_scheduler_factory: Callable[[], SchedulerService] = SchedulerService,
        onboarding_delay: Optional[float] = None,
    ):
        self.progression = progression
        self.settings_service = settings_service
        self.scheduler = scheduler
        self.haptics = haptics
        self.audio = audio
        self.catalog = catalog or ContentCatalog()
        self.lesson_scheduler_factory = lesson_scheduler_factory
        self.onboarding_delay = (
            settings.lesson.onboarding_delay if onboarding_delay is None else onboarding_delay
        )

        self.screen = Screen.LANDING
        self.profile = PlayerProfile()
        self.lesson: Optional[LessonSession] = None
        self.last_reward: Optional[LessonReward] = None
        self.pending_persona: Optional[Persona] = None
        self.onboarding = False
        self.message: Optional[str] = None
        self.listeners: List[ScreenListener] = []

    # Plumbing

    def add_listener(self, listener: ScreenListener) -> None:
        self.listeners.append(listener)

    def _notify(self, previous: Screen) -> None:
        for listener in list(self.listeners):
            listener(previous, self.screen)

    def _transition(self, screen: Screen, profile: Optional[PlayerProfile] = None) -> None:
        previous = self.screen
        if profile is not None:
            self.profile = profile
        self.screen = screen
        monitoring.active_screen.labels(screen=previous.value).set(0)
        monitoring.active_screen.labels(screen=screen.value).set(1)
        logger.debug(f"Screen {previous.value} -> {screen.value}")
        self._notify(previous)

    @property
    def language(self) -> Language:
        return Language.from_code(self.settings_service.load().language)

    def start(self) -> Screen:
        """Load the profile and pick the first screen."""
        profile = self.progression.load()
        self._transition(Screen.DASHBOARD if profile.is_onboarded else Screen.LANDING, profile)
        return self.screen

    # Landing

    def select_persona(self, persona: Persona) -> bool:
        if self.screen is not Screen.LANDING or self.onboarding:
            return False
        self.pending_persona = Persona.from_id(persona)
        self._notify(self.screen)
        return True

    def clear_persona(self) -> bool:
        if self.screen is not Screen.LANDING or self.onboarding or self.pending_persona is None:
            return False
        self.pending_persona = None
        self._notify(self.screen)
        return True

    def onboard(self, name: str, persona: Optional[Persona] = None) -> bool:
        """Begin onboarding; the screen changes after the transition delay."""
        persona = persona or self.pending_persona
        name = (name or "").strip()
        if self.screen is not Screen.LANDING or self.onboarding or not name or persona is None:
            return False
        self.onboarding = True
        self.pending_persona = persona
        self.scheduler.schedule(
            ONBOARD_TASK,
            self.onboarding_delay,
            lambda: self._commit_onboarding(name, persona),
        )
        self._notify(self.screen)
        return True

    def quick_start(self) -> bool:
        """Start as the anonymous guest hero."""
        return self.onboard(settings.game.guest_player_name, Persona.WIZARD)

    def _commit_onboarding(self, name: str, persona: Persona) -> None:
        if self.screen is not Screen.LANDING or not self.onboarding:
            return
        profile = self.progression.onboard(self.profile, name, persona)
        self.onboarding = False
        self.pending_persona = None
        self._transition(Screen.DASHBOARD, profile)

    # Dashboard

    def dashboard_view(self) -> DashboardView:
        language = self.language
        theme = self.profile.theme
        title = t(theme.title_key, language)
        return DashboardView(
            name=self.profile.name,
            emoji=theme.emoji,
            title=title,
            power=t(theme.power_key, language),
            greeting=theme.greeting.format(title=title, name=self.profile.name),
            motivational=theme.motivational,
            level=self.profile.level,
            stars=self.profile.stars,
            gold=self.profile.gold,
            hearts=settings.lesson.dashboard_hearts,
        )

    def start_lesson(self) -> bool:
        if self.screen is not Screen.DASHBOARD:
            return False
        if self.haptics is not None:
            self.haptics.trigger(HapticPattern.START_LESSON)
        self.lesson = LessonSession(
            level=self.profile.level,
            language=self.language,
            scheduler=self.lesson_scheduler_factory(),
            catalog=self.catalog,
            haptics=self.haptics,
            audio=self.audio,
            on_complete=self._on_lesson_complete,
            on_exit=self._on_lesson_exit,
            on_change=self._on_lesson_change,
        )
        self._transition(Screen.LESSON)
        return True

    def open_shop(self) -> bool:
        if self.screen is not Screen.DASHBOARD:
            return False
        self._transition(Screen.SHOP)
        return True

    def open_settings(self) -> bool:
        if self.screen is not Screen.DASHBOARD:
            return False
        self.message = None
        self._transition(Screen.SETTINGS)
        return True

    def back(self) -> bool:
        if self.screen not in (Screen.SHOP, Screen.SETTINGS):
            return False
        self.message = None
        self._transition(Screen.DASHBOARD)
        return True

    def shop_entries(self) -> Tuple[ShopEntry, ...]:
        return tuple(ShopEntry(item, self.profile.gold >= item.price) for item in SHOP_ITEMS)

    # Lesson outcomes

    def _on_lesson_change(self) -> None:
        if self.screen is Screen.LESSON:
            self._notify(self.screen)

    def _on_lesson_complete(self, final_score: int) -> None:
        if self.screen is not Screen.LESSON:
            return
        profile, reward = self.progression.complete_lesson(self.profile, final_score)
        self.lesson = None
        self.last_reward = reward
        self._transition(Screen.CELEBRATION, profile)

    def _on_lesson_exit(self) -> None:
        if self.screen is not Screen.LESSON:
            return
        self.lesson = None
        self._transition(Screen.DASHBOARD)

    def acknowledge(self) -> bool:
        """Leave the celebration screen."""
        if self.screen is not Screen.CELEBRATION:
            return False
        self.last_reward = None
        self._transition(Screen.DASHBOARD)
        return True

    # Reset

    def reset_progress(self) -> bool:
        """Clear the profile from any screen and go back to onboarding."""
        if self.lesson is not None:
            self.lesson.close()
            self.lesson = None
        self.scheduler.cancel(ONBOARD_TASK)
        self.onboarding = False
        self.pending_persona = None
        self.last_reward = None
        self.message = None
        profile = self.progression.reset()
        self._transition(Screen.LANDING, profile)
        return True

    # Settings

    def _toggle(self, name: str) -> bool:
        self.settings_service.toggle(name)
        self._notify(self.screen)
        return True

    def test_vibration(self) -> bool:
        self.message = self.haptics.test() if self.haptics else t("vibrationNotAvailable", self.language)
        self._notify(self.screen)
        return True

    async def test_sound(self) -> Optional[str]:
        if self.audio is None:
            self.message = t("soundNotAvailable", self.language)
        else:
            self.message = await self.audio.test_sound()
        if self.screen is Screen.SETTINGS:
            self._notify(self.screen)
        return self.message

    def _start_sound_test(self) -> bool:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.message = t("soundNotAvailable", self.language)
            self._notify(self.screen)
            return False
        loop.create_task(self.test_sound())
        return True

    # Input

    def dispatch(self, action: Optional[InputAction]) -> bool:
        """Apply a routed input action; unaccepted actions are ignored."""
        if action is None:
            return False
        kind = action.kind
        lesson = self.lesson if self.screen is Screen.LESSON else None

        if kind is ActionKind.SELECT_PERSONA:
            if action.index is None or not 0 <= action.index < len(SELECTABLE_PERSONAS):
                return False
            return self.select_persona(SELECTABLE_PERSONAS[action.index])
        if kind is ActionKind.QUICK_START:
            return self.quick_start()
        if kind is ActionKind.START_LESSON:
            return self.start_lesson()
        if kind is ActionKind.OPEN_SHOP:
            return self.open_shop()
        if kind is ActionKind.OPEN_SETTINGS:
            return self.open_settings()
        if kind is ActionKind.RESET:
            return self.reset_progress()
        if kind is ActionKind.ACKNOWLEDGE:
            return self.acknowledge()
        if kind is ActionKind.BACK:
            return self.back()

        if self.screen is Screen.SETTINGS:
            if kind is ActionKind.TOGGLE_LANGUAGE:
                self.settings_service.toggle_language()
                self._notify(self.screen)
                return True
            if kind is ActionKind.TOGGLE_HAPTICS:
                return self._toggle("haptic_feedback")
            if kind is ActionKind.TOGGLE_PHONETICS:
                return self._toggle("show_phonetics")
            if kind is ActionKind.TOGGLE_MOTION:
                return self._toggle("reduced_motion")
            if kind is ActionKind.TEST_VIBRATION:
                return self.test_vibration()
            if kind is ActionKind.TEST_SOUND:
                return self._start_sound_test()

        if lesson is None:
            return False
        if kind is ActionKind.PLAY_AUDIO:
            return lesson.request_audio()
        if kind is ActionKind.ADVANCE:
            changed = lesson.advance()
        elif kind is ActionKind.ANSWER and action.index is not None:
            changed = lesson.answer(action.index)
        elif kind is ActionKind.CONFIRM:
            return lesson.confirm()
        elif kind is ActionKind.EXIT:
            return lesson.exit()
        else:
            return False
        if changed:
            self._notify(self.screen)
        return changed
