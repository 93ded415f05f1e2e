"""Lesson session: learn, practice and completed phases."""
import logging
import math
from typing import Callable, List, Optional, Union

from wordquest import monitoring
from wordquest.config import settings
from wordquest.models.content_models import ContentItem, QuizQuestion
from wordquest.models.lesson_models import LessonPhase, LessonSummary, Verdict
from wordquest.services.audio_service import AudioService
from wordquest.services.content_catalog import ContentCatalog, tier_for_level
from wordquest.services.haptic_service import HapticPattern, HapticService
from wordquest.services.localization import Language
from wordquest.services.scheduler_service import SchedulerService

logger = logging.getLogger(__name__)

REVEAL_TASK = "lesson.reveal"


def verdict_for(final_score: int, question_count: int) -> Verdict:
    """Feedback band for a final score."""
    if final_score >= math.ceil(question_count * 0.75):
        return Verdict.EXCELLENT
    if final_score >= math.ceil(question_count * 0.5):
        return Verdict.GOOD
    return Verdict.KEEP_LEARNING


class LessonSession:
    """One pass through a lesson, discarded on exit or confirmation.

    The session reads the player level once, at construction, to pick its
    content tier. Events that the current phase does not accept are ignored
    and reported as ``False``.
    """

    def __init__(
        self,
        level: int,
        language: Union[Language, str],
        scheduler: SchedulerService,
        catalog: Optional[ContentCatalog] = None,
        haptics: Optional[HapticService] = None,
        audio: Optional[AudioService] = None,
        on_complete: Optional[Callable[[int], None]] = None,
        on_exit: Optional[Callable[[], None]] = None,
        on_change: Optional[Callable[[], None]] = None,
        reveal_delay: Optional[float] = None,
        starting_hearts: Optional[int] = None,
    ):
        catalog = catalog or ContentCatalog()
        self.level = level
        self.language = Language.from_code(language)
        self.tier = tier_for_level(level)
        self.items: List[ContentItem] = catalog.get_items(level, self.language)
        self.questions: List[QuizQuestion] = catalog.get_questions(level, self.language)
        self.title = catalog.get_title(level, self.language)

        self.scheduler = scheduler
        self.haptics = haptics
        self.audio = audio
        self.on_complete = on_complete
        self.on_exit = on_exit
        self.on_change = on_change
        self.reveal_delay = settings.lesson.reveal_delay if reveal_delay is None else reveal_delay

        self.phase = LessonPhase.LEARN
        self.item_index = 0
        self.score = 0
        self.hearts_remaining = settings.lesson.starting_hearts if starting_hearts is None else starting_hearts
        self.selected_answer: Optional[int] = None
        self.awaiting_result = False
        self.final_score: Optional[int] = None
        self.is_playing = False
        self.closed = False

        monitoring.lessons_started.labels(tier=self.tier.value).inc()
        logger.info(f"Lesson started: level {level}, {self.tier.value}, {self.language.value}")

    # Derived state

    @property
    def progress_percent(self) -> float:
        """Display-only progress: learn fills 0-50, practice 50-100."""
        if self.phase is LessonPhase.COMPLETED:
            return 100.0
        if self.phase is LessonPhase.LEARN:
            if not self.items:
                return 0.0
            return self.item_index / len(self.items) * 50
        if not self.questions:
            return 50.0
        return 50 + self.item_index / len(self.questions) * 50

    @property
    def current_item(self) -> Optional[ContentItem]:
        if self.phase is not LessonPhase.LEARN:
            return None
        return self.items[self.item_index]

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.phase is not LessonPhase.PRACTICE:
            return None
        return self.questions[self.item_index]

    def summary(self) -> Optional[LessonSummary]:
        """Completion summary; None before the lesson is completed."""
        if self.phase is not LessonPhase.COMPLETED:
            return None
        count = len(self.questions)
        return LessonSummary(
            final_score=self.final_score,
            question_count=count,
            percent=round(self.final_score / count * 100) if count else 0,
            gold_to_earn=settings.lesson.gold_award,
            verdict=verdict_for(self.final_score, count),
        )

    # Events

    def advance(self) -> bool:
        """Mark the current word as learned and move on."""
        if self.closed or self.phase is not LessonPhase.LEARN:
            return False
        self._haptic(HapticPattern.ADVANCE)
        if self.item_index < len(self.items) - 1:
            self.item_index += 1
        else:
            self.phase = LessonPhase.PRACTICE
            self.item_index = 0
            logger.debug("Lesson entered practice phase")
        return True

    def answer(self, index: int) -> bool:
        """Select an option; the outcome is scored now and revealed for a while."""
        if self.closed or self.phase is not LessonPhase.PRACTICE or self.awaiting_result:
            return False
        question = self.questions[self.item_index]
        if not 0 <= index < len(question.options):
            return False

        self.selected_answer = index
        self.awaiting_result = True
        if question.is_correct(index):
            self.score += 1
            monitoring.answers.labels(result="correct").inc()
            self._haptic(HapticPattern.CORRECT)
        else:
            self.hearts_remaining = max(0, self.hearts_remaining - 1)
            monitoring.answers.labels(result="wrong").inc()
            self._haptic(HapticPattern.WRONG)
        logger.debug(
            f"Answer {index} to {question.key}: score {self.score}, hearts {self.hearts_remaining}"
        )
        self.scheduler.schedule(REVEAL_TASK, self.reveal_delay, self._on_reveal_timeout)
        return True

    def _on_reveal_timeout(self) -> None:
        if self.closed or not self.awaiting_result:
            return
        if self.item_index < len(self.questions) - 1:
            self.item_index += 1
            self.selected_answer = None
            self.awaiting_result = False
        else:
            self.awaiting_result = False
            self.final_score = self.score
            self.phase = LessonPhase.COMPLETED
            monitoring.lessons_completed.labels(tier=self.tier.value).inc()
            logger.info(f"Lesson completed with {self.final_score}/{len(self.questions)}")
        if self.on_change:
            self.on_change()

    def confirm(self) -> bool:
        """Report the final score upward; only accepted once completed."""
        if self.closed or self.phase is not LessonPhase.COMPLETED:
            return False
        final_score = self.final_score
        self.close()
        if self.on_complete:
            self.on_complete(final_score)
        return True

    def exit(self) -> bool:
        """Abandon the session without reporting a score."""
        if self.closed:
            return False
        monitoring.lessons_exited.labels(phase=self.phase.value).inc()
        logger.info(f"Lesson exited during {self.phase.value} at item {self.item_index}")
        self.close()
        if self.on_exit:
            self.on_exit()
        return True

    def close(self) -> None:
        """Tear down: cancel timers so nothing fires into a discarded session."""
        self.scheduler.cancel_all()
        self.closed = True

    # Capabilities

    def request_audio(self) -> bool:
        """Pronounce the current word; ignored while a previous request plays."""
        if self.closed or self.phase is not LessonPhase.LEARN or self.is_playing:
            return False
        if self.audio is None:
            return False
        item = self.current_item
        self._haptic(HapticPattern.TAP)
        self.is_playing = True
        self.audio.play_word(item.term_key, item.display_term, self.language, on_done=self._on_audio_done)
        return True

    def _on_audio_done(self, played: bool) -> None:
        if not played:
            logger.debug("Audio request finished without playback")
        self.is_playing = False
        if self.on_change and not self.closed:
            self.on_change()

    def _haptic(self, pattern: HapticPattern) -> None:
        if self.haptics is not None:
            self.haptics.trigger(pattern)
