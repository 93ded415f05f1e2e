"""Text rendering of each screen for the terminal front-end."""
from typing import List, Optional

from wordquest.models.lesson_models import ActionKind, InputAction, LessonPhase, Screen
from wordquest.models.player_models import PERSONA_THEMES, SELECTABLE_PERSONAS
from wordquest.services.input_router import InputRouter
from wordquest.services.lesson_service import LessonSession
from wordquest.services.localization import Language, t
from wordquest.services.navigator_service import ScreenNavigator

DIVIDER = "=" * 48

HELP_LINE = "[1-9] choose  [w/s] move  [enter] select  [q] back"


def _on_off(value: bool, language: Language) -> str:
    return t("on" if value else "off", language)


def _control_label(navigator: ScreenNavigator, action: InputAction, language: Language) -> str:
    """Label for a navigable control."""
    kind = action.kind
    if kind is ActionKind.SELECT_PERSONA:
        theme = PERSONA_THEMES[SELECTABLE_PERSONAS[action.index]]
        return f"{theme.emoji} {t(theme.title_key, language)}"
    if kind is ActionKind.ANSWER:
        return navigator.lesson.current_question.options[action.index]
    if kind is ActionKind.PLAY_AUDIO:
        playing = navigator.lesson is not None and navigator.lesson.is_playing
        return f"🔊 {t('playing' if playing else 'listen', language)}"

    player_settings = navigator.settings_service.load()
    labels = {
        ActionKind.QUICK_START: t("quickStartAnonymous", language),
        ActionKind.START_LESSON: f"📚 {t('startLesson', language)}",
        ActionKind.OPEN_SHOP: t("shop", language),
        ActionKind.OPEN_SETTINGS: f"⚙️ {t('settings', language)}",
        ActionKind.RESET: f"🔄 {t('resetProgress', language)}",
        ActionKind.ADVANCE: t("gotIt", language),
        ActionKind.CONFIRM: t("continueAdventure", language),
        ActionKind.EXIT: t("skipToDashboard", language),
        ActionKind.ACKNOWLEDGE: t("continue", language),
        ActionKind.BACK: f"⬅️ {t('back', language)}",
        ActionKind.TOGGLE_LANGUAGE: f"{t('language', language)}: {language.value.title()}",
        ActionKind.TOGGLE_HAPTICS:
            f"{t('hapticFeedback', language)}: {_on_off(player_settings.haptic_feedback, language)}",
        ActionKind.TOGGLE_PHONETICS:
            f"{t('showPhonetics', language)}: {_on_off(player_settings.show_phonetics, language)}",
        ActionKind.TOGGLE_MOTION:
            f"{t('reduceMotion', language)}: {_on_off(player_settings.reduced_motion, language)}",
        ActionKind.TEST_SOUND: t("testSound", language),
        ActionKind.TEST_VIBRATION: t("testVibration", language),
    }
    return labels.get(kind, kind.value)


def _render_controls(navigator: ScreenNavigator, router: InputRouter, language: Language) -> List[str]:
    context = router.context
    if context is None:
        return []
    lines = []
    for i, action in enumerate(context.controls):
        cursor = ">" if i == router.focus_index else " "
        number = f"{i + 1}." if i < context.digit_limit else "  "
        lines.append(f"{cursor} {number} {_control_label(navigator, action, language)}")
    return lines


def _render_landing(navigator: ScreenNavigator, language: Language) -> List[str]:
    lines = [t("wordQuest", language), t("magicalWorld", language), ""]
    if navigator.onboarding:
        lines.append(t("portalOpening", language))
    elif navigator.pending_persona is not None:
        theme = PERSONA_THEMES[navigator.pending_persona]
        lines.append(f"{theme.emoji} {t('heroNameQuestion', language)} {t(theme.title_key, language)}?")
        lines.append(t("enterHeroName", language))
    else:
        lines.append(t("chooseHero", language))
        lines.append(t("chooseChampion", language))
    return lines


def _render_dashboard(navigator: ScreenNavigator, language: Language) -> List[str]:
    view = navigator.dashboard_view()
    return [
        f"{view.emoji} {view.greeting}",
        f"{view.title} · {view.power}",
        view.motivational,
        "",
        f"{t('level', language)} {view.level}   ⭐ {view.stars}   "
        f"🪙 {view.gold}   {'❤️' * view.hearts}",
    ]


def _render_learn(lesson: LessonSession, show_phonetics: bool, language: Language) -> List[str]:
    item = lesson.current_item
    lines = [
        f"{t('learning', language)} {lesson.item_index + 1}/{len(lesson.items)}",
        "",
        f"   {item.glyph}  {item.display_term.upper()}",
        f"   ({item.gloss})",
    ]
    if show_phonetics:
        lines.append(f"   /{item.phonetic_hint}/")
    return lines


def _render_practice(lesson: LessonSession, language: Language) -> List[str]:
    question = lesson.current_question
    lines = [
        f"{t('quizMode', language)} {lesson.item_index + 1}/{len(lesson.questions)}"
        f"   {t('points', language)}: {lesson.score}   {'❤️' * lesson.hearts_remaining}",
        "",
        f"   {question.glyph}  {question.prompt}",
    ]
    if lesson.awaiting_result:
        chosen = question.options[lesson.selected_answer]
        mark = "✅" if question.is_correct(lesson.selected_answer) else "❌"
        lines.append(f"   {mark} {chosen} → {question.options[question.correct_index]}")
    return lines


def _render_completed(lesson: LessonSession, language: Language) -> List[str]:
    summary = lesson.summary()
    return [
        t("lessonComplete", language),
        "",
        f"{t('correctAnswers', language)}: {summary.final_score}/{summary.question_count} ({summary.percent}%)",
        f"{t('goldEarned', language)}: +{summary.gold_to_earn}",
        t(summary.verdict.value, language),
    ]


def _render_lesson(navigator: ScreenNavigator, language: Language) -> List[str]:
    lesson = navigator.lesson
    if lesson is None:
        return []
    lines = [lesson.title, f"{t('progress', language)}: {round(lesson.progress_percent)}%", ""]
    if lesson.phase is LessonPhase.LEARN:
        show_phonetics = navigator.settings_service.load().show_phonetics
        lines += _render_learn(lesson, show_phonetics, language)
    elif lesson.phase is LessonPhase.PRACTICE:
        lines += _render_practice(lesson, language)
    else:
        lines += _render_completed(lesson, language)
    return lines


def _render_celebration(navigator: ScreenNavigator, language: Language) -> List[str]:
    reward = navigator.last_reward
    if reward is None:
        return [t("greatJob", language)]
    lines = [t("levelUp", language) if reward.leveled_up else t("greatJob", language)]
    if reward.leveled_up:
        lines.append(t("newContentUnlocked", language))
    lines.append(f"⭐ +{reward.stars_earned}   🪙 +{reward.gold_earned}")
    return lines


def _render_shop(navigator: ScreenNavigator, language: Language) -> List[str]:
    lines = [t("shop", language), f"🪙 {navigator.profile.gold}", ""]
    for entry in navigator.shop_entries():
        marker = "✓" if entry.affordable else " "
        lines.append(f" {marker} {entry.item.title} ({entry.item.price}) - {entry.item.description}")
        lines.append(f"     {t('comingSoon', language)}")
    return lines


def _render_settings(navigator: ScreenNavigator, language: Language) -> List[str]:
    lines = [f"⚙️ {t('settings', language)}"]
    if navigator.message:
        lines.append(f"ℹ️ {navigator.message}")
    return lines


RENDERERS = {
    Screen.LANDING: _render_landing,
    Screen.DASHBOARD: _render_dashboard,
    Screen.LESSON: _render_lesson,
    Screen.CELEBRATION: _render_celebration,
    Screen.SHOP: _render_shop,
    Screen.SETTINGS: _render_settings,
}


def render(navigator: ScreenNavigator, router: Optional[InputRouter] = None) -> str:
    """Render the navigator's active screen, with its controls when a router is mounted."""
    language = navigator.language
    lines = [DIVIDER]
    lines += RENDERERS[navigator.screen](navigator, language)
    if router is not None:
        controls = _render_controls(navigator, router, language)
        if controls:
            lines.append("")
            lines += controls
    lines += [DIVIDER, HELP_LINE]
    return "\n".join(lines)
