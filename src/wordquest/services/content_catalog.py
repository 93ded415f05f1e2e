"""Static lesson content per level tier and its localized views."""
import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

from wordquest.models.content_models import ContentItem, ContentTier, QuizQuestion
from wordquest.services.localization import (
    Language,
    t,
    translate_question,
    translate_word,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _WordEntry:
    key: str
    glyph: str


@dataclass(frozen=True)
class _QuestionEntry:
    key: str
    options: Tuple[str, ...]  # word keys
    correct: int
    glyph: str


TIER_WORDS: Dict[ContentTier, Tuple[_WordEntry, ...]] = {
    ContentTier.ANIMALS: (
        _WordEntry("aso", "🐕"),
        _WordEntry("pusa", "🐱"),
        _WordEntry("manok", "🐔"),
        _WordEntry("baboy", "🐷"),
    ),
    ContentTier.OBJECTS: (
        _WordEntry("mesa", "🪑"),
        _WordEntry("libro", "📚"),
        _WordEntry("bola", "⚽"),
        _WordEntry("bulaklak", "🌸"),
        _WordEntry("bahay", "🏠"),
        _WordEntry("kotse", "🚗"),
    ),
}

TIER_QUESTIONS: Dict[ContentTier, Tuple[_QuestionEntry, ...]] = {
    ContentTier.ANIMALS: (
        _QuestionEntry("whoMeows", ("aso", "pusa", "manok"), 1, "🐱"),
        _QuestionEntry("whatIsDogInFilipino", ("baboy", "aso", "pusa"), 1, "🐕"),
    ),
    ContentTier.OBJECTS: (
        _QuestionEntry("whereEat", ("libro", "mesa", "bola"), 1, "🪑"),
        _QuestionEntry("whatForReading", ("libro", "kotse", "bahay"), 0, "📚"),
        _QuestionEntry("whereLive", ("bola", "bulaklak", "bahay"), 2, "🏠"),
        _QuestionEntry("whatToPlay", ("mesa", "bola", "libro"), 1, "⚽"),
    ),
}

PHONETIC_HINTS: Dict[str, str] = {
    "aso": "ah-so",
    "pusa": "poo-sa",
    "manok": "ma-nok",
    "baboy": "ba-boy",
    "mesa": "me-sa",
    "libro": "lib-ro",
    "bola": "bo-la",
    "bulaklak": "bu-lak-lak",
    "bahay": "ba-hay",
    "kotse": "kot-se",
}

TIER_ICONS: Dict[ContentTier, str] = {
    ContentTier.ANIMALS: "🐕",
    ContentTier.OBJECTS: "🏠",
}


def tier_for_level(level: int) -> ContentTier:
    """Level 2 and above share the objects tier; there is no third tier."""
    return ContentTier.OBJECTS if level >= 2 else ContentTier.ANIMALS


def phonetic_hint(term_key: str, display_term: str) -> str:
    """Pronunciation spelling for a word, or the shown term when none is known."""
    return PHONETIC_HINTS.get(term_key, display_term)


class ContentCatalog:
    """Serves localized words and questions for a player level."""

    def get_items(self, level: int, language: Union[Language, str]) -> List[ContentItem]:
        """Words for the learn phase, in teaching order."""
        language = Language.from_code(language)
        tier = tier_for_level(level)
        items = []
        for entry in TIER_WORDS[tier]:
            display_term = translate_word(entry.key, language)
            items.append(ContentItem(
                term_key=entry.key,
                display_term=display_term,
                gloss=translate_word(entry.key, language.other),
                glyph=entry.glyph,
                phonetic_hint=phonetic_hint(entry.key, display_term),
            ))
        logger.debug(f"Serving {len(items)} {tier.value} items in {language.value}")
        return items

    def get_questions(self, level: int, language: Union[Language, str]) -> List[QuizQuestion]:
        """Questions for the practice phase, in quiz order."""
        language = Language.from_code(language)
        tier = tier_for_level(level)
        return [
            QuizQuestion(
                key=entry.key,
                prompt=translate_question(entry.key, language),
                options=tuple(translate_word(option, language) for option in entry.options),
                correct_index=entry.correct,
                glyph=entry.glyph,
            )
            for entry in TIER_QUESTIONS[tier]
        ]

    def get_title(self, level: int, language: Union[Language, str]) -> str:
        """Localized tier title with its icon, e.g. '🐕 Animals'."""
        tier = tier_for_level(level)
        return f"{TIER_ICONS[tier]} {t(tier.value, language)}"
