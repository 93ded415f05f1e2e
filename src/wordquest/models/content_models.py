"""Models for lesson content."""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ContentTier(Enum):
    """Content set gated by player level."""
    ANIMALS = "animals"
    OBJECTS = "objects"


@dataclass(frozen=True)
class ContentItem:
    """One word taught in the learn phase."""
    term_key: str  # base-language word, stable across locales
    display_term: str
    gloss: str  # the same word in the other language
    glyph: str
    phonetic_hint: str


@dataclass(frozen=True)
class QuizQuestion:
    """One multiple-choice question of the practice phase."""
    key: str
    prompt: str
    options: Tuple[str, ...]
    correct_index: int
    glyph: str

    def __post_init__(self):
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Question {self.key}: correct index {self.correct_index} "
                f"outside {len(self.options)} options"
            )

    def is_correct(self, index: int) -> bool:
        return index == self.correct_index
