"""Tests for the content catalog and localization."""
import pytest

from wordquest.models.content_models import ContentTier, QuizQuestion
from wordquest.services.content_catalog import ContentCatalog, phonetic_hint, tier_for_level
from wordquest.services.localization import Language, t, translate_question, translate_word


@pytest.fixture
def catalog() -> ContentCatalog:
    return ContentCatalog()


def test_tier_for_level() -> None:
    """Test level gating of content tiers."""
    assert tier_for_level(1) is ContentTier.ANIMALS
    assert tier_for_level(2) is ContentTier.OBJECTS
    assert tier_for_level(7) is ContentTier.OBJECTS


def test_animals_in_filipino(catalog: ContentCatalog) -> None:
    """Test the level-1 items in the base language."""
    items = catalog.get_items(1, "filipino")
    assert [item.term_key for item in items] == ["aso", "pusa", "manok", "baboy"]
    assert items[0].display_term == "aso"
    assert items[0].gloss == "dog"
    assert items[0].glyph == "🐕"
    assert items[0].phonetic_hint == "ah-so"


def test_gloss_flips_with_language(catalog: ContentCatalog) -> None:
    """Test that the gloss is always the other language."""
    items = catalog.get_items(1, Language.ENGLISH)
    assert items[1].display_term == "cat"
    assert items[1].gloss == "pusa"
    assert items[1].term_key == "pusa"
    assert items[1].phonetic_hint == "poo-sa"


def test_objects_tier(catalog: ContentCatalog) -> None:
    """Test the level-2 content."""
    items = catalog.get_items(2, "english")
    assert len(items) == 6
    assert [item.display_term for item in items] == ["table", "book", "ball", "flower", "house", "car"]

    questions = catalog.get_questions(2, "english")
    assert [q.key for q in questions] == ["whereEat", "whatForReading", "whereLive", "whatToPlay"]
    assert [q.correct_index for q in questions] == [1, 0, 2, 1]
    assert questions[0].options == ("book", "table", "ball")
    assert questions[0].prompt == "Where do we eat?"


def test_animals_questions(catalog: ContentCatalog) -> None:
    """Test the level-1 quiz in the base language."""
    questions = catalog.get_questions(1, "filipino")
    assert len(questions) == 2
    assert questions[0].options == ("aso", "pusa", "manok")
    assert questions[0].is_correct(1)
    assert questions[1].prompt == "Anong tawag sa 'dog' sa Pilipino?"


def test_titles(catalog: ContentCatalog) -> None:
    """Test localized tier titles."""
    assert catalog.get_title(1, "english") == "🐕 Animals"
    assert catalog.get_title(2, "filipino") == "🏠 Mga Bagay (Objects)"


def test_missing_translations_pass_through() -> None:
    """Test the fallback for unknown keys."""
    assert t("noSuchString", "english") == "noSuchString"
    assert translate_word("kalabaw", "english") == "kalabaw"
    assert translate_question("whoBarks", "filipino") == "whoBarks"
    assert phonetic_hint("kalabaw", "carabao") == "carabao"


def test_language_codes() -> None:
    """Test language aliases and the default."""
    assert Language.from_code("en") is Language.ENGLISH
    assert Language.from_code("tl") is Language.FILIPINO
    assert Language.from_code("fil") is Language.FILIPINO
    assert Language.from_code(None) is Language.FILIPINO
    assert Language.from_code("fr") is Language.FILIPINO
    assert Language.ENGLISH.other is Language.FILIPINO


def test_question_rejects_bad_index() -> None:
    """Test that a question cannot point outside its options."""
    with pytest.raises(ValueError):
        QuizQuestion(key="broken", prompt="?", options=("a", "b"), correct_index=2, glyph="❓")
