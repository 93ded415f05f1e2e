"""Tests for the terminal application."""
import asyncio
import io

import pytest
from sqlalchemy.orm import sessionmaker

from wordquest.app import WordQuestApp
from wordquest.config import settings
from wordquest.models.base import create_db_engine
from wordquest.models.lesson_models import Screen


@pytest.fixture
def app(monkeypatch) -> WordQuestApp:
    """Create an app on a private in-memory database with no delays."""
    monkeypatch.setattr(settings.lesson, "input_debounce", 0)
    monkeypatch.setattr(settings.lesson, "onboarding_delay", 0)
    engine = create_db_engine("sqlite://")
    lines = iter(["\n"])
    return WordQuestApp(
        output=io.StringIO(),
        read_line=lambda: next(lines, ""),
        session_factory=sessionmaker(bind=engine),
    )


async def settle() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_start_and_stop(app: WordQuestApp) -> None:
    """Test the application lifecycle."""
    await app.start()
    assert app.running is True
    assert app.navigator.screen is Screen.LANDING
    assert "WORD QUEST" in app.output.getvalue()

    await app.stop()
    assert app.running is False
    assert app.db is None


@pytest.mark.asyncio
async def test_onboarding_and_lesson_flow(app: WordQuestApp) -> None:
    """Test a player going from the landing screen into a lesson and back."""
    await app.start()
    try:
        app.handle_line("2\n")
        assert app.navigator.pending_persona is not None

        app.handle_line("Ana\n")
        await settle()
        assert app.navigator.screen is Screen.DASHBOARD
        assert app.navigator.profile.name == "Ana"
        assert "Ana" in app.output.getvalue()

        app.handle_line("1\n")
        assert app.navigator.screen is Screen.LESSON
        app.handle_line("\n")
        assert app.navigator.lesson.item_index == 1

        app.handle_line("q\n")
        assert app.navigator.screen is Screen.DASHBOARD
        assert app.navigator.profile.stars == 0
    finally:
        await app.stop()


@pytest.mark.asyncio
async def test_run_until_end_of_input(app: WordQuestApp) -> None:
    """Test that the input loop stops at end of input."""
    await app.run_async()
    assert app.running is False
