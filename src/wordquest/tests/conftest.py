"""Test configuration."""
import os
import tempfile
from pathlib import Path
from typing import Callable, Dict, Generator, List, Tuple

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="wordquest-test-"))
os.environ.setdefault("SPEECH_ENABLED", "false")

# Load test environment variables
test_env_path = Path(__file__).parent.parent.parent.parent / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from sqlalchemy.orm import Session, sessionmaker

from wordquest.config import ensure_directories
from wordquest.models.base import create_db_engine, init_db
from wordquest.services.progression_service import ProgressionService
from wordquest.services.settings_service import SettingsService
from wordquest.services.store_service import StoreService


class ManualScheduler:
    """Scheduler double whose clock only moves when a test advances it."""

    def __init__(self):
        self.now = 0.0
        self.tasks: Dict[str, Tuple[float, Callable[[], None]]] = {}
        self.fired: List[str] = []

    def schedule(self, name: str, delay: float, callback: Callable[[], None]) -> None:
        self.tasks[name] = (self.now + delay, callback)

    def cancel(self, name: str) -> bool:
        return self.tasks.pop(name, None) is not None

    def cancel_all(self) -> None:
        self.tasks.clear()

    def is_pending(self, name: str) -> bool:
        return name in self.tasks

    def fire(self, name: str) -> None:
        """Run a pending callback now, regardless of its due time."""
        _, callback = self.tasks.pop(name)
        self.fired.append(name)
        callback()

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running callbacks as they become due."""
        target = self.now + seconds
        while True:
            due = [(when, name) for name, (when, _) in self.tasks.items() if when <= target]
            if not due:
                break
            when, name = min(due)
            self.now = when
            self.fire(name)
        self.now = target


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Set up test environment before each test."""
    ensure_directories()
    yield


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create a fresh in-memory database session for each test."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def store(db: Session) -> StoreService:
    return StoreService(db)


@pytest.fixture
def settings_service(store: StoreService) -> SettingsService:
    return SettingsService(store)


@pytest.fixture
def progression(store: StoreService) -> ProgressionService:
    return ProgressionService(store)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def lesson_schedulers() -> List[ManualScheduler]:
    """Schedulers handed out to lessons, newest last."""
    return []


@pytest.fixture
def lesson_scheduler_factory(lesson_schedulers: List[ManualScheduler]) -> Callable[[], ManualScheduler]:
    def factory() -> ManualScheduler:
        scheduler = ManualScheduler()
        lesson_schedulers.append(scheduler)
        return scheduler
    return factory
