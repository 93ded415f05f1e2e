"""Main application: wires the services to a terminal front-end."""
import asyncio
import logging
import sys
from typing import Callable, Optional, TextIO

from wordquest.config import settings
from wordquest.models.base import SessionLocal, init_db
from wordquest.models.lesson_models import Screen
from wordquest.monitoring import start_monitoring
from wordquest.screens import render
from wordquest.services.audio_service import AudioService
from wordquest.services.haptic_service import HapticService
from wordquest.services.input_router import ESCAPE, InputRouter, build_context, normalize_key
from wordquest.services.navigator_service import ScreenNavigator
from wordquest.services.progression_service import ProgressionService
from wordquest.services.scheduler_service import SchedulerService
from wordquest.services.settings_service import SettingsService
from wordquest.services.store_service import StoreService


class WordQuestApp:
    """Main application class."""

    def __init__(
        self,
        output: TextIO = sys.stdout,
        read_line: Optional[Callable[[], str]] = None,
        session_factory=SessionLocal,
    ):
        """Initialize the application."""
        self.output = output
        self.read_line = read_line or sys.stdin.readline
        self.session_factory = session_factory
        self.db = None
        self.scheduler: Optional[SchedulerService] = None
        self.lesson_schedulers = []
        self.navigator: Optional[ScreenNavigator] = None
        self.router: Optional[InputRouter] = None
        self.running = False
        self.logger = logging.getLogger(__name__)

    def _lesson_scheduler(self) -> SchedulerService:
        # Only schedulers with pending timers need cancelling on stop
        self.lesson_schedulers = [s for s in self.lesson_schedulers if s.tasks]
        scheduler = SchedulerService()
        self.lesson_schedulers.append(scheduler)
        return scheduler

    async def start(self) -> None:
        """Start the application."""
        if self.running:
            return

        try:
            init_db(self.session_factory.kw.get("bind"))
            self.db = self.session_factory()
            self.logger.info("Database initialized")

            store = StoreService(self.db)
            settings_service = SettingsService(store)
            self.scheduler = SchedulerService()
            self.navigator = ScreenNavigator(
                progression=ProgressionService(store),
                settings_service=settings_service,
                scheduler=self.scheduler,
                haptics=HapticService(settings_service),
                audio=AudioService(settings_service),
                lesson_scheduler_factory=self._lesson_scheduler,
            )
            self.router = InputRouter(self.scheduler)
            self.navigator.add_listener(self._on_screen_change)

            if settings.monitoring.enabled:
                start_monitoring(settings.monitoring.port)
                self.logger.info(f"Metrics exporter listening on port {settings.monitoring.port}")

            self.running = True
            self.navigator.start()
            self.logger.info("Application started")

        except Exception as e:
            self.logger.error("Failed to start application: %s", str(e))
            await self.stop()
            raise

    async def stop(self) -> None:
        """Stop the application."""
        if self.navigator and self.navigator.lesson:
            self.navigator.lesson.close()
        for scheduler in [self.scheduler, *self.lesson_schedulers]:
            if scheduler:
                scheduler.cancel_all()
        self.lesson_schedulers = []
        self.scheduler = None

        if self.db:
            self.db.close()
            self.db = None
            self.logger.info("Database session closed")

        self.running = False

    def _on_screen_change(self, previous: Screen, current: Screen) -> None:
        context = build_context(current, self.navigator.lesson)
        if previous is not current or self.router.context is None:
            self.router.mount(context)
        else:
            self.router.refresh(context)
        self.draw()

    def draw(self) -> None:
        self.output.write(render(self.navigator, self.router) + "\n")
        self.output.flush()

    def handle_line(self, line: str) -> None:
        """Feed one line of terminal input to the game."""
        navigator = self.navigator
        raw = line.rstrip("\r\n")
        key = normalize_key(raw)

        # The landing screen asks for the hero name as free text
        if (
            navigator.screen is Screen.LANDING
            and navigator.pending_persona is not None
            and not navigator.onboarding
        ):
            if key == ESCAPE:
                navigator.clear_persona()
                return
            if raw.strip() and not (key.isdigit() and len(key) == 1):
                navigator.onboard(raw)
                return

        action = self.router.handle_key(key)
        if action is None:
            self.draw()
            return
        if not navigator.dispatch(action):
            self.draw()

    async def run_async(self) -> None:
        """Read input lines until end of input."""
        await self.start()
        try:
            while self.running:
                line = await asyncio.to_thread(self.read_line)
                if not line:
                    self.logger.info("End of input")
                    break
                self.handle_line(line)
        finally:
            await self.stop()

    def run(self) -> None:
        """Run the application."""
        try:
            asyncio.run(self.run_async())
        except KeyboardInterrupt:
            self.logger.info("Received keyboard interrupt")
