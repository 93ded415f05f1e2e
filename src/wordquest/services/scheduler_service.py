"""Service for named, cancellable delayed callbacks."""
import asyncio
import logging
from typing import Callable, Dict, Optional

logger = logging.getLogger(__name__)


class SchedulerService:
    """Owns delayed callbacks by name on the running event loop.

    Scheduling a name that is already pending replaces the earlier callback.
    An owner tears its timers down with ``cancel_all`` so that nothing fires
    into an object that has been discarded.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        """Initialize the service, optionally pinned to an event loop."""
        self.loop = loop
        self.tasks: Dict[str, asyncio.TimerHandle] = {}

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self.loop is None:
            self.loop = asyncio.get_running_loop()
        return self.loop

    def schedule(self, name: str, delay: float, callback: Callable[[], None]) -> None:
        """Run callback after delay seconds unless cancelled first."""
        self.cancel(name)
        self.tasks[name] = self._get_loop().call_later(delay, self._run, name, callback)
        logger.debug(f"Scheduled {name} in {delay:.2f}s")

    def _run(self, name: str, callback: Callable[[], None]) -> None:
        self.tasks.pop(name, None)
        try:
            callback()
        except Exception as e:
            logger.error("Error in scheduled task %s: %s", name, str(e))

    def cancel(self, name: str) -> bool:
        """Cancel a pending callback; returns whether one was pending."""
        handle = self.tasks.pop(name, None)
        if handle is None:
            return False
        handle.cancel()
        logger.debug(f"Cancelled {name}")
        return True

    def cancel_all(self) -> None:
        """Cancel every pending callback."""
        for handle in self.tasks.values():
            handle.cancel()
        if self.tasks:
            logger.debug(f"Cancelled {len(self.tasks)} pending tasks")
        self.tasks.clear()

    def is_pending(self, name: str) -> bool:
        return name in self.tasks
