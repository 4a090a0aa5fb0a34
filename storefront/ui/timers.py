"""
Periodic timer running on the event loop.

Used for carousel auto-advance and countdown refresh. A ticker owns one
asyncio task; ``stop()`` must be awaited on teardown so no task outlives the
view that started it.
"""

import asyncio
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """Calls ``callback`` every ``period`` seconds until stopped"""

    def __init__(self, period: float, callback: Callable[[], object], name: str = "ticker"):
        if period <= 0:
            raise ValueError("period must be positive")
        self.period = period
        self.callback = callback
        self.name = name
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking; a no-op when already running."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=self.name)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.period)
            try:
                self.callback()
            except Exception as e:
                logger.error(f"{self.name} callback failed: {str(e)}", exc_info=True)

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.debug(f"{self.name} stopped")
