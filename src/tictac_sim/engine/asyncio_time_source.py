"""Real time source running on an asyncio event loop."""

import asyncio
from typing import Callable, Optional

from .time_source import ScheduledAction, TimeSource
from ..utils.logging_config import get_game_logger

logger = get_game_logger(__name__)


class AsyncioScheduledAction(ScheduledAction):
    """Action invoked by the event loop with call_later.
    
    The callback runs on the loop's thread, so it is serialized with every other
    callback and task on that loop.
    """
    
    def __init__(self, loop: asyncio.AbstractEventLoop, action: Callable[[], None], delay: float):
        if delay < 0:
            raise ValueError(f"Delay can't be negative, got {delay}")
        self._loop = loop
        self._action = action
        self._delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._start_time = loop.time()
        self.restart()
    
    @property
    def delay(self) -> float:
        return self._delay
    
    @property
    def time_remaining(self) -> float:
        if self._handle is None:
            return 0.0
        return (self._start_time + self._delay) - self._loop.time()
    
    @property
    def is_pending(self) -> bool:
        return self._handle is not None
    
    def cancel(self) -> None:
        if self._handle is None:
            return  # Already invoked or canceled
        self._handle.cancel()
        self._handle = None
    
    def restart(self) -> None:
        self.cancel()
        self._start_time = self._loop.time()
        self._handle = self._loop.call_later(self._delay, self._invoke)
    
    def _invoke(self) -> None:
        self._handle = None
        logger.debug(f"Scheduled action fired after {self._delay}s")
        self._action()


class AsyncioTimeSource(TimeSource):
    """Time source backed by an asyncio event loop's monotonic clock.
    
    Must be created and used on the loop's thread. Without a loop argument the
    running loop is used.
    """
    
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop or asyncio.get_running_loop()
    
    @property
    def current_time(self) -> float:
        return self._loop.time()
    
    def schedule(self, action: Callable[[], None], delay: float) -> AsyncioScheduledAction:
        return AsyncioScheduledAction(self._loop, action, delay)
