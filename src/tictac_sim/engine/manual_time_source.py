"""Virtual clock that only moves forward when told to."""

from typing import Callable, List, Optional

from .time_source import ScheduledAction, TimeSource


class ManualScheduledAction(ScheduledAction):
    """Action scheduled on a ManualTimeSource."""
    
    def __init__(self, time_source: "ManualTimeSource", action: Callable[[], None], delay: float):
        if delay < 0:
            raise ValueError(f"Delay can't be negative, got {delay}")
        self._time_source = time_source
        self._action = action
        self._delay = delay
        self._due_time: Optional[float] = None  # None when not pending
        self.invocation_count = 0
        self.restart()
    
    @property
    def delay(self) -> float:
        return self._delay
    
    @property
    def due_time(self) -> Optional[float]:
        return self._due_time
    
    @property
    def time_remaining(self) -> float:
        if self._due_time is None:
            return 0.0
        return self._due_time - self._time_source.current_time
    
    @property
    def is_pending(self) -> bool:
        return self._due_time is not None
    
    def cancel(self) -> None:
        self._due_time = None
    
    def restart(self) -> None:
        self._due_time = self._time_source.current_time + self._delay
    
    def _invoke(self) -> None:
        self._due_time = None
        self.invocation_count += 1
        self._action()


class ManualTimeSource(TimeSource):
    """Time source for tests and headless simulations.
    
    Time starts at start_time and only changes in advance(). Due actions are
    invoked from advance(), one at a time and in due order, so they never run
    concurrently with anything else.
    """
    
    def __init__(self, start_time: float = 0.0):
        self._current_time = start_time
        self._actions: List[ManualScheduledAction] = []
    
    @property
    def current_time(self) -> float:
        return self._current_time
    
    def schedule(self, action: Callable[[], None], delay: float) -> ManualScheduledAction:
        scheduled = ManualScheduledAction(self, action, delay)
        self._actions.append(scheduled)
        return scheduled
    
    def advance(self, seconds: float) -> int:
        """Move time forward and invoke every action that becomes due.
        
        Actions restarted while they are invoked can become due again within the
        same call.
        
        Returns:
            Number of actions invoked
        """
        if seconds < 0:
            raise ValueError(f"Time can't move backwards, got {seconds}")
        
        target_time = self._current_time + seconds
        invoked = 0
        while True:
            due = [a for a in self._actions if a.is_pending and a.due_time <= target_time]
            if not due:
                break
            next_action = min(due, key=lambda a: a.due_time)
            self._current_time = max(self._current_time, next_action.due_time)
            next_action._invoke()
            invoked += 1
        
        self._current_time = target_time
        return invoked
