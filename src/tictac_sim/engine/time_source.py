"""Time abstraction used to limit the duration of turns."""

from abc import ABC, abstractmethod
from typing import Callable


class ScheduledAction(ABC):
    """Action that was scheduled to be invoked after some time."""
    
    @property
    @abstractmethod
    def delay(self) -> float:
        """Seconds that have to pass since the action was scheduled or restarted for it to be invoked."""
        pass
    
    @property
    @abstractmethod
    def time_remaining(self) -> float:
        """Seconds left before the action is invoked.
        
        Zero or less once the action was invoked or canceled.
        """
        pass
    
    @property
    @abstractmethod
    def is_pending(self) -> bool:
        """True while the action is waiting to be invoked."""
        pass
    
    @abstractmethod
    def cancel(self) -> None:
        """Cancel the action so it won't be invoked.
        
        Canceling an action that was already invoked or canceled has no effect.
        """
        pass
    
    @abstractmethod
    def restart(self) -> None:
        """Start waiting for the full delay again and invoke the action once it elapses.
        
        Works in any state: pending, already invoked or canceled.
        """
        pass


class TimeSource(ABC):
    """Tells the current time and schedules actions based on it."""
    
    @property
    @abstractmethod
    def current_time(self) -> float:
        """Current time in seconds."""
        pass
    
    @abstractmethod
    def schedule(self, action: Callable[[], None], delay: float) -> ScheduledAction:
        """Invoke action after delay seconds. The returned action is already running."""
        pass
