"""Event system for round lifecycle notifications."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .round import Round
    from ..models.game.player import Player


class GameEvent(Enum):
    """Things that happen during a round."""
    ROUND_STARTED = "round_started"    # First turn of a new or reset round
    TURN_BEGINS = "turn_begins"
    TURN_ENDS = "turn_ends"            # A player completed a move
    MOVES_UNDONE = "moves_undone"
    TURN_TIMED_OUT = "turn_timed_out"
    ROUND_FINISHED = "round_finished"


@dataclass
class EventContext:
    """Context information for round events."""
    event_type: GameEvent
    player: Optional["Player"] = None  # Player the event is about
    round: Optional["Round"] = None
    additional_data: Dict[str, Any] = field(default_factory=dict)


EventListener = Callable[[EventContext], None]


class GameEventManager:
    """Dispatches round events to registered listeners.
    
    Listeners run synchronously, in registration order, from inside the round
    operation that caused the event. Errors raised by listeners propagate.
    """
    
    def __init__(self):
        self._listeners: Dict[GameEvent, List[EventListener]] = {}
        self.event_history: List[EventContext] = []
        self.record_history = False
    
    def register_listener(self, event: GameEvent, listener: EventListener) -> None:
        """Call listener every time event is triggered."""
        if event not in self._listeners:
            self._listeners[event] = []
        self._listeners[event].append(listener)
    
    def unregister_listener(self, event: GameEvent, listener: EventListener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)
    
    def trigger_event(self, event_context: EventContext) -> int:
        """Trigger an event and return the number of listeners that received it."""
        if self.record_history:
            self.event_history.append(event_context)
        
        listeners = list(self._listeners.get(event_context.event_type, []))
        for listener in listeners:
            listener(event_context)
        return len(listeners)
    
    def get_events(self, event_type: GameEvent) -> List[EventContext]:
        """Recorded events of the given type. Requires record_history."""
        return [e for e in self.event_history if e.event_type == event_type]
