"""Engine package for turn coordination and timing."""

from .time_source import TimeSource, ScheduledAction
from .manual_time_source import ManualTimeSource, ManualScheduledAction
from .asyncio_time_source import AsyncioTimeSource, AsyncioScheduledAction
from .event_system import GameEvent, EventContext, GameEventManager
from .round_result import RoundResult, RoundOutcome
from .round_messages import EndOfRoundKind, EndOfRoundMessage, describe_round_outcome
from .round import Round

__all__ = [
    'TimeSource', 'ScheduledAction',
    'ManualTimeSource', 'ManualScheduledAction',
    'AsyncioTimeSource', 'AsyncioScheduledAction',
    'GameEvent', 'EventContext', 'GameEventManager',
    'RoundResult', 'RoundOutcome',
    'EndOfRoundKind', 'EndOfRoundMessage', 'describe_round_outcome',
    'Round',
]
