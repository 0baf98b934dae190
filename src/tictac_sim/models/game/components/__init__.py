"""Grid components package."""

from .move_history import MoveHistoryComponent
from .formation_checker import FormationCheckerComponent

__all__ = [
    'MoveHistoryComponent',
    'FormationCheckerComponent'
]
