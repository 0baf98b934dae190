"""Utilities for TicTac Sim."""

from .logging_config import setup_logging, get_logger, get_game_logger
from .settings import RoundSettings

__all__ = ["setup_logging", "get_logger", "get_game_logger", "RoundSettings"]
