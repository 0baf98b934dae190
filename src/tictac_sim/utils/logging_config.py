"""Logging configuration for TicTac Sim."""

import logging
import sys


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Set up logging configuration for the entire application.
    
    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_style: Format style - "simple", "detailed", or "json"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    
    formats = {
        "simple": "%(name)s - %(levelname)s - %(message)s",
        "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
        "json": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    }
    
    log_format = formats.get(format_style, formats["simple"])
    
    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    
    # The asyncio time source logs through asyncio's own logger
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.
    
    Args:
        name: Logger name (typically __name__ from the calling module)
        
    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for game modules.
    
    Args:
        module_name: Full module name (e.g., 'tictac_sim.engine.round')
        
    Returns:
        Logger with shortened name (e.g., 'engine.round')
    """
    if module_name.startswith('tictac_sim.'):
        short_name = module_name[len('tictac_sim.'):]
    else:
        short_name = module_name
    
    return logging.getLogger(short_name)
