"""
Logging configuration for dice-algebra.

Provides centralized logging setup with consistent formatting, levels, and color-coded output.
Log records go to stderr so that stdout only carries roll output.
"""

import logging
import sys
from typing import Optional
from colorama import Fore, Back, Style, init

# Initialize colorama for cross-platform color support
init(autoreset=True)


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter that adds color to log output based on level.

    Colors:
    - DEBUG: Cyan
    - INFO: Green
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Red on white background
    """

    COLORS = {
        'DEBUG': Fore.CYAN,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED + Back.WHITE + Style.BRIGHT,
    }

    def format(self, record):
        """Format log record with a colored level name."""
        color = self.COLORS.get(record.levelname, '')

        original_levelname = record.levelname
        record.levelname = f"{color}{record.levelname}{Style.RESET_ALL}"

        formatted = super().format(record)

        # Restore original levelname (important for other handlers)
        record.levelname = original_levelname

        return formatted


def setup_logging(
    level: str = 'WARNING',
    format_string: Optional[str] = None,
    use_colors: bool = True
) -> logging.Logger:
    """
    Configure logging for dice-algebra with color-coded output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Optional custom format string
        use_colors: Whether to use colored output (default: True)

    Returns:
        Configured root logger

    Example:
        logger = setup_logging(level='DEBUG')
        logger.debug("Tokenized '2d6' into 3 tokens")  # Cyan
    """
    if format_string is None:
        format_string = '%(asctime)s - %(levelname)s - %(name)s - %(message)s'

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, level.upper()))

    if use_colors:
        console_handler.setFormatter(ColoredFormatter(format_string))
    else:
        console_handler.setFormatter(logging.Formatter(format_string))

    logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


__all__ = ['setup_logging', 'get_logger', 'ColoredFormatter']
