"""Logging utilities for tactical pathfinding runs.

Provides color-coded console output so search diagnostics, failures and
results stand apart in the demo and in debug traces.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Deterministic operations (search, propagation)
    RED = "\033[91m"       # Errors and unreachable goals
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if TACPATH_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("TACPATH_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_deterministic(message: str) -> None:
    """Log a deterministic operation (blue)."""
    print(colored(f"{EMOJI_DETERMINISTIC} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log an error or unreachable outcome (red)."""
    print(colored(f"{EMOJI_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{EMOJI_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{EMOJI_INFO} {message}", Color.CYAN))


# Markers for operation types (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"  # Deterministic operation
EMOJI_ERROR = "[!]"          # Error/unreachable
EMOJI_SUCCESS = "[✓]"        # Success
EMOJI_INFO = "[i]"           # Information
