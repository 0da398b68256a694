"""Logging utilities for researchsim.

Provides color-coded console output so rule checks, state changes and
failures are easy to tell apart when tracing a scenario.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    # Colors for operation types
    BLUE = "\033[94m"      # Rule checks (movement, collection)
    RED = "\033[91m"       # Errors and rejected actions
    GREEN = "\033[92m"     # Applied state changes
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
        Colorized text if RESEARCHSIM_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("RESEARCHSIM_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def verbose_enabled() -> bool:
    """True when RESEARCHSIM_VERBOSE (or LOG_LEVEL=DEBUG) asks for per-action trace lines."""
    if os.getenv("LOG_LEVEL", "").upper() == "DEBUG":
        return True
    return os.getenv("RESEARCHSIM_VERBOSE", "").lower() in ("1", "true", "yes")


def log_deterministic(message: str) -> None:
    """Log a rule check (blue)."""
    print(colored(message, Color.BLUE))


def log_error(message: str) -> None:
    """Log an error or rejected action (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log an applied change (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_DETERMINISTIC = "[•]"  # Rule check
LOG_TAG_ERROR = "[!]"          # Error/rejection
LOG_TAG_SUCCESS = "[✓]"        # Applied change
LOG_TAG_INFO = "[i]"           # Information
