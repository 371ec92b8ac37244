"""
Log level enumeration

Severity levels ordered by integer rank, plus the display tokens
used by the console formatter.
"""

from enum import IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Gating compares the integer rank of a level against the
    configured threshold.
    """

    VERBOSE = 0     # Everything, including noisy tracing
    INFO = 1        # Informational messages
    WARNING = 2     # Warning messages
    ERROR = 3       # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        name = LEVEL_ALIASES.get(name, name)
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def rank(self) -> int:
        """Integer rank used for threshold comparison."""
        return int(self)

    def meets_threshold(self, threshold: "LogLevel") -> bool:
        """Check whether this level passes the given threshold."""
        return meets_threshold(self, threshold)

    @property
    def glyph(self) -> str:
        """Glyph printed in front of every console line."""
        return LEVEL_GLYPHS[self]

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.VERBOSE: "\033[37m",   # Light gray
            LogLevel.INFO: "\033[36m",      # Cyan
            LogLevel.WARNING: "\033[33m",   # Yellow
            LogLevel.ERROR: "\033[31m",     # Red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


def rank(level: LogLevel) -> int:
    """Return the integer rank of a level."""
    return int(level)


def meets_threshold(level: LogLevel, threshold: LogLevel) -> bool:
    """Return True when ``level`` is at or above ``threshold``."""
    return rank(level) >= rank(threshold)


LEVEL_GLYPHS: Dict[LogLevel, str] = {
    LogLevel.VERBOSE: "◽️",
    LogLevel.INFO: "🔷",
    LogLevel.WARNING: "⚠️",
    LogLevel.ERROR: "❌",
}

LEVEL_ALIASES: Dict[str, str] = {
    "WARN": "WARNING",
    "TRACE": "VERBOSE",
    "DEBUG": "VERBOSE",
}
