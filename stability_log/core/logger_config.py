"""
Logger configuration management
"""

from dataclasses import dataclass
from datetime import tzinfo
from typing import Callable, Optional

from stability_log.core.log_level import LogLevel
from stability_log.core.log_entry import LogEntry

StoreCallback = Callable[[LogEntry], None]

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class DisplayPreferences:
    """
    Display settings read by the console formatter.

    ``tz`` of None means the process's local time zone at format time.
    """

    show_date: bool = True
    show_file_info: bool = True
    date_format: str = DEFAULT_DATE_FORMAT
    tz: Optional[tzinfo] = None


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    A Logger copies these values at construction; later changes go
    through the Logger's own setters.
    """

    # Basic settings
    name: str = "stability"
    enabled: bool = True
    level: LogLevel = LogLevel.WARNING

    # Display settings
    show_date: bool = True
    show_file_info: bool = True
    date_format: str = DEFAULT_DATE_FORMAT
    colored_output: bool = False

    # Persistence
    store_callback: Optional[StoreCallback] = None

    # Delivery settings
    async_mode: bool = True
    poll_interval_ms: int = 100

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            self.level = LogLevel.from_string(self.level)
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")
        if not self.date_format:
            raise ValueError("date_format cannot be empty")
        if self.store_callback is not None and not callable(self.store_callback):
            raise TypeError("store_callback must be callable")

    def display_preferences(self) -> DisplayPreferences:
        """Snapshot the display settings for the formatter."""
        return DisplayPreferences(
            show_date=self.show_date,
            show_file_info=self.show_file_info,
            date_format=self.date_format,
        )

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=LogLevel.VERBOSE,
            colored_output=True,
            async_mode=False,  # Synchronous for debugging
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.ERROR,
            show_file_info=False,
            async_mode=True,
        )
