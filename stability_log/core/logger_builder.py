"""Logger builder pattern"""

from typing import Optional, TextIO, Union
from pathlib import Path

from stability_log.core.logger import Logger, ErrorHandler
from stability_log.core.logger_config import LoggerConfig, StoreCallback
from stability_log.core.log_level import LogLevel
from stability_log.writers.console_writer import ConsoleWriter
from stability_log.writers.file_store import FileStore
from stability_log.writers.memory_store import MemoryStore


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._stream: Optional[TextIO] = None
        self._error_handler: Optional[ErrorHandler] = None
        self._source_path: Optional[str] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        if isinstance(level, str):
            level = LogLevel.from_string(level)
        self._config.level = level
        return self

    def with_enabled(self, enabled: bool = True) -> "LoggerBuilder":
        """Turn all logging on or off."""
        self._config.enabled = enabled
        return self

    def with_date(self, show: bool = True, date_format: Optional[str] = None) -> "LoggerBuilder":
        """
        Control the timestamp shown on console lines.

        Args:
            show: Show the timestamp
            date_format: strftime format (default: "%Y-%m-%d %H:%M:%S")

        Returns:
            Self for method chaining
        """
        self._config.show_date = show
        if date_format:
            self._config.date_format = date_format
        return self

    def with_file_info(self, show: bool = True) -> "LoggerBuilder":
        """Show or hide the file.function[line] part of console lines."""
        self._config.show_file_info = show
        return self

    def with_async(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable async mode."""
        self._config.async_mode = enabled
        return self

    def with_console(self, colored: bool = False, stream: Optional[TextIO] = None) -> "LoggerBuilder":
        """
        Configure console output.

        Args:
            colored: Wrap records in ANSI level colors
            stream: Output stream (default: sys.stdout)

        Returns:
            Self for method chaining
        """
        self._config.colored_output = colored
        self._stream = stream
        return self

    def with_store(self, callback: StoreCallback) -> "LoggerBuilder":
        """
        Set the store callback.

        The callback receives every delivered entry on the worker thread,
        in delivery order.

        Example:
            store = MemoryStore()
            logger = (LoggerBuilder()
                .with_store(store)
                .build())
        """
        if not callable(callback):
            raise TypeError("store callback must be callable")
        self._config.store_callback = callback
        return self

    def with_memory_store(self, max_entries: Optional[int] = None) -> "LoggerBuilder":
        """Store entries in a new MemoryStore."""
        return self.with_store(MemoryStore(max_entries=max_entries))

    def with_file_store(self, filepath: Union[str, Path]) -> "LoggerBuilder":
        """Store entries as JSON lines in ``filepath``."""
        return self.with_store(FileStore(filepath))

    def with_error_handler(self, handler: ErrorHandler) -> "LoggerBuilder":
        """Receive (entry, exception) whenever the store callback raises."""
        self._error_handler = handler
        return self

    def with_source_path(self, path: str) -> "LoggerBuilder":
        """Resolve module names against ``path`` instead of the logger's own file."""
        self._source_path = path
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        config = LoggerConfig(**vars(self._config))
        console = ConsoleWriter(colored=config.colored_output, stream=self._stream)

        return Logger(
            config,
            console=console,
            error_handler=self._error_handler,
            source_path=self._source_path,
        )
