"""
Main Logger class - level-gated logger with a single delivery worker
"""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Callable, Optional, Tuple, Union
import atexit
import queue
import sys
import threading

from stability_log.core.log_level import LogLevel, meets_threshold
from stability_log.core.log_entry import LogEntry
from stability_log.core.loggable import is_loggable, log_detail
from stability_log.core.logger_config import DisplayPreferences, LoggerConfig, StoreCallback
from stability_log.core.module_resolver import ModuleResolver
from stability_log.formatters.base_formatter import BaseFormatter
from stability_log.formatters.console_formatter import ConsoleFormatter
from stability_log.writers.console_writer import ConsoleWriter

ErrorHandler = Callable[[LogEntry, Exception], None]

_CONFIG_FIELDS = (
    "enabled",
    "level",
    "show_date",
    "show_file_info",
    "date_format",
    "store_callback",
)


def _default_error_handler(entry: LogEntry, exc: Exception) -> None:
    print(f"Store callback error: {exc} (entry {entry.uuid})", file=sys.stderr)


class Logger:
    """
    Logger with a single serialized delivery worker.

    Level methods check the enabled flag and the level threshold on the
    calling thread, build the entry there, and put it on one FIFO queue.
    A single worker thread takes entries off the queue in order, hands
    each to the store callback and then writes it to the console.
    Entries reach the store callback and the console in the order they
    were submitted, whatever thread submitted them.

    Configuration can be changed from any thread at any time. A change
    applies to calls that have not yet passed their gate check; entries
    already queued are formatted with the display settings current when
    the worker reaches them.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        console: Optional[ConsoleWriter] = None,
        formatter: Optional[BaseFormatter] = None,
        error_handler: Optional[ErrorHandler] = None,
        source_path: Optional[str] = None,
    ):
        """
        Initialize logger.

        Args:
            config: Initial configuration (default: LoggerConfig.default())
            console: Console sink (default: ConsoleWriter on stdout)
            formatter: Console formatter (default: ConsoleFormatter)
            error_handler: Receives (entry, exception) when the store
                           callback raises (default: report on stderr)
            source_path: Path module names are resolved against
                         (default: this file)
        """
        self._config = replace(config) if config else LoggerConfig.default()
        self._config_lock = threading.Lock()
        self._console = console or ConsoleWriter(colored=self._config.colored_output)
        self._formatter = formatter or ConsoleFormatter()
        self._error_handler = error_handler or _default_error_handler
        self._resolver = ModuleResolver(source_path or __file__)

        self._running = False
        self._log_queue: Optional[queue.Queue] = None
        self._worker_thread: Optional[threading.Thread] = None
        self._delivery_lock = threading.Lock()
        self._submit_lock = threading.Lock()
        self._metrics_lock = threading.Lock()
        self._metrics = {
            "logged": 0,
            "filtered": 0,
            "processed": 0,
            "dropped": 0,
            "store_errors": 0,
            "writer_errors": 0,
        }
        self._closed = False

        if self._config.async_mode:
            self._start_async_worker()

        atexit.register(self.shutdown)

    def _start_async_worker(self):
        """Start async worker thread."""
        self._log_queue = queue.Queue()
        self._running = True
        self._worker_thread = threading.Thread(
            target=self._process_queue,
            name=f"{self._config.name}-log-worker",
            daemon=True
        )
        self._worker_thread.start()

    def _process_queue(self):
        """Deliver entries from the queue one at a time (worker thread)."""
        timeout = self._config.poll_interval_ms / 1000.0

        while self._running or not self._log_queue.empty():
            try:
                entry = self._log_queue.get(timeout=timeout)
            except queue.Empty:
                continue

            try:
                self._deliver(entry)
            finally:
                # Always mark task as done to prevent queue.join() deadlock
                self._log_queue.task_done()

    def _deliver(self, entry: LogEntry):
        """Store then print one entry. Errors are isolated per entry."""
        with self._config_lock:
            store_callback = self._config.store_callback
            prefs = self._config.display_preferences()

        if store_callback is not None:
            try:
                store_callback(entry)
            except Exception as e:
                self._count("store_errors")
                self._report(entry, e)

        try:
            self._console.write(self._formatter.format(entry, prefs), entry.level)
        except Exception as e:
            self._count("writer_errors")
            print(f"Writer error: {e}", file=sys.stderr)

        self._count("processed")

    def _report(self, entry: LogEntry, error: Exception):
        try:
            self._error_handler(entry, error)
        except Exception as e:
            print(f"Error handler failed: {e}", file=sys.stderr)

    def _count(self, key: str, amount: int = 1):
        with self._metrics_lock:
            self._metrics[key] += amount

    def _passes_gate(self, level: LogLevel) -> bool:
        with self._config_lock:
            return self._config.enabled and meets_threshold(level, self._config.level)

    def _submit(self, entry: LogEntry):
        # The closed check and the put must not interleave with shutdown()
        with self._submit_lock:
            if self._closed:
                self._count("dropped")
                return

            self._count("logged")
            if self._config.async_mode:
                self._log_queue.put(entry)
                return

        with self._delivery_lock:
            self._deliver(entry)

    def _handle_log(
        self,
        items: Tuple[Any, ...],
        level: LogLevel,
        file: Optional[str],
        function: Optional[str],
        line: Optional[int],
    ):
        content = "\n".join(log_detail(item) for item in items)
        entry = LogEntry.create(
            content,
            level=level,
            module=self._resolver.resolve(file),
            file=file,
            function=function,
            line=line,
        )
        self._submit(entry)

    def log(
        self,
        level: Union[LogLevel, str, int],
        *items: Any,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: Optional[int] = None,
        _depth: int = 1,
    ) -> None:
        """
        Log items at ``level``.

        Items are joined with newlines using their ``log_detail``. When
        none of ``file``, ``function`` and ``line`` is given they are
        taken from the caller's frame. ``level`` may also be a level name
        or rank; an unrecognized level drops the call.
        """
        level = _coerce_level(level)
        if level is None or not self._passes_gate(level):
            self._count("filtered")
            return

        if file is None and function is None and line is None:
            file, function, line = _caller_site(_depth)

        self._handle_log(items, level, file, function, line)

    def verbose(self, *items: Any, file: Optional[str] = None,
                function: Optional[str] = None, line: Optional[int] = None) -> None:
        """Log verbose message."""
        self.log(LogLevel.VERBOSE, *items, file=file, function=function, line=line, _depth=2)

    def info(self, *items: Any, file: Optional[str] = None,
             function: Optional[str] = None, line: Optional[int] = None) -> None:
        """Log info message."""
        self.log(LogLevel.INFO, *items, file=file, function=function, line=line, _depth=2)

    def warning(self, *items: Any, file: Optional[str] = None,
                function: Optional[str] = None, line: Optional[int] = None) -> None:
        """Log warning message."""
        self.log(LogLevel.WARNING, *items, file=file, function=function, line=line, _depth=2)

    def error(self, *items: Any, file: Optional[str] = None,
              function: Optional[str] = None, line: Optional[int] = None) -> None:
        """Log error message."""
        self.log(LogLevel.ERROR, *items, file=file, function=function, line=line, _depth=2)

    def print(self, *items: Any) -> None:
        """
        Drop-in for print().

        If every item is loggable and logging is enabled, the items are
        logged at ERROR with no call-site information. Anything else is
        written to the console stream unformatted, right away.
        """
        with self._config_lock:
            enabled = self._config.enabled

        # ERROR is the top rank, so only the enabled flag can stop it
        if enabled and all(is_loggable(item) for item in items):
            self._handle_log(items, LogLevel.ERROR, None, None, None)
        else:
            self._console.write_raw(*items)

    # Configuration

    def configure(self, **changes: Any) -> None:
        """
        Change several settings at once.

        Accepts enabled, level, show_date, show_file_info, date_format
        and store_callback.

        Raises:
            TypeError: On an unknown setting name
        """
        unknown = set(changes) - set(_CONFIG_FIELDS)
        if unknown:
            raise TypeError(f"Unknown logger settings: {', '.join(sorted(unknown))}")

        with self._config_lock:
            self._config = replace(self._config, **changes)

    def _get(self, name: str) -> Any:
        with self._config_lock:
            return getattr(self._config, name)

    @property
    def enabled(self) -> bool:
        return self._get("enabled")

    @enabled.setter
    def enabled(self, value: bool):
        self.configure(enabled=value)

    @property
    def level(self) -> LogLevel:
        return self._get("level")

    @level.setter
    def level(self, value: LogLevel):
        self.configure(level=value)

    @property
    def show_date(self) -> bool:
        return self._get("show_date")

    @show_date.setter
    def show_date(self, value: bool):
        self.configure(show_date=value)

    @property
    def show_file_info(self) -> bool:
        return self._get("show_file_info")

    @show_file_info.setter
    def show_file_info(self, value: bool):
        self.configure(show_file_info=value)

    @property
    def date_format(self) -> str:
        return self._get("date_format")

    @date_format.setter
    def date_format(self, value: str):
        self.configure(date_format=value)

    @property
    def store_callback(self) -> Optional[StoreCallback]:
        return self._get("store_callback")

    @store_callback.setter
    def store_callback(self, value: Optional[StoreCallback]):
        self.configure(store_callback=value)

    def display_preferences(self) -> DisplayPreferences:
        with self._config_lock:
            return self._config.display_preferences()

    # Lifecycle

    def flush(self):
        """Block until every submitted entry has been delivered."""
        if self._config.async_mode and self._log_queue and self._running:
            self._log_queue.join()

        self._console.flush()

        store_callback = self.store_callback
        if hasattr(store_callback, 'flush'):
            store_callback.flush()

    def shutdown(self):
        """
        Deliver what is queued, then stop the worker.

        Waits for the worker to finish every queued entry, however long
        the store callback takes, then closes the store callback if it
        has a ``close`` method.
        """
        with self._submit_lock:
            if self._closed:
                return
            self._closed = True
            self._running = False

        # No more puts can happen; the worker exits once the queue is empty
        if self._worker_thread and self._worker_thread is not threading.current_thread():
            self._worker_thread.join()

        self._console.flush()

        store_callback = self.store_callback
        if hasattr(store_callback, 'close'):
            store_callback.close()

        atexit.unregister(self.shutdown)

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        with self._metrics_lock:
            return self._metrics.copy()

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()

    def __repr__(self) -> str:
        return f"Logger(name='{self._config.name}', level={self.level}, enabled={self.enabled})"


def _caller_site(depth: int) -> Tuple[Optional[str], Optional[str], Optional[int]]:
    """Return (file, function, line) of the frame ``depth`` levels above the caller."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return None, None, None
    code = frame.f_code
    return code.co_filename, code.co_name, frame.f_lineno


def _coerce_level(level: Any) -> Optional[LogLevel]:
    """Turn a level, level name or rank into a LogLevel, or None."""
    if isinstance(level, LogLevel):
        return level
    try:
        if isinstance(level, str):
            return LogLevel.from_string(level)
        return LogLevel(level)
    except (ValueError, TypeError):
        return None
