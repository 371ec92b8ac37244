"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import Optional

from stability_log.core.log_entry import LogEntry
from stability_log.core.logger_config import DisplayPreferences


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into formatted strings.
    """

    @abstractmethod
    def format(self, entry: LogEntry, prefs: Optional[DisplayPreferences] = None) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format
            prefs: Display preferences in effect at emission time;
                   formatters that have no display options ignore it

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def __call__(self, entry: LogEntry, prefs: Optional[DisplayPreferences] = None) -> str:
        """Allow formatters to be callable."""
        return self.format(entry, prefs)
