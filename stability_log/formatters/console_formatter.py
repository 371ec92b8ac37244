"""
Console formatter

Renders the multi-line, human-readable console form of an entry:

    ❌[2024-01-04 10:00:00] File.py.load[42]: 
    **********Network**********
    request failed
"""

from typing import Optional

from stability_log.core.log_entry import LogEntry
from stability_log.core.logger_config import DisplayPreferences
from stability_log.formatters.base_formatter import BaseFormatter

NO_FILE_INFO = "System print"
NO_MODULE = "SYSTEM"
MODULE_BANNER = "**********"


class ConsoleFormatter(BaseFormatter):
    """
    Format log entries for the console.

    Output depends only on the entry and the preferences passed in, so
    formatting the same entry twice with the same preferences gives the
    same string. Timestamps are converted to the local time zone when
    formatted, not when the entry was created.
    """

    def format(self, entry: LogEntry, prefs: Optional[DisplayPreferences] = None) -> str:
        """
        Format log entry for console output.

        Args:
            entry: Log entry to format
            prefs: Display preferences (default: DisplayPreferences())

        Returns:
            Formatted string
        """
        prefs = prefs or DisplayPreferences()

        parts = [entry.level.glyph]

        if prefs.show_date:
            parts.append(f"[{self.format_timestamp(entry, prefs)}]")

        if prefs.show_file_info:
            parts.append(f" {entry.file_info or NO_FILE_INFO}")

        parts.append(f": \n{MODULE_BANNER}{entry.module_name or NO_MODULE}{MODULE_BANNER}\n")
        parts.append(entry.content)

        return "".join(parts)

    @staticmethod
    def format_timestamp(entry: LogEntry, prefs: DisplayPreferences) -> str:
        """Render the entry timestamp in the preferred zone and format."""
        return entry.timestamp.astimezone(prefs.tz).strftime(prefs.date_format)

    def __repr__(self) -> str:
        """String representation."""
        return "ConsoleFormatter()"
