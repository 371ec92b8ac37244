"""
JSON formatter for structured logging

Formats log entries as JSON objects, one per line
"""

import json
from typing import Optional

from stability_log.core.log_entry import LogEntry
from stability_log.core.logger_config import DisplayPreferences
from stability_log.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Produces the serialized form used by FileStore; the output can be
    read back with ``LogEntry.from_dict(json.loads(line))``.
    """

    def __init__(
        self,
        include_file_info: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_file_info: Include the derived file_info field
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_file_info = include_file_info
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry, prefs: Optional[DisplayPreferences] = None) -> str:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format
            prefs: Unused, JSON output is not affected by display settings

        Returns:
            JSON string
        """
        log_dict = entry.to_dict()

        if not self.include_file_info:
            log_dict.pop("file_info", None)

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
