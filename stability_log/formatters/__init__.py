"""
Log formatters module

Provides the console and JSON renderings of log entries.
"""

from stability_log.formatters.base_formatter import BaseFormatter
from stability_log.formatters.console_formatter import ConsoleFormatter
from stability_log.formatters.json_formatter import JSONFormatter

__all__ = [
    "BaseFormatter",
    "ConsoleFormatter",
    "JSONFormatter",
]
