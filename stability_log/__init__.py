"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Stability Log - level-gated logging with ordered asynchronous delivery
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from stability_log.core.logger import Logger
from stability_log.core.logger_builder import LoggerBuilder
from stability_log.core.log_entry import LogEntry
from stability_log.core.log_level import LogLevel
from stability_log.core.logger_config import LoggerConfig, DisplayPreferences
from stability_log.core.loggable import Loggable

# Import submodules (not all classes by default)
from stability_log import formatters
from stability_log import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "DisplayPreferences",
    "Loggable",
    "formatters",
    "writers",
]
