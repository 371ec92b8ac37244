"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- ModuleResolver: Module name inference from call-site paths
"""

from stability_log.core.logger import Logger
from stability_log.core.logger_builder import LoggerBuilder
from stability_log.core.log_entry import LogEntry
from stability_log.core.log_level import LogLevel
from stability_log.core.logger_config import LoggerConfig, DisplayPreferences
from stability_log.core.loggable import Loggable, is_loggable, log_detail
from stability_log.core.module_resolver import ModuleResolver, resolve_module_name

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "DisplayPreferences",
    "Loggable",
    "is_loggable",
    "log_detail",
    "ModuleResolver",
    "resolve_module_name",
]
