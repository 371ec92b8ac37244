"""Writers module - console sink and ready-made store callbacks"""

from stability_log.writers.console_writer import ConsoleWriter
from stability_log.writers.file_store import FileStore
from stability_log.writers.memory_store import MemoryStore

__all__ = ["ConsoleWriter", "FileStore", "MemoryStore"]
