"""In-memory persistence callback"""

import threading
from collections import deque
from typing import Deque, List, Optional

from stability_log.core.log_entry import LogEntry
from stability_log.core.log_level import LogLevel


class MemoryStore:
    """
    Keep delivered entries in memory.

    Pass an instance as the logger's store callback. Each stored entry
    gets the next sequential id. With ``max_entries`` set, the oldest
    entries are discarded once the limit is reached.

    Thread Safety:
        All methods are thread-safe.
    """

    def __init__(self, max_entries: Optional[int] = None):
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self._entries: Deque[LogEntry] = deque(maxlen=max_entries)
        self._next_id = 1
        self._lock = threading.Lock()

    def __call__(self, entry: LogEntry) -> None:
        self.store(entry)

    def store(self, entry: LogEntry) -> LogEntry:
        """Number the entry and keep it. Returns the stored copy."""
        with self._lock:
            stored = entry.with_id(self._next_id)
            self._next_id += 1
            self._entries.append(stored)
        return stored

    def entries(self) -> List[LogEntry]:
        """Stored entries, oldest first."""
        with self._lock:
            return list(self._entries)

    def by_level(self, level: LogLevel) -> List[LogEntry]:
        """Stored entries at exactly ``level``."""
        return [e for e in self.entries() if e.level == level]

    def clear(self) -> None:
        """Drop all entries. Ids keep counting."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"MemoryStore(entries={len(self)}, max_entries={self.max_entries})"
