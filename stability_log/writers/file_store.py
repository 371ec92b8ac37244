"""File-backed persistence callback"""

import json
import threading
from pathlib import Path
from typing import List, Optional, Union

from stability_log.core.log_entry import LogEntry
from stability_log.formatters.json_formatter import JSONFormatter


class FileStore:
    """
    Append delivered entries to a JSON-lines file.

    Pass an instance as the logger's store callback. Entries are numbered
    sequentially, continuing from the highest id already in the file.
    """

    def __init__(
        self,
        filepath: Union[str, Path],
        encoding: str = "utf-8",
        formatter: Optional[JSONFormatter] = None
    ):
        """
        Initialize file store.

        Args:
            filepath: Path to the log file, created if missing
            encoding: File encoding (default: 'utf-8')
            formatter: JSON formatter (default: compact JSONFormatter)
        """
        self.filepath = Path(filepath)
        self.encoding = encoding
        self.formatter = formatter or JSONFormatter()
        self._lock = threading.Lock()
        self._file = None
        self._next_id = self._last_id() + 1
        self._open()

    def _last_id(self) -> int:
        if not self.filepath.exists():
            return 0
        return max((e.id for e in self.read_entries(self.filepath, self.encoding)), default=0)

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, "a", encoding=self.encoding)

    def __call__(self, entry: LogEntry) -> None:
        self.store(entry)

    def store(self, entry: LogEntry) -> LogEntry:
        """Number the entry and append it. Returns the stored copy."""
        with self._lock:
            if self._file is None:
                raise ValueError(f"FileStore is closed: {self.filepath}")
            stored = entry.with_id(self._next_id)
            self._next_id += 1
            self._file.write(self.formatter.format(stored) + "\n")
        return stored

    def flush(self):
        """Flush file buffer."""
        with self._lock:
            if self._file:
                self._file.flush()

    def close(self):
        """Close file."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    @classmethod
    def read_entries(cls, filepath: Union[str, Path], encoding: str = "utf-8") -> List[LogEntry]:
        """
        Load entries back from a file written by FileStore.

        Blank lines are skipped; malformed lines raise ValueError.
        """
        entries = []
        with open(filepath, "r", encoding=encoding) as f:
            for lineno, line in enumerate(f, 1):
                line = line.strip()
                if not line:
                    continue
                try:
                    entries.append(LogEntry.from_dict(json.loads(line)))
                except (KeyError, json.JSONDecodeError) as e:
                    raise ValueError(f"{filepath}:{lineno}: invalid log entry: {e}") from e
        return entries

    def __repr__(self) -> str:
        return f"FileStore(filepath='{self.filepath}')"
