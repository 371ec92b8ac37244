"""
Log entry data structure

One immutable log event plus the display fields derived from it.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional, Dict, Any
import uuid

from stability_log.core.log_level import LogLevel


def _new_uuid() -> str:
    return str(uuid.uuid4()).upper()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _last_component(path: Optional[str]) -> Optional[str]:
    if path is None:
        return None
    return path.split("/")[-1]


@dataclass(frozen=True)
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log message. Entries are
    frozen; a persistence layer that wants to number them uses
    ``with_id`` to get a numbered copy.

    ``file_info`` is never stored, it is derived from the file, function
    and line fields and is only present when all three are.
    """

    level: LogLevel
    content: str
    module_name: Optional[str] = None
    file_name: Optional[str] = None
    function_name: Optional[str] = None
    line_number: Optional[int] = None
    id: int = 0
    uuid: str = field(default_factory=_new_uuid)
    timestamp: datetime = field(default_factory=_utc_now)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if self.content is None:
            object.__setattr__(self, "content", "")
        elif not isinstance(self.content, str):
            object.__setattr__(self, "content", str(self.content))
        if self.timestamp.tzinfo is None:
            object.__setattr__(self, "timestamp", self.timestamp.astimezone())

    @classmethod
    def create(
        cls,
        content: str,
        level: LogLevel = LogLevel.VERBOSE,
        module: Optional[str] = None,
        file: Optional[str] = None,
        function: Optional[str] = None,
        line: Optional[int] = None,
    ) -> "LogEntry":
        """
        Build an entry from raw call-site data.

        Args:
            content: Message text
            level: Severity
            module: Resolved module name
            file: Full path of the calling file; only the last
                  component is kept
            function: Calling function name
            line: Calling line number

        Returns:
            New LogEntry instance
        """
        return cls(
            level=level,
            content=content,
            module_name=module,
            file_name=_last_component(file),
            function_name=function,
            line_number=line,
        )

    @property
    def file_info(self) -> Optional[str]:
        """``"fileName.functionName[line]"`` or None if any part is missing."""
        if self.file_name is None or self.function_name is None or self.line_number is None:
            return None
        return f"{self.file_name}.{self.function_name}[{self.line_number}]"

    def with_id(self, new_id: int) -> "LogEntry":
        """Return a copy of this entry carrying a storage id."""
        return replace(self, id=new_id)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "id": self.id,
            "uuid": self.uuid,
            "level": self.level.name,
            "module_name": self.module_name,
            "file_name": self.file_name,
            "function_name": self.function_name,
            "line_number": self.line_number,
            "file_info": self.file_info,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LogEntry":
        """
        Create log entry from dictionary.

        ``file_info`` is ignored on input and recomputed.

        Args:
            data: Dictionary with log entry data

        Returns:
            New LogEntry instance
        """
        return cls(
            level=LogLevel[data["level"]],
            content=data["content"],
            module_name=data.get("module_name"),
            file_name=data.get("file_name"),
            function_name=data.get("function_name"),
            line_number=data.get("line_number"),
            id=data.get("id", 0),
            uuid=data.get("uuid") or _new_uuid(),
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )

    def __str__(self) -> str:
        """String representation using the default display preferences."""
        from stability_log.formatters.console_formatter import ConsoleFormatter

        return ConsoleFormatter().format(self)
