"""Console writer with optional ANSI colors"""

import sys
from typing import Optional, TextIO

from stability_log.core.log_level import LogLevel


class ConsoleWriter:
    """Write formatted log text to a console stream."""

    def __init__(self, colored: bool = False, stream: Optional[TextIO] = None):
        """
        Initialize console writer.

        Args:
            colored: Wrap each record in its level's ANSI color code
            stream: Output stream (default: sys.stdout at write time)
        """
        self.colored = colored
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def write(self, text: str, level: Optional[LogLevel] = None):
        """Write one formatted record followed by a newline."""
        if self.colored and level is not None:
            text = f"{level.color_code}{text}{level.reset_code}"

        self.stream.write(text + "\n")
        self.stream.flush()

    def write_raw(self, *args):
        """Write unformatted values the way print() would."""
        print(*args, file=self.stream, flush=True)

    def flush(self):
        """Flush stream."""
        self.stream.flush()
