"""
Module name resolution

Guesses which consumer package logged a line by comparing the call-site
path with the logger's own source path.
"""

from typing import Optional

UNKNOWN_MODULE = "Unknown Module"


def resolve_module_name(caller_path: Optional[str], logger_path: str) -> Optional[str]:
    """
    Infer a module name from a caller file path.

    Walks the ``/``-separated segments of ``caller_path`` and returns the
    first one that does not occur anywhere in ``logger_path``. Occurrence
    is plain substring containment, so a segment such as ``"log"`` is
    swallowed by a logger living under ``.../logging/...``; this is a
    heuristic and is kept that way.

    Args:
        caller_path: Path of the file that issued the log call
        logger_path: Path of the logger's own source file

    Returns:
        The module name, UNKNOWN_MODULE if every segment is shared with
        the logger path, or None if no caller path was given

    Example:
        >>> resolve_module_name("/a/b/Feature/File.py", "/a/b/Logger.py")
        'Feature'
    """
    if caller_path is None:
        return None

    for segment in caller_path.split("/"):
        if segment and segment not in logger_path:
            return segment

    return UNKNOWN_MODULE


class ModuleResolver:
    """Resolver bound to a fixed logger source path."""

    def __init__(self, logger_path: str):
        self.logger_path = logger_path

    def resolve(self, caller_path: Optional[str]) -> Optional[str]:
        return resolve_module_name(caller_path, self.logger_path)

    def __call__(self, caller_path: Optional[str]) -> Optional[str]:
        return self.resolve(caller_path)

    def __repr__(self) -> str:
        return f"ModuleResolver(logger_path='{self.logger_path}')"
