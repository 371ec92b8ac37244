"""
Loggable capability

Anything with a ``log_detail`` string can be passed to the logger.
Strings are their own detail.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Loggable(Protocol):
    """Object that knows how it should appear in a log line."""

    @property
    def log_detail(self) -> str:
        ...


def is_loggable(item: Any) -> bool:
    """Return True if ``item`` is a string or exposes ``log_detail``."""
    if isinstance(item, str):
        return True
    return isinstance(getattr(item, "log_detail", None), str)


def log_detail(item: Any) -> str:
    """
    Get the display text for an item.

    Non-loggable values fall back to ``str(item)`` so a logging call
    never raises on odd input.
    """
    if isinstance(item, str):
        return item
    detail = getattr(item, "log_detail", None)
    if isinstance(detail, str):
        return detail
    return str(item)
