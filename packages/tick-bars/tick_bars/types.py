"""Shared type aliases and errors for timer bars."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Hashable

BarId = Hashable

if TYPE_CHECKING:
    from tick_bars.bar import Bar

BarHandler = Callable[[Any, "Bar"], None]
"""Callback signature: ``handler(context, bar)``."""


class TemplateError(LookupError):
    """Raised when a loaded bar form lacks a required child window."""

    def __init__(self, element: str) -> None:
        self.element = element
        super().__init__(f"Bar template has no child window named {element!r}")
