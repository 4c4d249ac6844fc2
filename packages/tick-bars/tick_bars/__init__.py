"""tick-bars - Timer bars driven by one shared recurring tick."""
from __future__ import annotations

from tick_bars.bar import Bar
from tick_bars.config import BarsConfig
from tick_bars.events import FINISH, UPDATE, BarEvents
from tick_bars.headless import HeadlessWindowSystem
from tick_bars.registry import BarRegistry
from tick_bars.scheduler import BarScheduler
from tick_bars.template import BAR_TEMPLATE, FormDef
from tick_bars.types import BarId, TemplateError

__version__ = "0.1.0"

__all__ = [
    "Bar",
    "BarRegistry",
    "BarScheduler",
    "BarsConfig",
    "BarEvents",
    "BarId",
    "UPDATE",
    "FINISH",
    "BAR_TEMPLATE",
    "FormDef",
    "HeadlessWindowSystem",
    "TemplateError",
]
