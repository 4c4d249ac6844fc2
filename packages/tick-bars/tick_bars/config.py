"""Bar configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BarsConfig:
    """Immutable configuration for a bar registry.

    Attributes:
        tick_period: Seconds between scheduler ticks. Also the delta assumed
            for the first tick after the scheduler (re)starts.
        label_inset: Pixels between the icon's right edge and the label.
        time_format: ``str.format`` pattern for the remaining-time text.
    """

    tick_period: float = 0.1
    label_inset: int = 5
    time_format: str = "{:.1f}s"

    def __post_init__(self) -> None:
        if self.tick_period <= 0:
            raise ValueError("tick_period must be positive")
