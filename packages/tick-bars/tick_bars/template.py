"""Declarative form tree every bar is loaded from."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Window classes a WindowSystem must be able to build.
WINDOW = "Window"
PROGRESS_BAR = "ProgressBar"

# Child names looked up by Bar after loading.
FRAME = "BarTemplate"
ICON = "Icon"
LABEL = "Label"
DURATION = "Duration"
PROGRESS = "ProgressBar"


@dataclass(frozen=True)
class FormDef:
    """One node of a window tree.

    ``anchor_points`` are fractions of the parent's size (left, top, right,
    bottom); ``anchor_offsets`` are pixel offsets added to those points.
    """

    name: str
    kind: str = WINDOW
    anchor_points: tuple[float, float, float, float] = (0, 0, 0, 0)
    anchor_offsets: tuple[int, int, int, int] = (0, 0, 0, 0)
    props: dict[str, Any] = field(default_factory=dict)
    children: tuple[FormDef, ...] = ()


BAR_TEMPLATE = FormDef(
    name=FRAME,
    anchor_offsets=(0, 0, 400, 25),
    props={"bg_color": "xkcdBlack", "sprite": "BasicSprites:WhiteFill"},
    children=(
        FormDef(
            name=ICON,
            anchor_offsets=(0, 0, 0, 25),
            props={"keep_aspect": True, "depth": 1},
        ),
        FormDef(
            name=LABEL,
            anchor_points=(0, 0, 1, 1),
            anchor_offsets=(5, 0, 0, 0),
            props={"bg_color": "UI_WindowBGDefault", "valign": "center", "depth": 1},
        ),
        FormDef(
            name=DURATION,
            anchor_points=(0, 0, 1, 1),
            anchor_offsets=(0, 0, -5, 0),
            props={"align": "right", "valign": "center", "depth": 1},
        ),
        FormDef(
            name=PROGRESS,
            kind=PROGRESS_BAR,
            anchor_points=(0, 0, 1, 1),
            props={"bar_color": "blue", "full_sprite": "BasicSprites:WhiteFill"},
        ),
    ),
)
