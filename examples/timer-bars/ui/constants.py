"""Layout constants and color definitions."""

# Timing
FPS = 60

# Layout dimensions
SCREEN_W = 520
SCREEN_H = 420
STATUS_H = 36
BAR_W = 400
BAR_H = 24
BAR_GAP = 6
MARGIN = 20

# Colors
BG_COLOR = (20, 20, 30)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)

# Named colors the bar template and demo refer to.
NAMED_COLORS: dict[str, tuple[int, int, int]] = {
    "xkcdBlack": (10, 10, 14),
    "UI_WindowBGDefault": (0, 0, 0),
    "blue": (60, 110, 230),
    "red": (220, 70, 60),
    "green": (60, 200, 90),
    "yellow": (230, 200, 60),
    "purple": (170, 80, 220),
    "white": (235, 235, 240),
}
FALLBACK_COLOR = (128, 128, 128)

# Icon sprites are drawn as flat swatches.
ICON_COLORS: dict[str, tuple[int, int, int]] = {
    "Icons:Fire": (255, 120, 40),
    "Icons:Frost": (120, 200, 255),
    "Icons:Poison": (110, 220, 80),
}

BAR_COLORS = ["blue", "red", "green", "yellow", "purple"]
