"""Shared style and constants for the tangent line visualization."""

# ---------------------------------------------------------------------------
# Window and coordinate settings
# ---------------------------------------------------------------------------

WINDOW_TITLE = "Tangent Line Visualization"
WIDTH = 800
HEIGHT = 800
DPI = 100

SCALE = 45  # Pixels per model unit
GRID_EXTENT = 20  # Grid lines at every integer in [-20, 20]
SAMPLE_STEP = 0.02
TANGENT_HALF_LENGTH = 4.0  # Model units either side of the tangency point
POINT_RADIUS = 4  # Pixels

# ---------------------------------------------------------------------------
# Light theme style (RGB or RGBA, 0-255)
# ---------------------------------------------------------------------------

STYLE = {
    "bg": (255, 255, 255),  # Window background
    "grid": (230, 230, 230),  # Light grid lines
    "tick": (128, 128, 128),  # Tick labels
    "axis": (0, 0, 0),  # Bold axes through the origin
    "text": (0, 0, 0),  # Legend text
    "blue": (0, 0, 255),  # Curve 1, right tangent
    "red": (220, 0, 0),  # Curve 2, left tangent
    "green": (0, 200, 0),  # Spiral, reference segment
    "panel": (255, 255, 255, 220),  # Translucent legend panel
}

FONT_FAMILY = "sans-serif"
