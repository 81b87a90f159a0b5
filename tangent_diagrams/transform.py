"""Model space to pixel space mapping."""

from dataclasses import dataclass

import numpy as np

from ._common import SCALE


@dataclass(frozen=True)
class Viewport:
    """Visible drawing area and the fixed pixels-per-unit scale.

    Model y grows upward while pixel rows grow downward, so the y axis is
    flipped about the center row.
    """

    width: int
    height: int
    scale: float = SCALE

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"viewport size must be non-negative, got {self.width}x{self.height}")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    @classmethod
    def from_size(cls, width, height):
        return cls(int(width), int(height))

    @property
    def cx(self):
        return self.width // 2

    @property
    def cy(self):
        return self.height // 2

    def to_pixel(self, x, y):
        """Map one model point to (px, py)."""
        return (self.cx + x * self.scale, self.cy - y * self.scale)

    def to_pixels(self, xs, ys):
        """Map arrays of model coordinates to arrays of pixel coordinates."""
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        return self.cx + xs * self.scale, self.cy - ys * self.scale

    def to_pixel_int(self, x, y):
        """Map a model point to whole pixels, truncating toward zero."""
        return (self.cx + int(x * self.scale), self.cy - int(y * self.scale))
