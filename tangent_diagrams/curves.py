"""Parametric curves, tangent lines, and point markers in model space."""

from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from ._common import POINT_RADIUS, SAMPLE_STEP, TANGENT_HALF_LENGTH

# Fraction of a step allowed past t_end so an exact final multiple is kept
_STEP_TOLERANCE = 1e-9


@dataclass(frozen=True)
class ParametricCurve:
    """(x(t), y(t)) over [t_start, t_end], stroked solid."""

    x_func: Callable
    y_func: Callable
    t_start: float
    t_end: float
    color: tuple
    label: str = ""
    step: float = SAMPLE_STEP
    line_width: float = 2.0

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"sampling step must be positive, got {self.step}")


@dataclass(frozen=True)
class TangentLine:
    """Dashed segment through (x0, y0) with the given slope."""

    x0: float
    y0: float
    slope: float
    color: tuple
    half_length: float = TANGENT_HALF_LENGTH

    def endpoints(self):
        """Model-space endpoints half_length to either side of x0."""
        h = self.half_length
        return (
            (self.x0 - h, self.y0 - self.slope * h),
            (self.x0 + h, self.y0 + self.slope * h),
        )


@dataclass(frozen=True)
class PointMarker:
    x: float
    y: float
    color: tuple
    radius: float = POINT_RADIUS


@dataclass(frozen=True)
class LegendEntry:
    """Legend line; entries without a color are drawn as plain text."""

    label: str
    color: Optional[tuple] = None


def sample_parameters(t_start, t_end, step=SAMPLE_STEP):
    """Return t_start, t_start + step, ... up to and including t_end."""
    if step <= 0:
        raise ValueError(f"sampling step must be positive, got {step}")
    if t_start > t_end:
        return np.empty(0)
    count = int(np.floor((t_end - t_start) / step + _STEP_TOLERANCE)) + 1
    return t_start + step * np.arange(count)


def sample_curve(curve):
    """Evaluate a curve at its fixed step, returning model (xs, ys) arrays."""
    t = sample_parameters(curve.t_start, curve.t_end, curve.step)
    if t.size == 0:
        return np.empty(0), np.empty(0)
    xs = np.broadcast_to(np.asarray(curve.x_func(t), dtype=float), t.shape)
    ys = np.broadcast_to(np.asarray(curve.y_func(t), dtype=float), t.shape)
    return xs, ys


def sample_curve_pixels(curve, viewport):
    """Sample a curve and map every point to pixel space."""
    xs, ys = sample_curve(curve)
    return viewport.to_pixels(xs, ys)
