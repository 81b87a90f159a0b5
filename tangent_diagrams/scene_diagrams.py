"""The tangent line scene: fixed descriptor plus the draw functions."""

import logging

import numpy as np

from ._common import GRID_EXTENT, STYLE
from .curves import (
    LegendEntry,
    ParametricCurve,
    PointMarker,
    TangentLine,
    sample_curve_pixels,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Scene descriptor
# ---------------------------------------------------------------------------

CURVES = (
    ParametricCurve(
        lambda t: t,
        lambda t: t * t,
        -3.5,
        3.5,
        STYLE["blue"],
        "Curve 1: x=t, y=t^2",
    ),
    ParametricCurve(
        lambda t: -t,
        lambda t: t * t,
        -3.5,
        3.5,
        STYLE["red"],
        "Curve 2: x=-t, y=t^2",
    ),
    ParametricCurve(
        lambda t: t * np.cos(t) / 3.0,
        lambda t: t * np.sin(t) / 3.0,
        -10.0,
        10.0,
        STYLE["green"],
        "Curve 3: x=t*cos(t)/3, y=t*sin(t)/3",
    ),
)

# Points on y = x^2 where the slope is +4 and -4
TANGENTS = (
    TangentLine(2.0, 4.0, 4.0, STYLE["blue"]),
    TangentLine(-2.0, 4.0, -4.0, STYLE["red"]),
)

TANGENT_DASH = (6, 6)
TANGENT_WIDTH = 1.5

REFERENCE_HALF_WIDTH = 100  # Pixels either side of center
REFERENCE_OFFSET = 0.6  # Model units, converted to whole pixels
REFERENCE_DASH = (5, 5)

LEGEND_ORIGIN = (20, 20)
LEGEND_SIZE = (230, 110)
LEGEND_LINE_HEIGHT = 18
LEGEND_SECTION_GAP = 5
LEGEND_SWATCH = (12, 8)


def legend_entries():
    """Legend lines in drawing order: one swatch per curve, then notes."""
    entries = [LegendEntry(curve.label, curve.color) for curve in CURVES]
    entries.append(LegendEntry("Tangent point at t = 2.0"))
    entries.append(LegendEntry("Dashed lines = Tangent lines"))
    return entries


# ---------------------------------------------------------------------------
# Draw functions
# ---------------------------------------------------------------------------


def draw_grid_and_axes(surface, viewport):
    """Light grid and tick labels at every nonzero integer, then bold axes."""
    cx, cy = viewport.cx, viewport.cy
    surface.set_font(10)

    for i in range(-GRID_EXTENT, GRID_EXTENT + 1):
        if i == 0:
            continue

        x = cx + i * viewport.scale
        y = cy - i * viewport.scale
        surface.set_color(STYLE["grid"])
        surface.set_stroke(1)
        surface.line(x, 0, x, viewport.height)
        surface.line(0, y, viewport.width, y)
        surface.set_color(STYLE["tick"])
        surface.text(str(i), x - 3, cy + 15)
        surface.text(str(i), cx + 5, y + 4)

    surface.set_color(STYLE["axis"])
    surface.set_stroke(1)
    surface.line(0, cy, viewport.width, cy)
    surface.line(cx, 0, cx, viewport.height)


def draw_parametric_curve(surface, viewport, curve):
    xs, ys = sample_curve_pixels(curve, viewport)
    surface.set_color(curve.color)
    surface.set_stroke(curve.line_width)
    return surface.polyline(xs, ys)


def tangent_pixel_endpoints(tangent, viewport):
    """Pixel endpoints of a tangent line, truncated to whole pixels."""
    (x1, y1), (x2, y2) = tangent.endpoints()
    return viewport.to_pixel_int(x1, y1), viewport.to_pixel_int(x2, y2)


def draw_tangent_line(surface, viewport, tangent):
    (x1, y1), (x2, y2) = tangent_pixel_endpoints(tangent, viewport)
    surface.set_color(tangent.color)
    surface.set_stroke(TANGENT_WIDTH, TANGENT_DASH)
    return surface.line(x1, y1, x2, y2)


def draw_point(surface, viewport, marker):
    px, py = viewport.to_pixel_int(marker.x, marker.y)
    surface.set_color(marker.color)
    return surface.fill_circle(px, py, marker.radius)


def draw_reference_segment(surface, viewport):
    """Green dashed annotation just above the x axis, fixed in screen space."""
    cx, cy = viewport.cx, viewport.cy
    y = cy - int(REFERENCE_OFFSET * viewport.scale)
    surface.set_color(STYLE["green"])
    surface.set_stroke(TANGENT_WIDTH, REFERENCE_DASH)
    return surface.line(cx - REFERENCE_HALF_WIDTH, y, cx + REFERENCE_HALF_WIDTH, y)


def draw_legend(surface, entries=None):
    """Translucent panel in the top-left corner with swatches and notes."""
    if entries is None:
        entries = legend_entries()

    x_start, y_start = LEGEND_ORIGIN
    width, height = LEGEND_SIZE
    swatch_w, swatch_h = LEGEND_SWATCH
    text_x = x_start + 5

    surface.set_font(11, bold=True)
    widest = max(
        surface.text_width(e.label) + (swatch_w + 6 if e.color else 0) for e in entries
    )
    width = max(width, int(np.ceil(widest)) + 10)

    surface.set_color(STYLE["panel"])
    surface.fill_rect(x_start, y_start, width, height)

    current_y = y_start + 15
    was_swatch = False
    for entry in entries:
        if was_swatch and entry.color is None:
            current_y += LEGEND_SECTION_GAP
        if entry.color is not None:
            surface.set_color(entry.color)
            surface.fill_rect(text_x, current_y - swatch_h, swatch_w, swatch_h)
            surface.set_color(STYLE["text"])
            surface.text(entry.label, text_x + swatch_w + 6, current_y)
        else:
            surface.set_color(STYLE["text"])
            surface.text(entry.label, text_x, current_y)
        was_swatch = entry.color is not None
        current_y += LEGEND_LINE_HEIGHT


def render_scene(surface, viewport):
    """Draw the whole scene once; safe to call again for every redraw."""
    logger.debug("Rendering scene at %dx%d", viewport.width, viewport.height)

    draw_grid_and_axes(surface, viewport)

    for curve in CURVES:
        draw_parametric_curve(surface, viewport, curve)

    for tangent in TANGENTS:
        draw_tangent_line(surface, viewport, tangent)
        draw_point(surface, viewport, PointMarker(tangent.x0, tangent.y0, tangent.color))

    draw_reference_segment(surface, viewport)
    draw_legend(surface)
