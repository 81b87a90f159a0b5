import matplotlib.pyplot as plt
import numpy as np
import pytest

from tangent_diagrams.curves import PointMarker
from tangent_diagrams.scene_diagrams import (
    CURVES,
    TANGENTS,
    draw_grid_and_axes,
    draw_legend,
    draw_parametric_curve,
    draw_point,
    draw_reference_segment,
    draw_tangent_line,
    legend_entries,
    render_scene,
)
from tangent_diagrams.surface import Surface
from tangent_diagrams.transform import Viewport
from tangent_diagrams.window import build_figure

EXPECTED_LEGEND = [
    "Curve 1: x=t, y=t^2",
    "Curve 2: x=-t, y=t^2",
    "Curve 3: x=t*cos(t)/3, y=t*sin(t)/3",
    "Tangent point at t = 2.0",
    "Dashed lines = Tangent lines",
]


def _surface(width, height):
    fig = plt.figure(figsize=(width / 100, height / 100), dpi=100)
    return Surface(fig.add_axes([0, 0, 1, 1]), width, height)


def _rgba(fig):
    fig.canvas.draw()
    return np.asarray(fig.canvas.buffer_rgba()).copy()


def test_legend_entries_order():
    assert [e.label for e in legend_entries()] == EXPECTED_LEGEND
    assert [e.color for e in legend_entries()[:3]] == [c.color for c in CURVES]


@pytest.mark.parametrize("size", [(800, 800), (400, 300), (1200, 900)])
def test_legend_text_is_fixed_for_any_viewport(size):
    surface = _surface(*size)
    draw_legend(surface)
    assert [t.get_text() for t in surface.ax.texts] == EXPECTED_LEGEND


def test_legend_line_positions(surface):
    draw_legend(surface)
    ys = [t.get_position()[1] for t in surface.ax.texts]
    assert ys == [35, 53, 71, 94, 112]


def test_legend_panel_fits_widest_label(surface):
    draw_legend(surface)
    panel = surface.ax.patches[0]
    assert panel.get_x() == 20 and panel.get_y() == 20
    assert panel.get_width() >= 230
    assert panel.get_height() == 110


def test_grid_labels_skip_zero(surface, viewport):
    draw_grid_and_axes(surface, viewport)
    labels = {t.get_text() for t in surface.ax.texts}
    assert "0" not in labels
    assert labels == {str(i) for i in range(-20, 21) if i != 0}
    # two gridlines per nonzero integer plus the two axes
    assert len(surface.ax.lines) == 2 * 40 + 2


def test_reference_segment_position(surface, viewport):
    line = draw_reference_segment(surface, viewport)
    assert list(line.get_xdata()) == [300, 500]
    assert list(line.get_ydata()) == [373, 373]


def test_render_scene_draw_order(surface, viewport):
    render_scene(surface, viewport)
    artists = [*surface.ax.lines, *surface.ax.patches, *surface.ax.texts]
    zorders = [a.get_zorder() for a in artists]
    assert len(set(zorders)) == len(zorders)
    # markers at both tangency points
    circles = [p for p in surface.ax.patches if hasattr(p, "get_radius")]
    assert [c.center for c in circles] == [(490, 220), (310, 220)]
    assert len(circles) == len(TANGENTS)


def test_render_twice_is_pixel_identical():
    first = _surface(800, 800)
    render_scene(first, Viewport(800, 800))
    second = _surface(800, 800)
    render_scene(second, Viewport(800, 800))
    assert np.array_equal(_rgba(first.fig), _rgba(second.fig))


def test_rerender_after_clear_is_pixel_identical(surface, viewport):
    render_scene(surface, viewport)
    before = _rgba(surface.fig)
    surface.clear()
    render_scene(surface, viewport)
    assert np.array_equal(before, _rgba(surface.fig))


def test_build_figure_renders_at_window_size():
    fig, surface = build_figure()
    assert tuple(fig.get_size_inches() * fig.dpi) == (800, 800)
    assert surface.ax.get_xlim() == (0, 800)
    assert surface.ax.get_ylim() == (800, 0)
    assert [t.get_text() for t in surface.ax.texts][-5:] == EXPECTED_LEGEND


def _dashes(line):
    _, dashes = line._dash_pattern
    return list(dashes)


def test_curves_are_solid_two_pixels(surface, viewport):
    for curve in CURVES:
        line = draw_parametric_curve(surface, viewport, curve)
        assert line.get_linestyle() == "-"
        assert line.get_linewidth() == pytest.approx(1.44)


def test_tangents_are_dashed_six_on_six_off(surface, viewport):
    for tangent in TANGENTS:
        line = draw_tangent_line(surface, viewport, tangent)
        assert line.get_linewidth() == pytest.approx(1.08)
        assert _dashes(line) == pytest.approx([4.32, 4.32])


def test_reference_segment_dash(surface, viewport):
    line = draw_reference_segment(surface, viewport)
    assert line.get_linewidth() == pytest.approx(1.08)
    assert _dashes(line) == pytest.approx([3.6, 3.6])


def test_point_marker_radius(surface, viewport):
    circle = draw_point(surface, viewport, PointMarker(2.0, 4.0, (0, 0, 255)))
    assert circle.get_radius() == 4
    assert circle.center == (490, 220)


def test_axes_fill_figure_with_equal_aspect(surface, viewport):
    render_scene(surface, viewport)
    surface.fig.canvas.draw()
    assert surface.ax.get_aspect() in ("equal", 1.0)
    assert surface.ax.get_position().bounds == pytest.approx((0, 0, 1, 1))
