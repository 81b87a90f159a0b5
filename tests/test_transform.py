import numpy as np
import pytest

from tangent_diagrams.transform import Viewport


def test_origin_maps_to_center(viewport):
    assert viewport.to_pixel(0, 0) == (400, 400)


def test_odd_size_center_uses_integer_division():
    vp = Viewport(801, 599)
    assert (vp.cx, vp.cy) == (400, 299)


@pytest.mark.parametrize("x, y", [(1, 1), (-2.5, 3), (10, -7.25), (0.02, -0.02)])
def test_to_pixel_formula(viewport, x, y):
    px, py = viewport.to_pixel(x, y)
    assert px == 400 + x * 45
    assert py == 400 - y * 45


def test_to_pixels_matches_scalar(viewport):
    xs = np.array([-3.0, 0.5, 2.0])
    ys = np.array([9.0, 0.25, -4.0])
    pxs, pys = viewport.to_pixels(xs, ys)
    for x, y, px, py in zip(xs, ys, pxs, pys):
        assert (px, py) == viewport.to_pixel(x, y)


def test_to_pixel_int_truncates_toward_zero(viewport):
    # -0.01 * 45 = -0.45 truncates to 0, not -1
    assert viewport.to_pixel_int(-0.01, 0.01) == (400, 400)


def test_invalid_viewport():
    with pytest.raises(ValueError):
        Viewport(800, 800, scale=0)
    with pytest.raises(ValueError):
        Viewport(-1, 800)
