import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from tangent_diagrams.surface import Surface  # noqa: E402
from tangent_diagrams.transform import Viewport  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def viewport():
    return Viewport(800, 800)


@pytest.fixture
def surface():
    fig = plt.figure(figsize=(8, 8), dpi=100)
    ax = fig.add_axes([0, 0, 1, 1])
    return Surface(ax, 800, 800)
