"""Window lifecycle: build the figure, redraw on resize, show until closed."""

import logging

import matplotlib.pyplot as plt

from ._common import DPI, HEIGHT, STYLE, WIDTH, WINDOW_TITLE
from .scene_diagrams import render_scene
from .surface import Surface, to_mpl_color
from .transform import Viewport

logger = logging.getLogger(__name__)

# Backends that render to files or buffers and can never open a window
NON_INTERACTIVE_BACKENDS = {"agg", "cairo", "pdf", "pgf", "ps", "svg", "template"}


class DisplayUnavailableError(RuntimeError):
    """Raised when matplotlib has no interactive backend to open a window with."""


def build_figure(width=WIDTH, height=HEIGHT):
    """Create the figure, render the scene, and re-render on every resize."""
    fig = plt.figure(
        figsize=(width / DPI, height / DPI),
        dpi=DPI,
        facecolor=to_mpl_color(STYLE["bg"]),
    )
    ax = fig.add_axes([0, 0, 1, 1])
    surface = Surface(ax, width, height)
    render_scene(surface, Viewport.from_size(width, height))

    def on_resize(event):
        w, h = fig.canvas.get_width_height()
        logger.debug("Canvas resized to %dx%d", w, h)
        surface.clear(w, h)
        render_scene(surface, Viewport.from_size(w, h))
        fig.canvas.draw_idle()

    fig.canvas.mpl_connect("resize_event", on_resize)
    return fig, surface


def open_window():
    """Show the visualization and block until the window is closed."""
    backend = plt.get_backend()
    if backend.lower() in NON_INTERACTIVE_BACKENDS:
        raise DisplayUnavailableError(
            f"matplotlib backend '{backend}' cannot open a window (is a display available?)"
        )

    fig, _ = build_figure()
    fig.canvas.manager.set_window_title(WINDOW_TITLE)
    fig.canvas.mpl_connect("close_event", lambda event: logger.info("Window closed"))
    logger.info("Opened '%s' with backend %s", WINDOW_TITLE, backend)
    plt.show()
