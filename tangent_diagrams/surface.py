"""Immediate-mode drawing surface over a matplotlib Axes in pixel space."""

from matplotlib.patches import Circle, Rectangle

from ._common import DPI, FONT_FAMILY, STYLE


def to_mpl_color(color):
    """Convert an (r, g, b[, a]) 0-255 tuple to matplotlib's 0-1 floats."""
    return tuple(c / 255.0 for c in color)


class Surface:
    """Pixel-space painter: origin top-left, y increasing downward.

    Every draw call is stacked above the previous one, so later calls paint
    over earlier ones regardless of artist type.
    """

    def __init__(self, ax, width, height, dpi=DPI):
        self.ax = ax
        self.fig = ax.figure
        self.dpi = dpi
        self.width = width
        self.height = height
        self.color = to_mpl_color(STYLE["axis"])
        self.stroke_width = 1.0
        self.dash = None
        self.font_size = 10
        self.font_bold = False
        self._z = 0
        self._configure()

    def _configure(self):
        ax = self.ax
        ax.set_position([0, 0, 1, 1])
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_aspect("equal")
        ax.set_axis_off()
        ax.set_facecolor(to_mpl_color(STYLE["bg"]))

    def _next_z(self):
        self._z += 1
        return self._z

    def _pt(self, px):
        """Convert a length in logical pixels to points."""
        return px * 72.0 / self.dpi

    def clear(self, width=None, height=None):
        """Drop every artist, optionally resizing the pixel space."""
        self.ax.clear()
        if width is not None:
            self.width = width
        if height is not None:
            self.height = height
        self._z = 0
        self._configure()

    # -----------------------------------------------------------------------
    # State
    # -----------------------------------------------------------------------

    def set_color(self, color):
        self.color = to_mpl_color(color)

    def set_stroke(self, width, dash=None):
        """Set stroke width in pixels and an optional (on, off) dash in pixels."""
        self.stroke_width = width
        self.dash = tuple(dash) if dash else None

    def set_font(self, size, bold=False):
        self.font_size = size
        self.font_bold = bold

    def _line_kwargs(self):
        kwargs = {
            "color": self.color,
            "linewidth": self._pt(self.stroke_width),
            "antialiased": True,
            "solid_capstyle": "butt",
            "zorder": self._next_z(),
        }
        if self.dash:
            # matplotlib scales dash lengths by the line width
            kwargs["linestyle"] = (0, tuple(d / self.stroke_width for d in self.dash))
            kwargs["dash_capstyle"] = "butt"
        else:
            kwargs["linestyle"] = "-"
        return kwargs

    def _font_kwargs(self):
        return {
            "fontsize": self._pt(self.font_size),
            "fontfamily": FONT_FAMILY,
            "fontweight": "bold" if self.font_bold else "normal",
        }

    # -----------------------------------------------------------------------
    # Drawing
    # -----------------------------------------------------------------------

    def line(self, x1, y1, x2, y2):
        return self.ax.plot([x1, x2], [y1, y2], **self._line_kwargs())[0]

    def polyline(self, xs, ys):
        """Stroke an open path; fewer than two points draws nothing."""
        if len(xs) < 2:
            return None
        return self.ax.plot(xs, ys, **self._line_kwargs())[0]

    def fill_circle(self, x, y, radius):
        circle = Circle(
            (x, y),
            radius,
            facecolor=self.color,
            edgecolor="none",
            antialiased=True,
            zorder=self._next_z(),
        )
        self.ax.add_patch(circle)
        return circle

    def fill_rect(self, x, y, width, height):
        rect = Rectangle(
            (x, y),
            width,
            height,
            facecolor=self.color,
            edgecolor="none",
            zorder=self._next_z(),
        )
        self.ax.add_patch(rect)
        return rect

    def text(self, s, x, y):
        """Draw text with its baseline starting at (x, y)."""
        return self.ax.text(
            x,
            y,
            s,
            color=self.color,
            ha="left",
            va="baseline",
            zorder=self._next_z(),
            **self._font_kwargs(),
        )

    def text_width(self, s):
        """Rendered width of s in pixels with the current font."""
        probe = self.ax.text(0, 0, s, **self._font_kwargs())
        try:
            bbox = probe.get_window_extent(renderer=self.fig.canvas.get_renderer())
        finally:
            probe.remove()
        # HiDPI canvases report physical pixels
        return bbox.width / getattr(self.fig.canvas, "device_pixel_ratio", 1)
