"""ImageExporter: draw a cloud layout to a matplotlib figure or image file."""

from __future__ import annotations

import logging
import pathlib

from ..layout.cloud_layouter import CircularCloudLayouter

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 600
DEFAULT_PROBE_POINTS = 2000
DEFAULT_DPI = 100


class ImageExporter:
    """Render the placed rectangles of a layouter.

    Coordinates are image pixels: the origin is the top-left corner of
    the canvas and y grows downward.
    """

    @staticmethod
    def render(
        layouter: CircularCloudLayouter,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        show_probe_path: bool = False,
        probe_points: int = DEFAULT_PROBE_POINTS,
        dpi: int = DEFAULT_DPI,
    ):
        """Build a matplotlib Figure of the layout.

        Parameters
        ----------
        layouter : CircularCloudLayouter
        width, height : int
            Canvas size in pixels.
        show_probe_path : bool
            Also plot the first ``probe_points`` candidates of the
            layouter's distribution.
        """
        from matplotlib.backends.backend_agg import FigureCanvasAgg
        from matplotlib.figure import Figure
        from matplotlib.patches import Rectangle

        fig = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        FigureCanvasAgg(fig)
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_aspect("equal")
        ax.axis("off")

        if show_probe_path:
            path = layouter.distribution.sample(probe_points)
            ax.plot(path[:, 0], path[:, 1], color="tab:blue", linewidth=0.5, alpha=0.5)

        for rect in layouter.rectangles:
            ax.add_patch(
                Rectangle(
                    (rect.x, rect.y),
                    rect.width,
                    rect.height,
                    fill=False,
                    edgecolor="black",
                    linewidth=1.0,
                )
            )

        center = layouter.center
        ax.plot([center.x], [center.y], marker="+", color="tab:red")
        return fig

    @staticmethod
    def export(
        path: str | pathlib.Path,
        layouter: CircularCloudLayouter,
        width: int = DEFAULT_CANVAS_WIDTH,
        height: int = DEFAULT_CANVAS_HEIGHT,
        show_probe_path: bool = False,
        probe_points: int = DEFAULT_PROBE_POINTS,
        dpi: int = DEFAULT_DPI,
    ) -> pathlib.Path:
        """Write the layout to an image file. Format follows the suffix (PNG if none)."""
        path = pathlib.Path(path)
        if not path.suffix:
            path = path.with_suffix(".png")
        fig = ImageExporter.render(
            layouter,
            width=width,
            height=height,
            show_probe_path=show_probe_path,
            probe_points=probe_points,
            dpi=dpi,
        )
        fig.savefig(path, dpi=dpi)
        logger.info("Tag cloud visualization saved to %s", path.resolve())
        return path.resolve()
