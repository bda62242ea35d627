"""tag-cloud: non-overlapping rectangle layout along an outward spiral."""

from ._version import __version__
from .layout.geometry import Point, Size, Rect
from .layout.distribution import ArchimedeanSpiral, Distribution, SquareSpiral
from .layout.cloud_layouter import CircularCloudLayouter, LayoutExhaustedError
from .sampling import generate_sizes


def render_cloud(layouter, path, width=800, height=600, show_probe_path=False):
    """Save a picture of the layout to ``path`` and return the resolved path.

    Parameters
    ----------
    layouter : CircularCloudLayouter
        Layout whose rectangles are drawn.
    path : str or Path
        Output image file (PNG if no suffix).
    width, height : int
        Canvas size in pixels.
    show_probe_path : bool
        Also draw the candidate points the layouter probes.
    """
    from .export.image_export import ImageExporter

    return ImageExporter.export(
        path, layouter, width=width, height=height, show_probe_path=show_probe_path
    )


__all__ = [
    "__version__",
    "Point",
    "Size",
    "Rect",
    "Distribution",
    "ArchimedeanSpiral",
    "SquareSpiral",
    "CircularCloudLayouter",
    "LayoutExhaustedError",
    "generate_sizes",
    "render_cloud",
]
