"""Tabular export of a layout (one row per placed rectangle)."""

from __future__ import annotations

import logging
import pathlib

import pandas as pd

from ..layout.cloud_layouter import CircularCloudLayouter

logger = logging.getLogger(__name__)

COLUMNS = ["x", "y", "width", "height", "center_x", "center_y"]


def layout_to_dataframe(layouter: CircularCloudLayouter) -> pd.DataFrame:
    """Rectangles in placement order; the index is the placement order."""
    rows = [
        {**r.to_dict(), "center_x": r.center.x, "center_y": r.center.y}
        for r in layouter.rectangles
    ]
    df = pd.DataFrame(rows, columns=COLUMNS, dtype="int64")
    df.index.name = "order"
    return df


def export_csv(path: str | pathlib.Path, layouter: CircularCloudLayouter) -> pathlib.Path:
    """Write the layout table to a CSV file and return the resolved path."""
    path = pathlib.Path(path).resolve()
    layout_to_dataframe(layouter).to_csv(path)
    logger.info("Wrote %d rectangles to %s", len(layouter), path)
    return path
