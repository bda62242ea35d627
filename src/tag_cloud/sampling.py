"""Random rectangle sizes for demos and tests."""

from __future__ import annotations

import numpy as np

from .core.validation import validate_size
from .layout.geometry import Size


def generate_sizes(
    count: int,
    min_size: Size | tuple[int, int],
    max_size: Size | tuple[int, int],
    seed: int | None = None,
) -> list[Size]:
    """Draw ``count`` sizes uniformly, each dimension in [min, max] inclusive.

    Parameters
    ----------
    count : int
        Number of sizes to generate.
    min_size, max_size : Size or (width, height)
        Inclusive bounds per dimension.
    seed : int, optional
        Seed for ``numpy.random.default_rng``; same seed, same sizes.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}.")
    lo = validate_size(min_size)
    hi = validate_size(max_size)
    if lo.width > hi.width or lo.height > hi.height:
        raise ValueError(f"min_size {lo} must not exceed max_size {hi}.")

    rng = np.random.default_rng(seed)
    widths = rng.integers(lo.width, hi.width, size=count, endpoint=True)
    heights = rng.integers(lo.height, hi.height, size=count, endpoint=True)
    return [Size(int(w), int(h)) for w, h in zip(widths, heights)]
