"""CircularCloudLayouter: first-fit placement of rectangles around a center."""

from __future__ import annotations

import logging
import numbers
from itertools import islice
from typing import Iterable

import numpy as np

from ..core.validation import validate_point, validate_size
from .distribution import ArchimedeanSpiral, Distribution
from .geometry import Point, Rect, Size

logger = logging.getLogger(__name__)

INITIAL_CAPACITY = 64


class LayoutExhaustedError(RuntimeError):
    """No free position was found among the candidates the search may try."""


class CircularCloudLayouter:
    """Places rectangles one at a time so that none of them overlap.

    Candidate centers come from a Distribution (an Archimedean spiral
    around ``center`` by default). Each new rectangle takes the first
    candidate at which it does not intersect any rectangle placed
    before it. Placed rectangles are never moved or removed.

    Not thread-safe: concurrent calls to ``put_next_rectangle`` on the
    same layouter must be serialized by the caller.
    """

    def __init__(
        self,
        center: Point | tuple[int, int] | None = None,
        distribution: Distribution | None = None,
        max_steps: int | None = None,
    ) -> None:
        if distribution is None:
            if center is None:
                raise TypeError("Provide a center point or a distribution.")
            distribution = ArchimedeanSpiral(center)
        elif center is not None and validate_point(center) != distribution.center:
            raise ValueError(
                f"Center {validate_point(center)} does not match the "
                f"distribution center {distribution.center}."
            )
        if max_steps is not None and (
            isinstance(max_steps, bool)
            or not isinstance(max_steps, numbers.Integral)
            or max_steps <= 0
        ):
            raise ValueError(f"max_steps must be a positive integer or None, got {max_steps!r}.")

        self._distribution = distribution
        self._center = distribution.center
        self._max_steps = None if max_steps is None else int(max_steps)
        self._rectangles: list[Rect] = []
        # (left, top, right, bottom) of each non-empty placed rectangle;
        # rows [0, _n_bounds) are live, capacity doubles when full
        self._bounds = np.empty((INITIAL_CAPACITY, 4), dtype=np.int64)
        self._n_bounds = 0

    @classmethod
    def from_distribution(
        cls,
        distribution: Distribution,
        max_steps: int | None = None,
    ) -> CircularCloudLayouter:
        """Create a layouter that draws candidates from the given distribution."""
        return cls(distribution=distribution, max_steps=max_steps)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def distribution(self) -> Distribution:
        return self._distribution

    @property
    def max_steps(self) -> int | None:
        """Upper bound on candidates tried per placement (None = unbounded)."""
        return self._max_steps

    @property
    def rectangles(self) -> tuple[Rect, ...]:
        """Placed rectangles in placement order (read-only)."""
        return tuple(self._rectangles)

    def __len__(self) -> int:
        return len(self._rectangles)

    def bounds(self) -> Rect | None:
        """Bounding rectangle of the whole cloud, or None if it is empty."""
        return Rect.bounding(self._rectangles)

    def _is_free(self, candidate: Rect) -> bool:
        """True if ``candidate`` intersects none of the placed rectangles."""
        if candidate.is_empty or self._n_bounds == 0:
            return True
        b = self._bounds[: self._n_bounds]
        hits = (
            (b[:, 0] < candidate.right)
            & (candidate.x < b[:, 2])
            & (b[:, 1] < candidate.bottom)
            & (candidate.y < b[:, 3])
        )
        return not bool(hits.any())

    def put_next_rectangle(self, size: Size | tuple[int, int]) -> Rect:
        """Place a rectangle of ``size`` at the first free candidate point.

        Returns the placed rectangle, which is also appended to
        ``rectangles``. Raises ValueError for a negative width or height
        and LayoutExhaustedError if the candidates run out (finite
        distribution or ``max_steps`` reached). Neither error changes
        the layout.
        """
        size = validate_size(size)

        points = self._distribution.produce_points()
        if self._max_steps is not None:
            points = islice(points, self._max_steps)

        tried = 0
        for point in points:
            tried += 1
            candidate = Rect.centered_at(point, size)
            if self._is_free(candidate):
                self._commit(candidate)
                logger.debug(
                    "Placed %s at %s after %d candidate(s)", size, candidate, tried
                )
                return candidate

        raise LayoutExhaustedError(
            f"No free position for {size} after {tried} candidate point(s)."
        )

    def put_rectangles(self, sizes: Iterable[Size | tuple[int, int]]) -> list[Rect]:
        """Place each size in order. Returns the placed rectangles."""
        return [self.put_next_rectangle(size) for size in sizes]

    def _commit(self, rect: Rect) -> None:
        self._rectangles.append(rect)
        if not rect.is_empty:
            if self._n_bounds == len(self._bounds):
                grown = np.empty((2 * len(self._bounds), 4), dtype=np.int64)
                grown[: self._n_bounds] = self._bounds
                self._bounds = grown
            self._bounds[self._n_bounds] = (rect.x, rect.y, rect.right, rect.bottom)
            self._n_bounds += 1
