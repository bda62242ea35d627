"""Distributions: lazy, infinite sequences of candidate placement points."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from itertools import islice
from typing import Iterator

import numpy as np

from ..core.validation import validate_point, validate_positive
from .geometry import Point


# Default spiral shape: about 63 steps per turn, arms ~12.6px apart
DEFAULT_ANGLE_STEP = 0.1  # radians per step
DEFAULT_SPIRAL_COEFFICIENT = 2.0  # pixels of radius per radian


class Distribution(ABC):
    """Base class for point sources used by the cloud layouter.

    A distribution is bound to a fixed center and produces candidate
    placement points on demand. Every call to ``produce_points`` starts
    a fresh sequence from the first point.
    """

    def __init__(self, center: Point | tuple[int, int]) -> None:
        self._center = validate_point(center)

    @property
    def center(self) -> Point:
        return self._center

    @abstractmethod
    def produce_points(self) -> Iterator[Point]:
        """Yield candidate points in order, starting from the first one."""
        ...

    def sample(self, n: int) -> np.ndarray:
        """First ``n`` points as an (n, 2) int array, for plotting the probe path."""
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}.")
        coords = [(p.x, p.y) for p in islice(self.produce_points(), n)]
        return np.array(coords, dtype=np.int64).reshape(-1, 2)


class ArchimedeanSpiral(Distribution):
    """Archimedean spiral r = k * theta around the center.

    Step ``i`` sits at angle ``i * angle_step`` and radius
    ``spiral_coefficient * angle``, so step 0 is the center itself and
    the radius never decreases.
    """

    def __init__(
        self,
        center: Point | tuple[int, int],
        angle_step: float = DEFAULT_ANGLE_STEP,
        spiral_coefficient: float = DEFAULT_SPIRAL_COEFFICIENT,
    ) -> None:
        super().__init__(center)
        self._angle_step = validate_positive(angle_step, "angle_step")
        self._spiral_coefficient = validate_positive(
            spiral_coefficient, "spiral_coefficient"
        )

    @property
    def angle_step(self) -> float:
        return self._angle_step

    @property
    def spiral_coefficient(self) -> float:
        return self._spiral_coefficient

    def angle(self, step: int) -> float:
        return step * self._angle_step

    def radius(self, step: int) -> float:
        return self._spiral_coefficient * self.angle(step)

    def point_at(self, step: int) -> Point:
        """The candidate point for a given step index."""
        if step < 0:
            raise ValueError(f"Step index must be non-negative, got {step}.")
        theta = self.angle(step)
        r = self.radius(step)
        return self._center.offset(
            round(r * math.cos(theta)),
            round(r * math.sin(theta)),
        )

    def produce_points(self) -> Iterator[Point]:
        step = 0
        while True:
            yield self.point_at(step)
            step += 1


class SquareSpiral(Distribution):
    """Grid scan over square rings of lattice points around the center.

    Ring ``k`` is the boundary of the (2k+1) x (2k+1) square, walked
    clockwise from its top-left corner. Each lattice point is produced
    exactly once; ``step`` scales the lattice spacing in pixels.
    """

    def __init__(self, center: Point | tuple[int, int], step: int = 1) -> None:
        super().__init__(center)
        if isinstance(step, bool) or not isinstance(step, int) or step <= 0:
            raise ValueError(f"step must be a positive integer, got {step!r}.")
        self._step = step

    @property
    def step(self) -> int:
        return self._step

    def _ring(self, k: int) -> Iterator[tuple[int, int]]:
        if k == 0:
            yield (0, 0)
            return
        for dx in range(-k, k):
            yield (dx, -k)
        for dy in range(-k, k):
            yield (k, dy)
        for dx in range(k, -k, -1):
            yield (dx, k)
        for dy in range(k, -k, -1):
            yield (-k, dy)

    def produce_points(self) -> Iterator[Point]:
        k = 0
        while True:
            for dx, dy in self._ring(k):
                yield self._center.offset(dx * self._step, dy * self._step)
            k += 1
