"""Tests for input validation."""

import pytest

from tag_cloud.core.validation import validate_point, validate_positive, validate_size
from tag_cloud.layout.geometry import Point, Size


class TestValidateSize:
    def test_accepts_size(self):
        assert validate_size(Size(3, 4)) == Size(3, 4)

    def test_accepts_tuple(self):
        assert validate_size((3, 4)) == Size(3, 4)

    def test_accepts_zero(self):
        assert validate_size(Size(0, 0)) == Size(0, 0)

    @pytest.mark.parametrize("width, height", [(-1, -1), (-1, 0), (0, -1)])
    def test_rejects_negative(self, width, height):
        with pytest.raises(ValueError, match="non-negative"):
            validate_size(Size(width, height))

    def test_rejects_float(self):
        with pytest.raises(TypeError, match="integers"):
            validate_size((1.5, 2))

    def test_rejects_wrong_shape(self):
        with pytest.raises(TypeError, match="pair of integers"):
            validate_size((1, 2, 3))

    def test_rejects_scalar(self):
        with pytest.raises(TypeError):
            validate_size(5)


class TestValidatePoint:
    def test_accepts_point(self):
        assert validate_point(Point(1, -2)) == Point(1, -2)

    def test_accepts_tuple(self):
        assert validate_point((1, -2)) == Point(1, -2)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            validate_point((True, 1))


class TestValidatePositive:
    def test_accepts_positive(self):
        assert validate_positive(2, "k") == 2.0

    @pytest.mark.parametrize("value", [0, -1.0, float("nan"), float("inf")])
    def test_rejects_non_positive(self, value):
        with pytest.raises(ValueError, match="k must be"):
            validate_positive(value, "k")

    def test_rejects_non_number(self):
        with pytest.raises(TypeError):
            validate_positive("1", "k")
