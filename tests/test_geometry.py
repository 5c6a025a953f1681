"""
Tests for Euclidean distance.
"""

from __future__ import annotations

import math

import pytest

from toybox.geometry import distance


def test_distance_2d() -> None:
    assert distance([0, 0], [3, 4]) == 5.0


def test_distance_3d_and_symmetry() -> None:
    a = [1, 2, 3]
    b = [4, 6, 15]
    assert distance(a, b) == 13.0
    assert distance(b, a) == distance(a, b)


def test_distance_same_point_is_zero() -> None:
    assert distance((1.5, -2.0), (1.5, -2.0)) == 0.0


def test_distance_higher_dimensions() -> None:
    assert distance([0, 0, 0, 0], [1, 1, 1, 1]) == pytest.approx(2.0)


@pytest.mark.parametrize(
    "a, b",
    [
        ([1], [2]),
        ([1, 2], [1, 2, 3]),
        ("ab", "cd"),
        (None, [1, 2]),
        ([], []),
        ([1, "a"], [2, 3]),
        ([0, 0], [None, 1]),
        ([True, 0], [1, 1]),
    ],
)
def test_distance_invalid_points_give_nan(a, b) -> None:
    assert math.isnan(distance(a, b))
