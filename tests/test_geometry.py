from __future__ import annotations

import math

from bgdrift.geometry import direction_vector, nearest_multiple_correction, resolve_destination
from bgdrift.models import Direction, Size, Vector2


def test_axis_aligned_directions() -> None:
    d = direction_vector(0)
    assert (d.x, d.y, d.iterations) == (1.0, 0.0, 1)
    d = direction_vector(90)
    assert (abs(d.x), d.y, d.iterations) == (0.0, 1.0, 1)
    d = direction_vector(180)
    assert (d.x, abs(d.y), d.iterations) == (-1.0, 0.0, 1)
    d = direction_vector(270)
    assert (abs(d.x), d.y, d.iterations) == (0.0, -1.0, 1)


def test_diagonal_reaches_both_axes() -> None:
    d = direction_vector(45)
    assert math.isclose(d.x, 1.0) and math.isclose(d.y, 1.0)
    assert d.iterations == 1


def test_shallow_angle_needs_more_iterations() -> None:
    d = direction_vector(10)
    assert math.isclose(d.x, 1.0)
    assert math.isclose(d.y, 0.1888, abs_tol=1e-9)
    assert d.iterations == 5

    d = direction_vector(30)
    assert math.isclose(d.y, 0.634, abs_tol=1e-9)
    assert d.iterations == 1


def test_major_axis_is_always_one_tile() -> None:
    for angle in range(-360, 361, 7):
        d = direction_vector(angle)
        assert math.isclose(max(abs(d.x), abs(d.y)), 1.0, abs_tol=1e-9), angle
        assert d.iterations >= 1


def test_correction_moves_away_from_zero() -> None:
    assert nearest_multiple_correction(30, 100) == 70
    assert nearest_multiple_correction(-30, 100) == -70
    assert nearest_multiple_correction(200, 100) == 0
    assert nearest_multiple_correction(0, 100) == 0
    assert nearest_multiple_correction(5, 0) == 0


def test_destination_straight_down() -> None:
    dest = resolve_destination(Direction(0.0, 1.0, 1), Size(100, 100), Vector2(0, 0), 1)
    assert (dest.x, dest.y) == (0, 100)


def test_destination_snaps_minor_axis() -> None:
    d = direction_vector(10)
    dest = resolve_destination(d, Size(100, 50), Vector2(10, 20), d.iterations)
    assert (dest.x, dest.y) == (510, 70)


def test_destination_is_whole_tiles_from_start() -> None:
    for angle in range(0, 360, 11):
        d = direction_vector(angle)
        for size in (Size(64, 48), Size(100, 30), Size(7, 13)):
            start = Vector2(-7, 13)
            dest = resolve_destination(d, size, start, d.iterations)
            assert abs(dest.x - start.x) % size.width == 0, (angle, size)
            assert abs(dest.y - start.y) % size.height == 0, (angle, size)


def test_zero_size_layer_stays_put() -> None:
    dest = resolve_destination(direction_vector(45), Size(0, 100), Vector2(5, 5))
    assert dest.x == 5
    assert dest.y == 105
