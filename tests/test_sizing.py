from __future__ import annotations

from bgdrift.models import Size
from bgdrift.sizing import resolve_position, resolve_size

CONTAINER = Size(300, 300)


def test_auto_auto_keeps_natural_size() -> None:
    assert resolve_size("auto auto", Size(40, 20), CONTAINER) == Size(40, 20)


def test_one_auto_axis_keeps_aspect_ratio() -> None:
    assert resolve_size("100px auto", Size(50, 25), CONTAINER) == Size(100, 50)
    assert resolve_size("auto 50%", Size(40, 20), Size(300, 200)) == Size(200, 100)


def test_explicit_axes_are_independent() -> None:
    assert resolve_size("50% 10px", Size(40, 20), CONTAINER) == Size(150, 10)


def test_zero_natural_length_does_not_divide() -> None:
    assert resolve_size("auto 10px", Size(40, 0), CONTAINER) == Size(40, 10)


def test_position_in_pixels() -> None:
    p =resolve_position("10px 20px", Size(100, 100), CONTAINER)
    assert (p.x, p.y) == (10, 20)


def test_position_percent_uses_remaining_space() -> None:
    p = resolve_position("50% 100%", Size(100, 50), Size(300, 250))
    assert (p.x, p.y) == (100, 200)


def test_edge_keywords_match_percentages() -> None:
    p = resolve_position("right bottom", Size(100, 50), Size(300, 250))
    assert (p.x, p.y) == (200, 200)
    p = resolve_position("left top", Size(100, 100), CONTAINER)
    assert (p.x, p.y) == (0, 0)


def test_center_is_resolved_against_remaining_space() -> None:
    # resolve_unit("center", s, C - s) == (C - s) / 2 - s / 2
    p = resolve_position("center center", Size(100, 100), CONTAINER)
    assert (p.x, p.y) == (50, 50)
    p = resolve_position("center center", Size(50, 50), Size(200, 200))
    assert (p.x, p.y) == (50, 50)
    p = resolve_position("center bottom", Size(100, 50), Size(300, 250))
    assert (p.x, p.y) == (50, 200)
