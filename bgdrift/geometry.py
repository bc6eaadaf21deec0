# region Imports
import math
from typing import Optional
import numpy as np

from .models import Direction, Size, Vector2
# endregion


# region Direction Vector
def direction_vector(angle_degrees: float) -> Direction:
    """Per-axis travel (in tile lengths) for an angle, plus an iteration count.

    The larger axis is pushed to exactly +-1 tile; the smaller one gets the
    same push. ``iterations`` is how many of those steps it takes for the
    smaller axis to cover about one tile as well. On a non-square tile the
    visible angle therefore drifts slightly from the requested one.
    """
    radians = math.radians(float(angle_degrees))
    plot = np.round(np.array([math.cos(radians), math.sin(radians)]), 4)

    adjust = float(np.min(1.0 - np.abs(plot)))
    plot = plot + np.where(plot < 0, -adjust, adjust)

    minor = float(np.min(np.abs(plot)))
    iterations = math.floor(1.0 / minor) if minor > 0 else 1
    return Direction(x=float(plot[0]), y=float(plot[1]), iterations=max(1, iterations))
# endregion


# region Seamless-loop Snapping
def nearest_multiple_correction(value: float, tile: float) -> float:
    """Signed amount that moves ``value`` away from zero onto a multiple of ``tile``."""
    tile = abs(tile)
    if tile == 0:
        return 0.0
    delta = tile - (abs(value) % tile)
    if math.isclose(delta, tile):
        return 0.0
    return -delta if value < 0 else delta


def resolve_destination(
    direction: Direction,
    size: Size,
    start: Vector2,
    iterations: Optional[int] = None,
) -> Vector2:
    if iterations is None:
        iterations = direction.iterations

    d = np.array([direction.x, direction.y], dtype=np.float64)
    tile = np.array([size.width, size.height], dtype=np.float64)
    origin = np.array([start.x, start.y], dtype=np.float64)

    raw = np.floor(d * tile * iterations)
    correction = np.array([nearest_multiple_correction(r, t) for r, t in zip(raw, tile)])
    dest = np.where(tile == 0, origin, raw + correction + origin)
    return Vector2(x=float(dest[0]), y=float(dest[1]))
# endregion
