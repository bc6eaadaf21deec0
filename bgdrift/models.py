# models.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from .errors import SlotAlreadySettled

EMPTY_SLOT = ""


@dataclass(frozen=True)
class LayerSpec:
    image_source: str
    size_spec: str        # "<w> <h>", both tokens present
    position_spec: str    # "<x> <y>", already in x/y order


@dataclass(frozen=True)
class Background:
    layers: Tuple[LayerSpec, ...]

    @property
    def images(self) -> List[str]:
        return [layer.image_source for layer in self.layers]

    @property
    def sizes(self) -> List[str]:
        return [layer.size_spec for layer in self.layers]

    @property
    def positions(self) -> List[str]:
        return [layer.position_spec for layer in self.layers]

    def __len__(self) -> int:
        return len(self.layers)


@dataclass
class Vector2:
    x: float
    y: float


@dataclass(frozen=True)
class Direction:
    x: float
    y: float
    iterations: int   # >= 1


@dataclass
class Size:
    width: float
    height: float


@dataclass
class AnimationPlan:
    """Per-invocation accumulator of keyframe positions, one slot per layer.

    Start slots are seeded with the parsed position specs so that a layer
    whose image never loads still has a usable start point. Destination slots
    start empty and each is written exactly once.
    """
    start_points: List[str]
    destinations: List[str]
    duration: str
    _settled: List[bool] = field(init=False, default_factory=list, repr=False, compare=False)

    def __post_init__(self):
        if len(self.start_points) != len(self.destinations):
            raise ValueError("start_points and destinations must have one slot per layer")
        # destinations passed in already filled count as settled
        self._settled = [d != EMPTY_SLOT for d in self.destinations]

    @classmethod
    def for_background(cls, background: Background, duration: str) -> "AnimationPlan":
        n = len(background)
        return cls(
            start_points=background.positions,
            destinations=[EMPTY_SLOT] * n,
            duration=duration,
        )

    def settle(self, index: int, destination: str, start_point: str | None = None) -> None:
        if self._settled[index]:
            raise SlotAlreadySettled(f"layer {index} already settled")
        self._settled[index] = True
        if start_point is not None:
            self.start_points[index] = start_point
        self.destinations[index] = destination

    @property
    def is_complete(self) -> bool:
        return all(d != EMPTY_SLOT for d in self.destinations)

    def to_dict(self) -> dict:
        return {
            "start_points": list(self.start_points),
            "destinations": list(self.destinations),
            "duration": self.duration,
        }
