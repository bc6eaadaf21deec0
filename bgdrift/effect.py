# effect.py: per-element entry points
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .barrier import LoadJoinBarrier
from .emitter import AnimationEmitter, DEFAULT_EMITTER
from .geometry import direction_vector
from .layers import parse_background
from .models import AnimationPlan, Size
from .probe import Probe, probe_image_size
from .timing import resolve_options, scale_duration

logger = logging.getLogger(__name__)


@dataclass
class StyledElement:
    """The slice of an element the effect reads and writes."""
    width: float
    height: float
    style: Dict[str, str] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)
    classes: List[str] = field(default_factory=list)
    id: Optional[str] = None

    def css(self, name: str) -> str:
        return self.style.get(name) or ""

    def attr(self, name: str) -> Any:
        return self.attributes.get(name)

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)


def prepare_drift(
    element: StyledElement,
    configuration: Optional[Mapping[str, Any]] = None,
    *,
    probe: Probe = probe_image_size,
    emitter: Optional[AnimationEmitter] = None,
) -> Optional[LoadJoinBarrier]:
    """Parse and validate everything that does not need the images.

    Returns None when the element has no background image. Raises
    ConfigurationError for a bad duration, before any probe is dispatched.
    """
    background = parse_background(
        element.css("background-image"),
        element.css("background-size"),
        element.css("background-position"),
    )
    if background is None:
        logger.debug("Element %s has no background images", element.id or "?")
        return None

    angle, duration_token = resolve_options(configuration, element.attributes)
    direction = direction_vector(angle)
    duration = scale_duration(duration_token, direction.iterations)

    emitter = emitter if emitter is not None else DEFAULT_EMITTER
    return LoadJoinBarrier(
        background,
        direction,
        duration,
        Size(element.width, element.height),
        emit=lambda plan: emitter.emit(plan, element),
        probe=probe,
    )


def start_drift(element: StyledElement, configuration=None, **kwargs) -> Optional[LoadJoinBarrier]:
    barrier = prepare_drift(element, configuration, **kwargs)
    if barrier is not None:
        barrier.start()
    return barrier


async def drift(element: StyledElement, configuration=None, **kwargs) -> Optional[AnimationPlan]:
    """Animate one element; resolves once every layer has settled and the rules are emitted."""
    barrier = start_drift(element, configuration, **kwargs)
    if barrier is None:
        return None
    return await barrier.done


async def drift_all(
    elements: Iterable[StyledElement],
    configuration=None,
    **kwargs,
) -> List[Optional[AnimationPlan]]:
    """Animate several elements together.

    Every element is validated before any image is requested, so a
    ConfigurationError on one element leaves all of them untouched.
    """
    barriers = [prepare_drift(el, configuration, **kwargs) for el in elements]
    for barrier in barriers:
        if barrier is not None:
            barrier.start()
    plans = []
    for barrier in barriers:
        plans.append(None if barrier is None else await barrier.done)
    return plans
