# barrier.py
from __future__ import annotations
import asyncio
import functools
import logging
from typing import Callable, List, Optional

from .config import DEFAULT_COORDS
from .geometry import resolve_destination
from .models import AnimationPlan, Background, Direction, Size
from .probe import Probe, probe_image_size
from .sizing import resolve_position, resolve_size
from .units import format_point

logger = logging.getLogger(__name__)

EmitFn = Callable[[AnimationPlan], None]


class LoadJoinBarrier:
    """Probes every layer's image and emits the finished plan exactly once.

    Each probe settles its own layer slot from its done-callback, on the
    event-loop thread, in whatever order the probes finish. After every
    settlement the plan is checked for completeness; the first complete
    check hands it to ``emit``. A failed probe settles its layer with a
    zero-travel destination instead of blocking the others, and so does a
    layer whose size or position cannot be computed. There is no
    timeout: a probe that never finishes keeps the plan from ever emitting.
    """

    def __init__(
        self,
        background: Background,
        direction: Direction,
        duration: str,
        container: Size,
        emit: Optional[EmitFn] = None,
        probe: Probe = probe_image_size,
    ):
        self.background = background
        self.direction = direction
        self.container = container
        self.plan = AnimationPlan.for_background(background, duration)
        self._emit = emit
        self._probe = probe
        self._emitted = False
        self._tasks: List[asyncio.Future] = []
        self.done: Optional[asyncio.Future] = None

    @property
    def emitted(self) -> bool:
        return self._emitted

    def start(self) -> asyncio.Future:
        """Dispatch one probe per layer. Must be called with a running event loop."""
        if self.done is not None:
            raise RuntimeError("barrier already started")
        loop = asyncio.get_running_loop()
        self.done = loop.create_future()
        for index, layer in enumerate(self.background.layers):
            task = asyncio.ensure_future(self._probe(layer.image_source))
            task.add_done_callback(functools.partial(self._on_settled, index))
            self._tasks.append(task)
        logger.debug("Dispatched %d image probes", len(self._tasks))
        return self.done

    async def wait(self) -> AnimationPlan:
        return await (self.done if self.done is not None else self.start())

    # region Settlement
    def _on_settled(self, index: int, task: asyncio.Future) -> None:
        layer = self.background.layers[index]
        error = None if task.cancelled() else task.exception()
        if task.cancelled() or error is not None:
            logger.warning("Layer %d image %s failed to load: %s",
                           index, layer.image_source[:80], error or "cancelled")
            self.plan.settle(index, DEFAULT_COORDS)
        else:
            try:
                start_point, destination = self._layer_points(layer, task.result())
            except Exception as e:
                logger.warning("Layer %d (%s) could not be placed: %s",
                               index, layer.image_source[:80], e)
                self.plan.settle(index, DEFAULT_COORDS)
            else:
                self.plan.settle(index, destination, start_point)
                logger.debug("Layer %d settled: %s -> %s", index, start_point, destination)
        self._try_emit()

    def _layer_points(self, layer, natural: Size):
        size = resolve_size(layer.size_spec, natural, self.container)
        start = resolve_position(layer.position_spec, size, self.container)
        dest = resolve_destination(self.direction, size, start, self.direction.iterations)
        return format_point(start.x, start.y), format_point(dest.x, dest.y)

    def _try_emit(self) -> None:
        if self._emitted or not self.plan.is_complete:
            return
        self._emitted = True
        try:
            if self._emit is not None:
                self._emit(self.plan)
        except Exception as e:
            # surfaces to whoever awaits the barrier
            self.done.set_exception(e)
            return
        if not self.done.done():
            self.done.set_result(self.plan)
    # endregion
