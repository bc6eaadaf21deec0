# emitter.py
from __future__ import annotations
import itertools
import logging
import re
import threading
from typing import Iterable, List, Optional

from .config import RULE_PREFIX, VENDOR_PREFIXES
from .errors import StyleRuleRejected
from .models import AnimationPlan

logger = logging.getLogger(__name__)

_AT_RULE = re.compile(r"^\s*@(-[a-z]+-)?([a-z-]+)", re.IGNORECASE)


# region Rule Counter
class RuleCounter:
    """Process-wide source of unique rule numbers (1, 2, 3, ...)."""

    def __init__(self, start: int = 1):
        self._lock = threading.Lock()
        self.reset(start)

    def reset(self, start: int = 1) -> None:
        with self._lock:
            self._count = itertools.count(start)

    def next(self) -> int:
        with self._lock:
            return next(self._count)


RULE_COUNTER = RuleCounter()
# endregion


# region Style Sheet
class StyleSheet:
    """In-memory stylesheet; rules are inserted at an index like CSSOM's insertRule.

    ``prefixes`` limits which vendor-prefixed at-rules are accepted (None
    accepts all), mimicking an engine that only understands some of them.
    """

    def __init__(self, prefixes: Optional[Iterable[str]] = None):
        self.rules: List[str] = []
        self.prefixes = None if prefixes is None else set(prefixes)

    def insert_rule(self, rule: str, index: int = 0) -> int:
        m = _AT_RULE.match(rule)
        if m and self.prefixes is not None and (m.group(1) or "") not in self.prefixes:
            raise StyleRuleRejected(f"unsupported at-rule: @{m.group(1) or ''}{m.group(2)}")
        self.rules.insert(index, rule)
        return index

    def clear(self) -> None:
        self.rules.clear()

    @property
    def css_text(self) -> str:
        return "\n".join(self.rules)
# endregion


# region Rule Text
def keyframes_rule(name: str, plan: AnimationPlan, prefix: str = "") -> str:
    return (
        f"@{prefix}keyframes {name}"
        f" {{ 0% {{ background-position: {', '.join(plan.start_points)}; }}"
        f" 100% {{ background-position: {', '.join(plan.destinations)}; }} }}"
    )


def animation_rule(name: str, duration: str, prefixes: Iterable[str] = VENDOR_PREFIXES) -> str:
    body = " ".join(f"{p}animation: {name} {duration} infinite linear;" for p in prefixes)
    return f".{name} {{ {body} }}"
# endregion


# region Emitter
class AnimationEmitter:
    def __init__(
        self,
        stylesheet: Optional[StyleSheet] = None,
        counter: Optional[RuleCounter] = None,
        prefixes: Iterable[str] = VENDOR_PREFIXES,
    ):
        self.stylesheet = stylesheet if stylesheet is not None else StyleSheet()
        self.counter = counter if counter is not None else RULE_COUNTER
        self.prefixes = tuple(prefixes)

    def emit(self, plan: AnimationPlan, element=None) -> str:
        """Insert the keyframes/animation rules for ``plan`` and tag ``element``; returns the rule name."""
        name = f"{RULE_PREFIX}{self.counter.next()}"

        accepted = 0
        for prefix in self.prefixes:
            try:
                self.stylesheet.insert_rule(keyframes_rule(name, plan, prefix), 0)
                accepted += 1
            except StyleRuleRejected as e:
                logger.debug("Keyframes variant %r rejected: %s", prefix, e)
        if not accepted:
            logger.warning("No keyframes variant accepted for %s", name)

        self.stylesheet.insert_rule(animation_rule(name, plan.duration, self.prefixes), 0)
        if element is not None:
            element.add_class(name)
        logger.info("Emitted %s (%d layers, %s)", name, len(plan.destinations), plan.duration)
        return name
# endregion


# Shared by callers that do not bring their own emitter. Like a page's
# stylesheet it keeps every rule it is given for the life of the process;
# long-running callers should pass their own emitter or call clear().
DEFAULT_EMITTER = AnimationEmitter()
