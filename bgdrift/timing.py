# timing.py
from __future__ import annotations
import re
from typing import Any, Mapping, Optional, Tuple

from .config import DEFAULT_DIRECTION, DEFAULT_DURATION, DIRECTION_ATTR, DURATION_ATTR
from .errors import ConfigurationError
from .units import format_number

_DURATION = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))\s*(ms|s)\s*$", re.IGNORECASE)
_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")


def scale_duration(token: str, iterations: int) -> str:
    """Multiply a CSS time (``"10s"``, ``"250ms"``) by ``iterations``, keeping its unit."""
    m = _DURATION.match(token or "")
    if not m:
        raise ConfigurationError(
            f"invalid duration {token!r}: expected a number followed by 's' or 'ms'"
        )
    magnitude, unit = float(m.group(1)), m.group(2)
    return f"{format_number(magnitude * iterations)}{unit}"


def parse_direction(value: Any, default: int = DEFAULT_DIRECTION) -> int:
    if value is None:
        return default
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else default


def _first_present(*values: Any) -> Optional[Any]:
    for v in values:
        if v is not None and str(v).strip() != "":
            return v
    return None


def resolve_options(
    configuration: Optional[Mapping[str, Any]],
    attributes: Optional[Mapping[str, Any]],
) -> Tuple[int, str]:
    """(direction, duration token): explicit configuration, then element attributes, then defaults."""
    configuration = configuration or {}
    attributes = attributes or {}
    direction = parse_direction(_first_present(
        configuration.get("direction"), attributes.get(DIRECTION_ATTR), DEFAULT_DIRECTION,
    ))
    duration = str(_first_present(
        configuration.get("duration"), attributes.get(DURATION_ATTR), DEFAULT_DURATION,
    )).strip()
    return direction, duration
