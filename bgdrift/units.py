# region Imports
import math
import re
# endregion

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")

EDGE_START = ("left", "top")
EDGE_END = ("right", "bottom")


# region Number Parsing / Formatting
def parse_number(text: str) -> float:
    """Leading decimal of ``text``; malformed text reads as 0."""
    m = _LEADING_NUMBER.match(text or "")
    if not m:
        return 0.0
    try:
        return float(m.group(1))
    except ValueError:
        return 0.0


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.4f}".rstrip("0").rstrip(".")


def format_point(x: float, y: float) -> str:
    return f"{format_number(x)}px {format_number(y)}px"
# endregion


# region Unit Resolution
def resolve_unit(token: str, content_length: float, container_length: float) -> int:
    """Pixel value of a single background size/position token.

    ``content_length`` is the length of the thing being placed and
    ``container_length`` the length it is placed in. ``auto`` and units that
    are not supported resolve to 0; callers that give ``auto`` a meaning
    handle it before getting here.
    """
    token = (token or "").strip().lower()

    if token.endswith("px"):
        value = parse_number(token)
    elif token.endswith("%"):
        value = container_length * (parse_number(token) / 100.0)
    elif token in EDGE_START:
        value = 0
    elif token in EDGE_END:
        value = container_length - content_length
    elif token == "center":
        value = container_length / 2 - content_length / 2
    else:
        value = 0

    return int(math.floor(value))
# endregion
