# layers.py
from __future__ import annotations
import re
from typing import List, Optional

from .config import DEFAULT_COORDS, DEFAULT_SIZE, DEFAULT_POSITION_AXIS
from .models import Background, LayerSpec

_URL = re.compile(r"url\s*\(\s*['\"]?([^'\")]+)", re.IGNORECASE)

_Y_KEYWORDS = ("top", "bottom")
_X_KEYWORDS = ("left", "right")


def image_sources(background_image: str) -> List[str]:
    """Every ``url(...)`` target in a ``background-image`` value, in order."""
    found = (m.group(1).strip() for m in _URL.finditer(background_image or ""))
    return [src for src in found if src]


def _split_list(value: str, count: int, default: str) -> List[str]:
    entries = [e.strip() for e in (value or "").split(",")]
    entries = [e or default for e in entries[:count]]
    while len(entries) < count:
        entries.append(default)
    return entries


def normalize_size(entry: str) -> str:
    parts = entry.split()
    while len(parts) < 2:
        parts.append(DEFAULT_SIZE)
    return f"{parts[0]} {parts[1]}"


def normalize_position(entry: str) -> str:
    """Two position tokens in x/y order (``"top left"`` -> ``"left top"``)."""
    parts = entry.split()
    while len(parts) < 2:
        parts.append(DEFAULT_POSITION_AXIS)
    first, second = parts[0], parts[1]
    if first.lower() in _Y_KEYWORDS or second.lower() in _X_KEYWORDS:
        first, second = second, first
    return f"{first} {second}"


def parse_background(
    background_image: str,
    background_size: str = "",
    background_position: str = "",
) -> Optional[Background]:
    """Split the comma-separated background shorthands into one LayerSpec per image.

    Returns None when no image URL is present. Size and position lists
    shorter than the image list are padded with defaults, as are blank
    entries.
    """
    images = image_sources(background_image)
    if not images:
        return None

    sizes = _split_list(background_size, len(images), DEFAULT_SIZE)
    positions = _split_list(background_position, len(images), DEFAULT_COORDS)

    return Background(layers=tuple(
        LayerSpec(
            image_source=src,
            size_spec=normalize_size(size),
            position_spec=normalize_position(pos),
        )
        for src, size, pos in zip(images, sizes, positions)
    ))
