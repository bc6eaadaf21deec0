# region Imports
from .models import Size, Vector2
from .units import resolve_unit, EDGE_START, EDGE_END
# endregion

AUTO = "auto"

# Edge keywords become percentages; "center" keeps its own rule in resolve_unit
_POSITION_KEYWORDS = {
    **{k: "0%" for k in EDGE_START},
    **{k: "100%" for k in EDGE_END},
}


# region Size
def resolve_size(size_spec: str, natural: Size, container: Size) -> Size:
    """Rendered size of one layer's image.

    ``auto`` on exactly one axis scales that axis by the same factor as the
    explicit one so the image keeps its aspect ratio.
    """
    parts = (size_spec or "").split()
    while len(parts) < 2:
        parts.append(AUTO)
    w_tok, h_tok = parts[0].lower(), parts[1].lower()

    if w_tok == AUTO and h_tok == AUTO:
        return Size(natural.width, natural.height)

    if w_tok == AUTO:
        height = resolve_unit(h_tok, natural.height, container.height)
        if not natural.height:
            return Size(natural.width, height)
        return Size(natural.width * (height / natural.height), height)

    if h_tok == AUTO:
        width = resolve_unit(w_tok, natural.width, container.width)
        if not natural.width:
            return Size(width, natural.height)
        return Size(width, natural.height * (width / natural.width))

    return Size(
        resolve_unit(w_tok, natural.width, container.width),
        resolve_unit(h_tok, natural.height, container.height),
    )
# endregion


# region Position
def normalize_position_token(token: str) -> str:
    token = (token or "").strip().lower()
    return _POSITION_KEYWORDS.get(token, token)


def resolve_position(position_spec: str, size: Size, container: Size) -> Vector2:
    # Every token is resolved against the space left over after the image.
    parts = (position_spec or "").split()
    while len(parts) < 2:
        parts.append("0px")
    x_tok = normalize_position_token(parts[0])
    y_tok = normalize_position_token(parts[1])
    return Vector2(
        x=resolve_unit(x_tok, size.width, container.width - size.width),
        y=resolve_unit(y_tok, size.height, container.height - size.height),
    )
# endregion
