# probe.py: natural pixel size of a background image source
# deps: requests, pillow

from __future__ import annotations
import asyncio
import base64
import io
import logging
from typing import Awaitable, Callable, Optional
from urllib.parse import unquote, unquote_to_bytes, urljoin, urlparse

import requests
from PIL import Image

from .config import PROBE_HTTP_TIMEOUT, PROBE_USER_AGENT
from .errors import ImageProbeError
from .models import Size

logger = logging.getLogger(__name__)

Probe = Callable[[str], Awaitable[Size]]


# region Source Loading
def _decode_data_uri(source: str) -> bytes:
    header, sep, payload = source[len("data:"):].partition(",")
    if not sep:
        raise ImageProbeError("malformed data URI")
    if header.lower().endswith(";base64"):
        try:
            return base64.b64decode(payload, validate=False)
        except ValueError as e:
            raise ImageProbeError(f"bad base64 payload: {e}") from e
    return unquote_to_bytes(payload)


def _fetch_http(url: str) -> bytes:
    r = requests.get(url, timeout=PROBE_HTTP_TIMEOUT, headers={"User-Agent": PROBE_USER_AGENT})
    r.raise_for_status()
    return r.content


def load_source(source: str, base_url: Optional[str] = None, allow_local: bool = True) -> bytes:
    """Raw bytes behind a ``url(...)`` target: data URI, http(s), file:// or local path.

    With ``allow_local=False`` only data URIs and http(s) are read; file URLs
    and plain paths raise ImageProbeError.
    """
    source = source.strip()
    if source.lower().startswith("data:"):
        return _decode_data_uri(source)

    if base_url and not urlparse(source).scheme:
        source = urljoin(base_url, source)

    scheme = urlparse(source).scheme.lower()
    if scheme in ("http", "https"):
        return _fetch_http(source)
    if scheme == "file":
        path = unquote(urlparse(source).path)
    elif scheme and len(scheme) > 1:
        raise ImageProbeError(f"unsupported image source scheme: {scheme}")
    else:
        path = source  # plain path (a one-letter "scheme" is a Windows drive)
    if not allow_local:
        raise ImageProbeError(f"local image sources are not allowed: {source[:80]}")
    with open(path, "rb") as f:
        return f.read()
# endregion


# region Probing
def read_image_size(source: str, base_url: Optional[str] = None, allow_local: bool = True) -> Size:
    data = load_source(source, base_url, allow_local)
    with Image.open(io.BytesIO(data)) as im:
        width, height = im.size
    return Size(width=float(width), height=float(height))


def make_probe(base_url: Optional[str] = None, allow_local: bool = True) -> Probe:
    async def probe(source: str) -> Size:
        logger.debug("Probing image %s", source[:80])
        return await asyncio.to_thread(read_image_size, source, base_url, allow_local)

    return probe


probe_image_size = make_probe()
# endregion
