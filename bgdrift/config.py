# config.py
import os

DEFAULT_DURATION = "10s"
DEFAULT_DIRECTION = 0

# Fallback start/end position for a layer, and the per-axis padding values
DEFAULT_COORDS = "0px 0px"
DEFAULT_SIZE = "auto"
DEFAULT_POSITION_AXIS = "0px"

# Per-element attribute equivalents of the direction/duration options
DIRECTION_ATTR = "data-bgdrift-direction"
DURATION_ATTR = "data-bgdrift-duration"

# Generated rule/class names are RULE_PREFIX + counter
RULE_PREFIX = "bgdrift"
VENDOR_PREFIXES = ("-webkit-", "-khtml-", "-moz-", "-ms-", "-o-", "")

# Transport timeout for a single HTTP image fetch (seconds)
PROBE_HTTP_TIMEOUT = 10
PROBE_USER_AGENT = "bgdrift/1.0"

HOST = os.environ.get("BGDRIFT_HOST", "0.0.0.0")
PORT = int(os.environ.get("BGDRIFT_PORT", "8081"))
DEBUG = os.environ.get("BGDRIFT_DEBUG", "").lower() in ("1", "true", "yes")
