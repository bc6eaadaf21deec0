# bgdrift: seamless drifting CSS background animations
from .effect import StyledElement, drift, drift_all, prepare_drift, start_drift
from .errors import BgDriftError, ConfigurationError
from .models import AnimationPlan, Direction, LayerSpec, Size, Vector2

__version__ = "1.0.0"
