# errors.py


class BgDriftError(Exception):
    """Base class for errors raised by bgdrift."""


class ConfigurationError(BgDriftError, ValueError):
    """An option value makes the whole animation meaningless (e.g. a bad duration)."""


class SlotAlreadySettled(BgDriftError, RuntimeError):
    """A layer slot of an AnimationPlan was written twice."""


class StyleRuleRejected(BgDriftError, ValueError):
    """A stylesheet refused a rule, typically an unsupported vendor prefix."""


class ImageProbeError(BgDriftError, OSError):
    """An image source could not be fetched or decoded."""
