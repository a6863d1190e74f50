"""
Dismiss thresholds and partial overrides.
"""
from dataclasses import dataclass, fields
from typing import Mapping, Optional, Union

from .display import ScreenMetrics
from .errors import PanningConfigError

DEFAULT_VELOCITY_THRESHOLD = 750.0
DEFAULT_SCREEN_FRACTION = 0.25


def check_number(name: str, value, minimum: float = 0.0, inclusive: bool = True) -> float:
    """
    Validate a numeric config value.

    Raises:
        PanningConfigError: value is not an int/float (bools included) or is
            below the minimum.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise PanningConfigError(f"'{name}' must be a number, got {value!r}")
    if value < minimum or (not inclusive and value == minimum):
        bound = ">=" if inclusive else ">"
        raise PanningConfigError(f"'{name}' must be {bound} {minimum}, got {value}")
    return value


@dataclass(frozen=True)
class DismissThreshold:
    """
    Boundaries past which a drag dismisses the view.

    Attributes:
        velocity: Clamped velocity magnitude (units/sec)
        x: Horizontal translation from the start location
        y: Vertical translation from the start location
    """
    velocity: float
    x: float
    y: float

    def __post_init__(self):
        for f in fields(self):
            check_number(f.name, getattr(self, f.name))


@dataclass(frozen=True)
class DismissThresholdOverride:
    """Same fields as DismissThreshold, each optional."""
    velocity: Optional[float] = None
    x: Optional[float] = None
    y: Optional[float] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                check_number(f.name, value)

    def merged_over(self, defaults: DismissThreshold) -> DismissThreshold:
        """Replace only the fields that are set."""
        return DismissThreshold(
            velocity=defaults.velocity if self.velocity is None else self.velocity,
            x=defaults.x if self.x is None else self.x,
            y=defaults.y if self.y is None else self.y,
        )


ThresholdLike = Union[None, DismissThreshold, DismissThresholdOverride, Mapping[str, float]]


def default_threshold(metrics: ScreenMetrics) -> DismissThreshold:
    """750 units/sec, a quarter of the screen width and of its height."""
    return DismissThreshold(
        velocity=DEFAULT_VELOCITY_THRESHOLD,
        x=metrics.width * DEFAULT_SCREEN_FRACTION,
        y=metrics.height * DEFAULT_SCREEN_FRACTION,
    )


def as_override(threshold: ThresholdLike) -> DismissThresholdOverride:
    """Convert any accepted threshold input into an override."""
    if threshold is None:
        return DismissThresholdOverride()
    if isinstance(threshold, DismissThresholdOverride):
        return threshold
    if isinstance(threshold, DismissThreshold):
        return DismissThresholdOverride(threshold.velocity, threshold.x, threshold.y)

    # Mapping: ignore unknown keys like the YAML loader does
    names = {f.name for f in fields(DismissThresholdOverride)}
    values = {k: v for k, v in threshold.items() if k in names}
    return DismissThresholdOverride(**values)


def resolve_threshold(threshold: ThresholdLike, metrics: ScreenMetrics) -> DismissThreshold:
    """Merge the supplied threshold over the defaults for these metrics."""
    return as_override(threshold).merged_over(default_threshold(metrics))
