"""
Dismiss evaluation.

Decides, at the end of a drag, whether the view should be dismissed and with
which velocity the exit animation should start.
"""
from dataclasses import dataclass, field
from typing import Optional, Union
import math

from .directions import Direction, DirectionsLike, directions_from
from .display import ScreenMetrics, primary_screen_metrics
from .frame import DepartureVelocity, Frame, PanSample
from .log import get_logger
from .thresholds import DismissThreshold, ThresholdLike, resolve_threshold
from .translation import TranslationOptions

logger = get_logger(__name__)


@dataclass(frozen=True)
class NoDismissal:
    """The drag did not pass any threshold; the host should spring back."""
    dismissed: bool = field(default=False, init=False)


@dataclass(frozen=True)
class Dismiss:
    """The drag passed a threshold; velocity seeds the exit animation."""
    velocity: DepartureVelocity
    dismissed: bool = field(default=True, init=False)


DismissResult = Union[NoDismissal, Dismiss]


@dataclass(frozen=True)
class ThresholdCheck:
    velocity_passed: bool
    x_passed: bool
    y_passed: bool

    @property
    def any_passed(self) -> bool:
        return self.velocity_passed or self.x_passed or self.y_passed


def get_velocity_direction_clamp(sample: PanSample, directions: DirectionsLike) -> Frame:
    """Zero every velocity component that points in a disallowed direction."""
    allowed = directions_from(directions)
    x = 0.0
    y = 0.0

    if (Direction.LEFT in allowed and sample.velocity_x < 0) or \
            (Direction.RIGHT in allowed and sample.velocity_x > 0):
        x = sample.velocity_x
    if (Direction.UP in allowed and sample.velocity_y < 0) or \
            (Direction.DOWN in allowed and sample.velocity_y > 0):
        y = sample.velocity_y

    return Frame(x, y)


clamp_velocity = get_velocity_direction_clamp


def check_thresholds(
    directions: DirectionsLike,
    velocity: float,
    threshold: DismissThreshold,
    options: TranslationOptions,
) -> ThresholdCheck:
    """
    Evaluate the three dismiss criteria.

    Translation criteria use the accumulated translation, not the sample.
    """
    allowed = directions_from(directions)
    current = options.current_translation

    velocity_passed = velocity > threshold.velocity
    x_passed = (Direction.RIGHT in allowed and current.x > threshold.x) or \
        (Direction.LEFT in allowed and -current.x > threshold.x)
    y_passed = (Direction.DOWN in allowed and current.y > threshold.y) or \
        (Direction.UP in allowed and -current.y > threshold.y)

    return ThresholdCheck(velocity_passed, x_passed, y_passed)


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def _departure_velocity(sample: PanSample, check: ThresholdCheck, velocity_threshold: float) -> DepartureVelocity:
    if check.velocity_passed:
        # Raw velocity, not the clamped one
        return DepartureVelocity(sample.velocity_x, sample.velocity_y)

    tx = sample.translation_x
    ty = sample.translation_y
    if tx != 0 and ty != 0:
        # Keep the drag's direction, dominant axis at exactly the threshold
        if abs(tx) > abs(ty):
            return DepartureVelocity(
                x=_sign(tx) * velocity_threshold,
                y=velocity_threshold * ty / abs(tx),
            )
        return DepartureVelocity(
            x=velocity_threshold * tx / abs(ty),
            y=_sign(ty) * velocity_threshold,
        )
    if tx != 0:
        return DepartureVelocity(x=_sign(tx) * velocity_threshold)
    return DepartureVelocity(y=_sign(ty) * velocity_threshold)


def get_dismiss_velocity(
    sample: PanSample,
    directions: DirectionsLike,
    options: TranslationOptions,
    threshold: ThresholdLike = None,
    metrics: Optional[ScreenMetrics] = None,
) -> DismissResult:
    """
    Decide whether a drag dismisses the view.

    Args:
        sample: Gesture sample at release (raw translation and velocity)
        directions: Allowed directions
        options: Accumulated translation and direction lock flag
        threshold: Partial or full thresholds merged over the defaults
        metrics: Screen size for the default x/y thresholds. Queried from
                 the display when omitted.

    Returns:
        Dismiss(velocity) or NoDismissal().
    """
    if metrics is None:
        metrics = primary_screen_metrics()
    resolved = resolve_threshold(threshold, metrics)

    clamped = get_velocity_direction_clamp(sample, directions)
    magnitude = math.sqrt(clamped.x ** 2 + clamped.y ** 2)
    check = check_thresholds(directions, magnitude, resolved, options)

    if not check.any_passed:
        return NoDismissal()

    velocity = _departure_velocity(sample, check, resolved.velocity)

    if options.direction_lock:
        current = options.current_translation
        if current.x != 0:
            velocity.y = 0.0
        elif current.y != 0:
            velocity.x = 0.0

    logger.debug(
        "Dismiss: velocity=%s x=%s y=%s -> departure (%s, %s)",
        check.velocity_passed, check.x_passed, check.y_passed, velocity.x, velocity.y,
    )
    return Dismiss(velocity)


evaluate_dismiss = get_dismiss_velocity
