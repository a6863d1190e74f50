"""
Translation clamp.
Restricts a drag to the allowed directions and optionally locks it to one axis.
"""
from dataclasses import dataclass, field

from .directions import Direction, DirectionsLike, directions_from
from .frame import Frame, PanSample


@dataclass(frozen=True)
class TranslationOptions:
    """
    Attributes:
        current_translation: Accumulated offset of the dragged view (host-owned)
        direction_lock: Restrict movement to a single axis
    """
    current_translation: Frame = field(default_factory=Frame.zero)
    direction_lock: bool = False


def get_translation_direction_clamp(translation: Frame, options: TranslationOptions) -> Frame:
    """
    Apply the axis lock to an already direction-clamped translation.

    Once an axis has a non-zero accumulated offset, the other axis stays
    at 0. From rest, the axis with the larger movement wins; a diagonal
    tie goes to the vertical axis.
    """
    if not options.direction_lock:
        return translation

    current = options.current_translation
    if current.x != 0:
        return Frame(translation.x, 0.0)
    if current.y != 0:
        return Frame(0.0, translation.y)
    if abs(translation.x) > abs(translation.y):
        return Frame(translation.x, 0.0)
    return Frame(0.0, translation.y)


def _clamp_axis(value: float, negative_allowed: bool, positive_allowed: bool) -> float:
    if negative_allowed and positive_allowed:
        return value
    if negative_allowed:
        return min(0.0, value)
    if positive_allowed:
        return max(0.0, value)
    return 0.0


def get_translation(
    sample: PanSample,
    initial_translation: Frame,
    directions: DirectionsLike,
    options: TranslationOptions,
) -> Frame:
    """
    Compute the displayed offset for a gesture update.

    Args:
        sample: Gesture sample (translation since the gesture started)
        initial_translation: Offset of the view when the gesture started
        directions: Allowed directions
        options: Accumulated translation and direction lock flag

    Returns:
        New offset for the view.
    """
    allowed = directions_from(directions)

    x = _clamp_axis(
        initial_translation.x + sample.translation_x,
        Direction.LEFT in allowed,
        Direction.RIGHT in allowed,
    )
    y = _clamp_axis(
        initial_translation.y + sample.translation_y,
        Direction.UP in allowed,
        Direction.DOWN in allowed,
    )

    return get_translation_direction_clamp(Frame(x, y), options)


clamp_translation = get_translation
