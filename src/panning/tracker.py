"""
Host-side pan tracker.

Owns the accumulated translation of a dragged view for the duration of a
gesture and feeds it to the pure clamp/dismiss functions.
"""
from typing import Optional

from .config import Config
from .directions import DirectionsLike, directions_from
from .dismiss import DismissResult, get_dismiss_velocity
from .display import ScreenMetrics, primary_screen_metrics
from .frame import Frame, PanSample
from .log import get_logger
from .thresholds import ThresholdLike
from .translation import TranslationOptions, get_translation

logger = get_logger(__name__)


class PanTracker:
    """
    Tracks one draggable view across begin/update/end gesture events.

    - begin(): snapshot the current offset as the gesture start
    - update(): clamp and store the new offset
    - end(): dismiss, or spring back to rest
    """

    def __init__(
        self,
        directions: DirectionsLike,
        direction_lock: bool = False,
        threshold: ThresholdLike = None,
        metrics: Optional[ScreenMetrics] = None,
    ):
        self._directions = directions_from(directions)
        self._direction_lock = direction_lock
        self._threshold = threshold
        self._metrics = metrics

        self._translation = Frame.zero()
        self._initial_translation = Frame.zero()

    @classmethod
    def from_config(cls, config: Config, metrics: Optional[ScreenMetrics] = None) -> "PanTracker":
        """Build a tracker from loaded configuration."""
        if metrics is None:
            metrics = primary_screen_metrics(config.screen.metrics())
        return cls(
            config.panning.allowed,
            direction_lock=config.panning.direction_lock,
            threshold=config.dismiss.threshold_for(metrics),
            metrics=metrics,
        )

    @property
    def translation(self) -> Frame:
        return self._translation

    @property
    def options(self) -> TranslationOptions:
        return TranslationOptions(self._translation, self._direction_lock)

    def begin(self) -> None:
        self._initial_translation = self._translation

    def update(self, sample: PanSample) -> Frame:
        """Apply a gesture update and return the offset to render."""
        self._translation = get_translation(
            sample, self._initial_translation, self._directions, self.options
        )
        return self._translation

    def end(self, sample: PanSample) -> DismissResult:
        """Evaluate the release; resets to rest when not dismissed."""
        result = get_dismiss_velocity(
            sample, self._directions, self.options, self._threshold, self._metrics
        )
        if not result.dismissed:
            logger.debug("Not dismissed at %s, returning to rest", self._translation)
            self.reset()
        return result

    def reset(self) -> None:
        self._translation = Frame.zero()
        self._initial_translation = Frame.zero()
