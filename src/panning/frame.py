"""
Plain value types exchanged with the host: offsets, gesture samples and
departure velocities.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Frame:
    """A 2-D offset or velocity. Units are whatever the host feeds in."""
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Frame":
        return cls(0.0, 0.0)


@dataclass(frozen=True)
class PanSample:
    """
    One update from the gesture recognizer.

    Attributes:
        translation_x: Horizontal translation since the gesture started
        translation_y: Vertical translation since the gesture started
        velocity_x: Instantaneous horizontal velocity (units/sec)
        velocity_y: Instantaneous vertical velocity (units/sec)
    """
    translation_x: float = 0.0
    translation_y: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0


@dataclass
class DepartureVelocity:
    """
    Velocity handed to the exit animation when a drag dismisses the view.

    A component left as None was never derived (e.g. a purely horizontal
    drag only produces x).
    """
    x: Optional[float] = None
    y: Optional[float] = None

    def as_frame(self) -> Frame:
        """Return a full Frame, treating unset components as 0."""
        return Frame(self.x or 0.0, self.y or 0.0)
