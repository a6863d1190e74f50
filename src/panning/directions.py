"""
Pan directions.

A set of allowed directions is a combination of Direction flags, so
membership tests are plain bit operations.
"""
from enum import Flag
from typing import Iterable, Union

from .errors import PanningConfigError


class Direction(Flag):
    """Directions a view may be dragged in."""
    NONE = 0
    UP = 1
    DOWN = 2
    LEFT = 4
    RIGHT = 8

    HORIZONTAL = LEFT | RIGHT
    VERTICAL = UP | DOWN
    ALL = UP | DOWN | LEFT | RIGHT

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """Parse a single direction name such as 'up' or 'LEFT'."""
        key = name.strip().upper()
        if key not in ("UP", "DOWN", "LEFT", "RIGHT"):
            raise PanningConfigError(f"Unknown pan direction: {name!r}")
        return cls[key]


DirectionsLike = Union[None, Direction, str, Iterable[Union[Direction, str]]]


def directions_from(value: DirectionsLike) -> Direction:
    """
    Normalize any accepted directions input into a Direction flag.

    Args:
        value: None, a Direction, a direction name, or an iterable of
               names/Directions. Order and duplicates do not matter.

    Returns:
        Combined Direction flag (Direction.NONE for None or empty input).
    """
    if value is None:
        return Direction.NONE
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        return Direction.parse(value)

    result = Direction.NONE
    for item in value:
        if isinstance(item, Direction):
            result |= item
        elif isinstance(item, str):
            result |= Direction.parse(item)
        else:
            raise PanningConfigError(f"Unsupported pan direction: {item!r}")
    return result
