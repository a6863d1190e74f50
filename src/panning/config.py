"""
Config loader for panning.
Loads YAML configuration with dataclass validation.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import yaml

from .directions import Direction, directions_from
from .display import DEFAULT_SCREEN_HEIGHT, DEFAULT_SCREEN_WIDTH, ScreenMetrics
from .errors import PanningConfigError
from .log import get_logger
from .thresholds import (
    DEFAULT_SCREEN_FRACTION,
    DEFAULT_VELOCITY_THRESHOLD,
    DismissThreshold,
    check_number,
)

logger = get_logger(__name__)


@dataclass
class DismissConfig:
    velocity: float = DEFAULT_VELOCITY_THRESHOLD  # units/sec
    x_fraction: float = DEFAULT_SCREEN_FRACTION   # x threshold = screen width * x_fraction
    y_fraction: float = DEFAULT_SCREEN_FRACTION   # y threshold = screen height * y_fraction

    def __post_init__(self):
        for name in ("velocity", "x_fraction", "y_fraction"):
            check_number(f"dismiss.{name}", getattr(self, name))

    def threshold_for(self, metrics: ScreenMetrics) -> DismissThreshold:
        """Thresholds for a screen of the given size."""
        return DismissThreshold(
            velocity=self.velocity,
            x=metrics.width * self.x_fraction,
            y=metrics.height * self.y_fraction,
        )


@dataclass
class ScreenConfig:
    # Used only when no Qt screen is available
    width: int = DEFAULT_SCREEN_WIDTH
    height: int = DEFAULT_SCREEN_HEIGHT

    def __post_init__(self):
        check_number("screen.width", self.width, inclusive=False)
        check_number("screen.height", self.height, inclusive=False)

    def metrics(self) -> ScreenMetrics:
        return ScreenMetrics(width=self.width, height=self.height)


@dataclass
class PanConfig:
    directions: List[str] = field(default_factory=lambda: ["up", "down", "left", "right"])  # Any of up/down/left/right
    direction_lock: bool = False

    def __post_init__(self):
        directions_from(self.directions)

    @property
    def allowed(self) -> Direction:
        return directions_from(self.directions)


@dataclass
class Config:
    dismiss: DismissConfig = field(default_factory=DismissConfig)
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    panning: PanConfig = field(default_factory=PanConfig)


def _dict_to_dataclass(cls, data: dict):
    """Convert a dict to a dataclass, ignoring unknown keys."""
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise PanningConfigError(f"Expected a mapping for {cls.__name__}, got {type(data).__name__}")
    field_names = {f.name for f in cls.__dataclass_fields__.values()}
    filtered = {k: v for k, v in data.items() if k in field_names}
    return cls(**filtered)


def load_config(config_path: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default config.yaml
                    in project root.

    Returns:
        Config dataclass with all settings.
    """
    if config_path is None:
        # Default to config.yaml in project root
        config_path = Path(__file__).parent.parent.parent / "config.yaml"

    config_path = Path(config_path)

    if not config_path.exists():
        logger.debug("Config file %s not found, using defaults", config_path)
        return Config()

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise PanningConfigError(f"Config file {config_path} must contain a mapping")

    return Config(
        dismiss=_dict_to_dataclass(DismissConfig, data.get('dismiss')),
        screen=_dict_to_dataclass(ScreenConfig, data.get('screen')),
        panning=_dict_to_dataclass(PanConfig, data.get('panning')),
    )
