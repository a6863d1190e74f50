"""
Panning Module

Drag-to-dismiss geometry: direction clamping, axis lock and dismiss decisions.
"""
from .config import Config, load_config
from .directions import Direction, directions_from
from .dismiss import (
    Dismiss,
    DismissResult,
    NoDismissal,
    check_thresholds,
    clamp_velocity,
    evaluate_dismiss,
    get_dismiss_velocity,
    get_velocity_direction_clamp,
)
from .display import ScreenMetrics, primary_screen_metrics
from .errors import PanningConfigError, PanningError
from .frame import DepartureVelocity, Frame, PanSample
from .thresholds import DismissThreshold, DismissThresholdOverride, default_threshold
from .tracker import PanTracker
from .translation import (
    TranslationOptions,
    clamp_translation,
    get_translation,
    get_translation_direction_clamp,
)

__all__ = [
    'Config',
    'load_config',
    'Direction',
    'directions_from',
    'Dismiss',
    'DismissResult',
    'NoDismissal',
    'check_thresholds',
    'clamp_velocity',
    'evaluate_dismiss',
    'get_dismiss_velocity',
    'get_velocity_direction_clamp',
    'ScreenMetrics',
    'primary_screen_metrics',
    'PanningConfigError',
    'PanningError',
    'DepartureVelocity',
    'Frame',
    'PanSample',
    'DismissThreshold',
    'DismissThresholdOverride',
    'default_threshold',
    'PanTracker',
    'TranslationOptions',
    'clamp_translation',
    'get_translation',
    'get_translation_direction_clamp',
]
