"""
Display metrics collaborator.

Reads the primary screen size from Qt so default dismiss thresholds can be
derived from it. Falls back to a configured size when no QApplication is
running (tests, headless hosts).
"""
from dataclasses import dataclass
from typing import Optional

from PyQt5.QtGui import QGuiApplication
from PyQt5.QtWidgets import QApplication

from .log import get_logger

logger = get_logger(__name__)

DEFAULT_SCREEN_WIDTH = 1280
DEFAULT_SCREEN_HEIGHT = 720


@dataclass(frozen=True)
class ScreenMetrics:
    """Screen size in the same units the gesture samples use."""
    width: float = DEFAULT_SCREEN_WIDTH
    height: float = DEFAULT_SCREEN_HEIGHT


def primary_screen_metrics(fallback: Optional[ScreenMetrics] = None) -> ScreenMetrics:
    """
    Get the primary screen's size.

    Never creates a QApplication; when no GUI application exists (a plain
    QCoreApplication does not count) or it has no screen, the fallback is
    returned instead.

    Args:
        fallback: Metrics to use without a Qt screen. Defaults to
                  ScreenMetrics() (1280x720).
    """
    if fallback is None:
        fallback = ScreenMetrics()

    if not isinstance(QApplication.instance(), QGuiApplication):
        logger.debug("No GUI application running, using fallback metrics %s", fallback)
        return fallback

    screen = QApplication.primaryScreen()
    if screen is None:
        logger.debug("No primary screen, using fallback metrics %s", fallback)
        return fallback

    screen_geo = screen.geometry()
    return ScreenMetrics(width=screen_geo.width(), height=screen_geo.height())
