"""
Typed errors for the panning package.
"""


class PanningError(Exception):
    """Base error for the package."""


class PanningConfigError(PanningError, ValueError):
    """Invalid configuration value or direction name."""
