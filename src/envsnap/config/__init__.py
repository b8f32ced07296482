"""Default value tables."""

from .defaults import MODE_DEFAULTS, ModeDefaults, defaults_for

__all__ = ["MODE_DEFAULTS", "ModeDefaults", "defaults_for"]
