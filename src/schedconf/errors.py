"""Typed error taxonomy for configuration loading and defaulting.

Every error raised on purpose by this package derives from `SchedConfError`,
so the process bootstrap can catch one class and abort startup.
"""

from __future__ import annotations

__all__ = [
    "ConfigLoadError",
    "FeatureGateError",
    "PluginMergeError",
    "RegistryError",
    "SchedConfError",
    "format_error",
]


class SchedConfError(Exception):
    """Base class for all operator-facing errors."""


class ConfigLoadError(SchedConfError):
    """The configuration document is missing, unreadable, or malformed."""


class PluginMergeError(SchedConfError):
    """Operator plugin overrides cannot be merged with the default plugin set."""


class RegistryError(SchedConfError):
    """An argument kind was registered twice or with an unusable factory."""


class FeatureGateError(SchedConfError):
    """A feature gate name is unknown or its value cannot be parsed."""


def format_error(e: BaseException) -> str:
    """Return a short, uniform message like 'ConfigLoadError: detail'."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
