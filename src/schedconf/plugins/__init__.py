"""Plugin registry, default plugin set, and override merging."""

from __future__ import annotations

from .defaults import default_plugins
from .merge import merge_plugin_set, merge_plugins
from .registry import ArgsKind, ArgsRegistry, args_kind_for, build_default_registry

__all__ = [
    "ArgsKind",
    "ArgsRegistry",
    "args_kind_for",
    "build_default_registry",
    "default_plugins",
    "merge_plugin_set",
    "merge_plugins",
]
