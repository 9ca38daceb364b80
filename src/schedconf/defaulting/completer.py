"""Ensures every enabled plugin carries a defaulted arguments object."""

from __future__ import annotations

import logging

from schedconf.constants import API_VERSION
from schedconf.plugins.registry import ArgsRegistry, args_kind_for
from schedconf.schema.args import TypedArgs
from schedconf.schema.models import KubeSchedulerProfile, PluginConfig, Plugins

logger = logging.getLogger(__name__)


def plugin_names(plugins: Plugins | None) -> list[str]:
    """Return the sorted, distinct names enabled at any extension point."""
    if plugins is None:
        return []
    names: set[str] = set()
    for _, plugin_set in plugins.plugin_sets():
        names.update(plugin.name for plugin in plugin_set.enabled)
    return sorted(names)


def complete_plugin_config(
    profile: KubeSchedulerProfile, registry: ArgsRegistry
) -> None:
    """Default explicit plugin args, then append args for plugins lacking them.

    Opaque arguments are never touched. Plugins whose argument kind is not
    registered are skipped: they take no configuration or live out of tree.
    """
    existing: set[str] = set()
    for entry in profile.plugin_config:
        existing.add(entry.name)
        if isinstance(entry.args, TypedArgs):
            registry.default(entry.args)

    for name in plugin_names(profile.plugins):
        if name in existing:
            continue
        kind = args_kind_for(name)
        payload = registry.new(kind)
        if payload is None:
            logger.debug("No argument kind registered for plugin %s", name)
            continue
        args = TypedArgs(kind=kind, payload=payload)
        registry.default(args)
        payload.api_version = API_VERSION
        payload.kind = kind
        profile.plugin_config.append(PluginConfig(name=name, args=args))
