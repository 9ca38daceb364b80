"""Merges operator plugin overrides into the default plugin set."""

from __future__ import annotations

import logging

from schedconf.constants import ALL_PLUGINS
from schedconf.errors import PluginMergeError
from schedconf.schema.models import Plugin, Plugins, PluginSet

logger = logging.getLogger(__name__)


def merge_plugin_set(default_set: PluginSet, custom_set: PluginSet) -> PluginSet:
    """Merge one extension point.

    Default plugins keep their order; a custom entry with the same name
    replaces the default in place, and the remaining custom entries follow.
    Disabling `*` drops every default plugin at this point.
    """
    for plugin in custom_set.enabled + custom_set.disabled:
        if not plugin.name:
            raise PluginMergeError("plugin overrides must name a plugin")

    disabled: list[Plugin] = []
    disabled_names: set[str] = set()
    for plugin in custom_set.disabled + default_set.disabled:
        if plugin.name in disabled_names:
            continue
        disabled.append(Plugin(name=plugin.name))
        disabled_names.add(plugin.name)

    custom_by_name: dict[str, tuple[int, Plugin]] = {}
    for index, plugin in enumerate(custom_set.enabled):
        custom_by_name.setdefault(plugin.name, (index, plugin))

    enabled: list[Plugin] = []
    replaced: set[int] = set()
    if ALL_PLUGINS not in disabled_names:
        for plugin in default_set.enabled:
            if plugin.name in disabled_names:
                continue
            if plugin.name in custom_by_name:
                index, custom = custom_by_name[plugin.name]
                logger.info(
                    "Default plugin is explicitly re-configured; overriding",
                    extra={"context": {"plugin": plugin.name}},
                )
                plugin = custom
                replaced.add(index)
            enabled.append(plugin.model_copy(deep=True))

    # Duplicated custom plugins are kept; the scheduler framework rejects them.
    for index, plugin in enumerate(custom_set.enabled):
        if index not in replaced:
            enabled.append(plugin.model_copy(deep=True))
    return PluginSet(enabled=enabled, disabled=disabled)


def merge_plugins(default_plugins: Plugins, custom_plugins: Plugins | None) -> Plugins:
    """Merge operator overrides into `default_plugins` for every extension point."""
    if custom_plugins is None:
        return default_plugins
    merged = Plugins()
    for point, default_set in default_plugins.plugin_sets():
        merged.set(point, merge_plugin_set(default_set, custom_plugins.get(point)))
    return merged
