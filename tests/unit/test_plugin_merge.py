"""Merging operator plugin overrides into the default plugin set."""

from __future__ import annotations

import pytest

from schedconf.errors import PluginMergeError
from schedconf.plugins.defaults import default_plugins
from schedconf.plugins.merge import merge_plugin_set, merge_plugins
from schedconf.schema.models import Plugin, Plugins, PluginSet


def _names(plugins: list[Plugin]) -> list[str]:
    return [p.name for p in plugins]


def test_default_plugins_enable_everything_at_multi_point() -> None:
    plugins = default_plugins()
    assert _names(plugins.multi_point.enabled)[0] == "PrioritySort"
    assert _names(plugins.multi_point.enabled)[-1] == "DefaultBinder"
    assert len(plugins.multi_point.enabled) == 20
    assert plugins.filter == PluginSet()


def test_default_plugins_are_fresh_copies() -> None:
    first = default_plugins()
    first.multi_point.enabled.clear()
    assert default_plugins().multi_point.enabled


def test_missing_overrides_return_defaults() -> None:
    assert merge_plugins(default_plugins(), None) == default_plugins()


def test_custom_plugin_replaces_default_in_place() -> None:
    defaults = PluginSet(enabled=[Plugin(name="A"), Plugin(name="B", weight=1)])
    custom = PluginSet(enabled=[Plugin(name="C"), Plugin(name="B", weight=5)])
    merged = merge_plugin_set(defaults, custom)
    assert merged.enabled == [
        Plugin(name="A"),
        Plugin(name="B", weight=5),
        Plugin(name="C"),
    ]


def test_disabled_defaults_are_dropped() -> None:
    defaults = PluginSet(enabled=[Plugin(name="A"), Plugin(name="B")])
    custom = PluginSet(disabled=[Plugin(name="A", weight=4)])
    merged = merge_plugin_set(defaults, custom)
    assert _names(merged.enabled) == ["B"]
    assert merged.disabled == [Plugin(name="A")]


def test_wildcard_disables_all_defaults() -> None:
    defaults = PluginSet(enabled=[Plugin(name="A"), Plugin(name="B")])
    custom = PluginSet(enabled=[Plugin(name="B")], disabled=[Plugin(name="*")])
    merged = merge_plugin_set(defaults, custom)
    assert _names(merged.enabled) == ["B"]
    assert _names(merged.disabled) == ["*"]


def test_extension_points_merge_independently() -> None:
    custom = Plugins(
        score=PluginSet(enabled=[Plugin(name="MyScore", weight=2)]),
        filter=PluginSet(disabled=[Plugin(name="NodePorts")]),
    )
    merged = merge_plugins(default_plugins(), custom)
    assert merged.multi_point == default_plugins().multi_point
    assert merged.score.enabled == [Plugin(name="MyScore", weight=2)]
    assert merged.filter.disabled == [Plugin(name="NodePorts")]


def test_merge_is_idempotent() -> None:
    custom = Plugins(
        multi_point=PluginSet(
            enabled=[Plugin(name="NodeName"), Plugin(name="Extra"), Plugin(name="Extra")],
            disabled=[Plugin(name="ImageLocality")],
        ),
        bind=PluginSet(enabled=[Plugin(name="MyBinder")], disabled=[Plugin(name="*")]),
    )
    once = merge_plugins(default_plugins(), custom)
    twice = merge_plugins(default_plugins(), once)
    assert twice == once


def test_merge_does_not_alias_inputs() -> None:
    custom = Plugins(score=PluginSet(enabled=[Plugin(name="MyScore", weight=1)]))
    merged = merge_plugins(default_plugins(), custom)
    merged.score.enabled[0].weight = 9
    assert custom.score.enabled[0].weight == 1


def test_unnamed_override_is_rejected() -> None:
    custom = Plugins(filter=PluginSet(enabled=[Plugin(name="")]))
    with pytest.raises(PluginMergeError):
        merge_plugins(default_plugins(), custom)
