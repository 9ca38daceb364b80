"""Plugin name collection and plugin args completion."""

from __future__ import annotations

from schedconf.config.features import FeatureGate
from schedconf.constants import API_VERSION
from schedconf.defaulting.completer import complete_plugin_config, plugin_names
from schedconf.plugins.registry import ArgsRegistry
from schedconf.schema.args import (
    DefaultPreemptionArgs,
    OpaqueArgs,
    PluginArgs,
    TypedArgs,
    VolumeBindingArgs,
)
from schedconf.schema.models import (
    KubeSchedulerProfile,
    Plugin,
    PluginConfig,
    Plugins,
    PluginSet,
)


def _profile(*enabled: str, point: str = "filter", **kwargs) -> KubeSchedulerProfile:
    plugins = Plugins(**{point: PluginSet(enabled=[Plugin(name=n) for n in enabled])})
    return KubeSchedulerProfile(plugins=plugins, **kwargs)


def test_plugin_names_of_missing_pipeline_is_empty() -> None:
    assert plugin_names(None) == []
    assert plugin_names(Plugins()) == []


def test_plugin_names_are_distinct_sorted_and_enabled_only() -> None:
    plugins = Plugins(
        multi_point=PluginSet(enabled=[Plugin(name="B"), Plugin(name="A")]),
        score=PluginSet(enabled=[Plugin(name="A", weight=2)]),
        queue_sort=PluginSet(enabled=[Plugin(name="C")]),
        bind=PluginSet(disabled=[Plugin(name="D")]),
    )
    assert plugin_names(plugins) == ["A", "B", "C"]


def test_missing_args_are_appended_in_sorted_order(registry: ArgsRegistry) -> None:
    profile = _profile("VolumeBinding", "ImageLocality", "DefaultPreemption")
    complete_plugin_config(profile, registry)

    assert [entry.name for entry in profile.plugin_config] == [
        "DefaultPreemption",
        "VolumeBinding",
    ]
    args = profile.plugin_config[1].args
    assert isinstance(args, TypedArgs)
    assert args.kind == "VolumeBindingArgs"
    assert args.payload == VolumeBindingArgs(
        api_version=API_VERSION,
        kind="VolumeBindingArgs",
        bind_timeout_seconds=600,
    )


def test_existing_typed_args_are_defaulted_not_replaced(registry: ArgsRegistry) -> None:
    payload = DefaultPreemptionArgs(min_candidate_nodes_absolute=5)
    profile = _profile(
        "DefaultPreemption",
        plugin_config=[
            PluginConfig(
                name="DefaultPreemption",
                args=TypedArgs(kind="DefaultPreemptionArgs", payload=payload),
            )
        ],
    )
    complete_plugin_config(profile, registry)

    assert len(profile.plugin_config) == 1
    assert profile.plugin_config[0].args.payload is payload
    assert payload.min_candidate_nodes_absolute == 5
    assert payload.min_candidate_nodes_percentage == 10


def test_opaque_args_are_left_untouched(registry: ArgsRegistry) -> None:
    opaque = OpaqueArgs(raw=b'{"scoringStrategy": "bogus"}')
    profile = _profile(
        "NodeResourcesFit",
        plugin_config=[PluginConfig(name="NodeResourcesFit", args=opaque)],
    )
    complete_plugin_config(profile, registry)

    assert profile.plugin_config == [PluginConfig(name="NodeResourcesFit", args=opaque)]


def test_entries_for_disabled_plugins_are_still_defaulted(registry: ArgsRegistry) -> None:
    profile = KubeSchedulerProfile(
        plugin_config=[
            PluginConfig(
                name="VolumeBinding",
                args=TypedArgs(kind="VolumeBindingArgs", payload=VolumeBindingArgs()),
            ),
            PluginConfig(name="Custom"),
        ]
    )
    complete_plugin_config(profile, registry)
    assert profile.plugin_config[0].args.payload.bind_timeout_seconds == 600
    assert profile.plugin_config[1].args is None


def test_unregistered_plugins_are_skipped(registry: ArgsRegistry) -> None:
    profile = _profile("MyOutOfTreePlugin", "NodeName", point="score")
    complete_plugin_config(profile, registry)
    assert profile.plugin_config == []


class _CountingArgs(PluginArgs):
    calls: int = 0


def test_registry_defaulter_runs_once_per_new_entry() -> None:
    registry = ArgsRegistry(FeatureGate())

    def count(obj: _CountingArgs, feature_gate: FeatureGate) -> None:
        obj.calls += 1

    registry.register("CountingArgs", _CountingArgs, count)
    profile = _profile("Counting", point="permit")
    complete_plugin_config(profile, registry)

    assert profile.plugin_config[0].args.payload.calls == 1
