"""Default-filling routines for the in-tree plugin argument kinds.

Every routine only touches unset fields, so running it on an operator's
partially filled arguments keeps their values and is idempotent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schedconf.config.defaults import DEFAULT_RESOURCE_WEIGHTS
from schedconf.config.features import VOLUME_CAPACITY_PRIORITY, FeatureGate
from schedconf.constants import MAX_CUSTOM_PRIORITY_SCORE
from schedconf.enums import PodTopologySpreadConstraintsDefaulting, ScoringStrategyType
from schedconf.plugins import names
from schedconf.plugins.registry import args_kind_for
from schedconf.schema.args import (
    DefaultPreemptionArgs,
    InterPodAffinityArgs,
    NodeAffinityArgs,
    NodeResourcesBalancedAllocationArgs,
    NodeResourcesFitArgs,
    PodTopologySpreadArgs,
    ResourceSpec,
    ScoringStrategy,
    UtilizationShapePoint,
    VolumeBindingArgs,
)

if TYPE_CHECKING:
    from schedconf.plugins.registry import ArgsDefaulter
    from schedconf.schema.args import PluginArgs


def default_resource_spec() -> list[ResourceSpec]:
    """Return a fresh copy of the default scored resources."""
    return [ResourceSpec(name=name, weight=weight) for name, weight in DEFAULT_RESOURCE_WEIGHTS]


def _default_weights(resources: list[ResourceSpec]) -> None:
    # An unset or explicit zero weight falls back to 1.
    for resource in resources:
        if resource.weight == 0:
            resource.weight = 1


def set_defaults_default_preemption_args(
    obj: DefaultPreemptionArgs, feature_gate: FeatureGate
) -> None:
    if obj.min_candidate_nodes_percentage is None:
        obj.min_candidate_nodes_percentage = 10
    if obj.min_candidate_nodes_absolute is None:
        obj.min_candidate_nodes_absolute = 100


def set_defaults_inter_pod_affinity_args(
    obj: InterPodAffinityArgs, feature_gate: FeatureGate
) -> None:
    if obj.hard_pod_affinity_weight is None:
        obj.hard_pod_affinity_weight = 1


def set_defaults_volume_binding_args(
    obj: VolumeBindingArgs, feature_gate: FeatureGate
) -> None:
    """Default the bind timeout and, behind a feature gate, the capacity shape."""
    if obj.bind_timeout_seconds is None:
        obj.bind_timeout_seconds = 600
    if not obj.shape and feature_gate.enabled(VOLUME_CAPACITY_PRIORITY):
        obj.shape = [
            UtilizationShapePoint(utilization=0, score=0),
            UtilizationShapePoint(utilization=100, score=MAX_CUSTOM_PRIORITY_SCORE),
        ]


def set_defaults_node_resources_balanced_allocation_args(
    obj: NodeResourcesBalancedAllocationArgs, feature_gate: FeatureGate
) -> None:
    if not obj.resources:
        obj.resources = default_resource_spec()
        return
    _default_weights(obj.resources)


def set_defaults_pod_topology_spread_args(
    obj: PodTopologySpreadArgs, feature_gate: FeatureGate
) -> None:
    if not obj.defaulting_type:
        obj.defaulting_type = PodTopologySpreadConstraintsDefaulting.SYSTEM.value


def set_defaults_node_resources_fit_args(
    obj: NodeResourcesFitArgs, feature_gate: FeatureGate
) -> None:
    if obj.scoring_strategy is None:
        obj.scoring_strategy = ScoringStrategy(
            type=ScoringStrategyType.LEAST_ALLOCATED.value,
            resources=default_resource_spec(),
        )
    if not obj.scoring_strategy.resources:
        obj.scoring_strategy.resources = default_resource_spec()
    _default_weights(obj.scoring_strategy.resources)


IN_TREE_KINDS: tuple[tuple[str, type[PluginArgs], ArgsDefaulter | None], ...] = (
    (
        args_kind_for(names.DEFAULT_PREEMPTION),
        DefaultPreemptionArgs,
        set_defaults_default_preemption_args,
    ),
    (
        args_kind_for(names.INTER_POD_AFFINITY),
        InterPodAffinityArgs,
        set_defaults_inter_pod_affinity_args,
    ),
    (args_kind_for(names.NODE_AFFINITY), NodeAffinityArgs, None),
    (
        args_kind_for(names.NODE_RESOURCES_BALANCED_ALLOCATION),
        NodeResourcesBalancedAllocationArgs,
        set_defaults_node_resources_balanced_allocation_args,
    ),
    (
        args_kind_for(names.NODE_RESOURCES_FIT),
        NodeResourcesFitArgs,
        set_defaults_node_resources_fit_args,
    ),
    (
        args_kind_for(names.POD_TOPOLOGY_SPREAD),
        PodTopologySpreadArgs,
        set_defaults_pod_topology_spread_args,
    ),
    (
        args_kind_for(names.VOLUME_BINDING),
        VolumeBindingArgs,
        set_defaults_volume_binding_args,
    ),
)
