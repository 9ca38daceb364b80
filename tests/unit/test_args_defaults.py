"""Defaulting of the in-tree plugin argument kinds."""

from __future__ import annotations

from schedconf.plugins.registry import ArgsRegistry
from schedconf.schema.args import (
    DefaultPreemptionArgs,
    InterPodAffinityArgs,
    NodeAffinityArgs,
    NodeResourcesBalancedAllocationArgs,
    NodeResourcesFitArgs,
    PluginArgs,
    PodTopologySpreadArgs,
    ResourceSpec,
    ScoringStrategy,
    TypedArgs,
    UtilizationShapePoint,
    VolumeBindingArgs,
)


def _default(registry: ArgsRegistry, payload: PluginArgs) -> PluginArgs:
    registry.default(TypedArgs(kind=type(payload).__name__, payload=payload))
    return payload


def test_default_preemption(registry: ArgsRegistry) -> None:
    args = _default(registry, DefaultPreemptionArgs())
    assert args == DefaultPreemptionArgs(
        min_candidate_nodes_percentage=10, min_candidate_nodes_absolute=100
    )


def test_default_preemption_keeps_operator_values(registry: ArgsRegistry) -> None:
    args = _default(registry, DefaultPreemptionArgs(min_candidate_nodes_percentage=50))
    assert args.min_candidate_nodes_percentage == 50
    assert args.min_candidate_nodes_absolute == 100


def test_inter_pod_affinity(registry: ArgsRegistry) -> None:
    assert _default(registry, InterPodAffinityArgs()).hard_pod_affinity_weight == 1
    assert (
        _default(registry, InterPodAffinityArgs(hard_pod_affinity_weight=5))
        .hard_pod_affinity_weight
        == 5
    )


def test_node_affinity_has_nothing_to_default(registry: ArgsRegistry) -> None:
    assert _default(registry, NodeAffinityArgs()) == NodeAffinityArgs()


def test_volume_binding_shape_stays_empty_without_gate(registry: ArgsRegistry) -> None:
    args = _default(registry, VolumeBindingArgs())
    assert args.bind_timeout_seconds == 600
    assert args.shape == []


def test_volume_binding_shape_with_gate(capacity_registry: ArgsRegistry) -> None:
    args = _default(capacity_registry, VolumeBindingArgs())
    assert args.shape == [
        UtilizationShapePoint(utilization=0, score=0),
        UtilizationShapePoint(utilization=100, score=10),
    ]


def test_volume_binding_keeps_explicit_shape(capacity_registry: ArgsRegistry) -> None:
    shape = [UtilizationShapePoint(utilization=50, score=5)]
    args = _default(
        capacity_registry, VolumeBindingArgs(bind_timeout_seconds=30, shape=shape)
    )
    assert args.bind_timeout_seconds == 30
    assert args.shape == shape


def test_balanced_allocation_defaults_resources(registry: ArgsRegistry) -> None:
    args = _default(registry, NodeResourcesBalancedAllocationArgs())
    assert args.resources == [
        ResourceSpec(name="cpu", weight=1),
        ResourceSpec(name="memory", weight=1),
    ]


def test_balanced_allocation_normalizes_zero_weights(registry: ArgsRegistry) -> None:
    args = _default(
        registry,
        NodeResourcesBalancedAllocationArgs(
            resources=[
                ResourceSpec(name="cpu", weight=0),
                ResourceSpec(name="nvidia.com/gpu", weight=3),
            ]
        ),
    )
    assert [r.weight for r in args.resources] == [1, 3]


def test_default_resources_are_not_shared(registry: ArgsRegistry) -> None:
    first = _default(registry, NodeResourcesBalancedAllocationArgs())
    second = _default(registry, NodeResourcesBalancedAllocationArgs())
    first.resources[0].weight = 7
    assert second.resources[0].weight == 1


def test_pod_topology_spread(registry: ArgsRegistry) -> None:
    assert _default(registry, PodTopologySpreadArgs()).defaulting_type == "System"
    assert (
        _default(registry, PodTopologySpreadArgs(defaulting_type="List")).defaulting_type
        == "List"
    )


def test_node_resources_fit_defaults_strategy(registry: ArgsRegistry) -> None:
    args = _default(registry, NodeResourcesFitArgs())
    assert args.scoring_strategy == ScoringStrategy(
        type="LeastAllocated",
        resources=[
            ResourceSpec(name="cpu", weight=1),
            ResourceSpec(name="memory", weight=1),
        ],
    )


def test_node_resources_fit_fills_strategy_resources(registry: ArgsRegistry) -> None:
    args = _default(
        registry,
        NodeResourcesFitArgs(scoring_strategy=ScoringStrategy(type="MostAllocated")),
    )
    assert args.scoring_strategy is not None
    assert args.scoring_strategy.type == "MostAllocated"
    assert [r.name for r in args.scoring_strategy.resources] == ["cpu", "memory"]


def test_node_resources_fit_normalizes_weights(registry: ArgsRegistry) -> None:
    args = _default(
        registry,
        NodeResourcesFitArgs(
            scoring_strategy=ScoringStrategy(
                type="LeastAllocated",
                resources=[
                    ResourceSpec(name="cpu", weight=0),
                    ResourceSpec(name="memory", weight=3),
                ],
            )
        ),
    )
    assert args.scoring_strategy is not None
    assert [r.weight for r in args.scoring_strategy.resources] == [1, 3]
