"""Typed plugin argument kinds and the typed/opaque argument variant."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, SerializeAsAny

from schedconf.schema.base import TypedBaseModel


class PluginArgs(TypedBaseModel):
    """Base for every registry-known argument kind.

    `api_version` and `kind` stay empty until the completer tags a freshly
    constructed instance with its resolved kind.
    """

    api_version: str | None = None
    kind: str | None = None


class ResourceSpec(TypedBaseModel):
    name: str
    weight: int = 0


class UtilizationShapePoint(TypedBaseModel):
    utilization: int
    score: int


class RequestedToCapacityRatioParam(TypedBaseModel):
    shape: list[UtilizationShapePoint] = Field(default_factory=list)


class ScoringStrategy(TypedBaseModel):
    type: str = ""
    resources: list[ResourceSpec] = Field(default_factory=list)
    requested_to_capacity_ratio: RequestedToCapacityRatioParam | None = None


class DefaultPreemptionArgs(PluginArgs):
    min_candidate_nodes_percentage: int | None = None
    min_candidate_nodes_absolute: int | None = None


class InterPodAffinityArgs(PluginArgs):
    hard_pod_affinity_weight: int | None = None
    ignore_preferred_terms_of_existing_pods: bool = False


class NodeAffinityArgs(PluginArgs):
    added_affinity: dict[str, Any] | None = None


class NodeResourcesBalancedAllocationArgs(PluginArgs):
    resources: list[ResourceSpec] = Field(default_factory=list)


class NodeResourcesFitArgs(PluginArgs):
    ignored_resources: list[str] = Field(default_factory=list)
    ignored_resource_groups: list[str] = Field(default_factory=list)
    scoring_strategy: ScoringStrategy | None = None


class PodTopologySpreadArgs(PluginArgs):
    default_constraints: list[dict[str, Any]] = Field(default_factory=list)
    defaulting_type: str = ""


class VolumeBindingArgs(PluginArgs):
    bind_timeout_seconds: int | None = None
    shape: list[UtilizationShapePoint] = Field(default_factory=list)


class TypedArgs(TypedBaseModel):
    """Arguments whose structure is known to the registry and can be defaulted."""

    kind: str
    payload: SerializeAsAny[PluginArgs]


class OpaqueArgs(TypedBaseModel):
    """Arguments for a kind the registry does not know; kept byte-for-byte."""

    model_config = ConfigDict(frozen=True)

    raw: bytes
