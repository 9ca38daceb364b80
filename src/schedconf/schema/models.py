"""Pydantic schemas for the scheduler configuration document."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from schedconf.enums import EXTENSION_POINTS, ExtensionPoint
from schedconf.schema.args import OpaqueArgs, TypedArgs
from schedconf.schema.base import TypedBaseModel


class Plugin(TypedBaseModel):
    name: str
    weight: int | None = None


class PluginSet(TypedBaseModel):
    enabled: list[Plugin] = Field(default_factory=list)
    disabled: list[Plugin] = Field(default_factory=list)


class Plugins(TypedBaseModel):
    """Plugin sets for every extension point of the scheduling pipeline."""

    multi_point: PluginSet = Field(default_factory=PluginSet)
    pre_filter: PluginSet = Field(default_factory=PluginSet)
    filter: PluginSet = Field(default_factory=PluginSet)
    post_filter: PluginSet = Field(default_factory=PluginSet)
    reserve: PluginSet = Field(default_factory=PluginSet)
    pre_score: PluginSet = Field(default_factory=PluginSet)
    score: PluginSet = Field(default_factory=PluginSet)
    pre_bind: PluginSet = Field(default_factory=PluginSet)
    bind: PluginSet = Field(default_factory=PluginSet)
    post_bind: PluginSet = Field(default_factory=PluginSet)
    permit: PluginSet = Field(default_factory=PluginSet)
    queue_sort: PluginSet = Field(default_factory=PluginSet)

    def get(self, point: ExtensionPoint) -> PluginSet:
        return getattr(self, point.value)

    def set(self, point: ExtensionPoint, plugin_set: PluginSet) -> None:
        setattr(self, point.value, plugin_set)

    def plugin_sets(self) -> list[tuple[ExtensionPoint, PluginSet]]:
        return [(point, self.get(point)) for point in EXTENSION_POINTS]


class PluginConfig(TypedBaseModel):
    name: str
    args: TypedArgs | OpaqueArgs | None = None


class KubeSchedulerProfile(TypedBaseModel):
    scheduler_name: str | None = None
    plugins: Plugins | None = None
    plugin_config: list[PluginConfig] = Field(default_factory=list)


class LeaderElectionConfiguration(TypedBaseModel):
    leader_elect: bool | None = None
    lease_duration: str | None = None
    renew_deadline: str | None = None
    retry_period: str | None = None
    resource_lock: str = ""
    resource_name: str = ""
    resource_namespace: str = ""


class ClientConnectionConfiguration(TypedBaseModel):
    kubeconfig: str = ""
    accept_content_types: str = ""
    content_type: str = ""
    qps: float = 0.0
    burst: int = 0


class KubeSchedulerConfiguration(TypedBaseModel):
    """Top-level scheduler configuration, mutated in place by defaulting."""

    api_version: str | None = None
    kind: str | None = None
    parallelism: int | None = None
    leader_election: LeaderElectionConfiguration = Field(
        default_factory=LeaderElectionConfiguration
    )
    client_connection: ClientConnectionConfiguration = Field(
        default_factory=ClientConnectionConfiguration
    )
    percentage_of_nodes_to_score: int | None = None
    pod_initial_backoff_seconds: int | None = None
    pod_max_backoff_seconds: int | None = None
    enable_profiling: bool | None = None
    enable_contention_profiling: bool | None = None
    delay_cache_until_active: bool | None = None
    profiles: list[KubeSchedulerProfile] = Field(default_factory=list)
    extenders: list[dict[str, Any]] = Field(default_factory=list)
