"""Single-valued defaults for the top-level scheduler configuration."""

from __future__ import annotations

from schedconf.config.defaults import (
    SCHEDULER_DEFAULTS,
    LeaderElectionDefaults,
    SchedulerDefaults,
)
from schedconf.schema.models import (
    ClientConnectionConfiguration,
    KubeSchedulerConfiguration,
    LeaderElectionConfiguration,
)


def set_defaults_parallelism(
    obj: KubeSchedulerConfiguration, defaults: SchedulerDefaults = SCHEDULER_DEFAULTS
) -> None:
    if obj.parallelism is None:
        obj.parallelism = defaults.parallelism


def recommended_leader_election_defaults(
    obj: LeaderElectionConfiguration,
    defaults: LeaderElectionDefaults = SCHEDULER_DEFAULTS.leader_election,
) -> None:
    """Fill the leader-election timings shared by every control-plane component."""
    if obj.lease_duration is None:
        obj.lease_duration = defaults.lease_duration
    if obj.renew_deadline is None:
        obj.renew_deadline = defaults.renew_deadline
    if obj.retry_period is None:
        obj.retry_period = defaults.retry_period
    if not obj.resource_lock:
        obj.resource_lock = defaults.resource_lock
    if obj.leader_elect is None:
        obj.leader_elect = defaults.leader_elect


def set_defaults_leader_election(
    obj: LeaderElectionConfiguration, defaults: SchedulerDefaults = SCHEDULER_DEFAULTS
) -> None:
    # Lease-based locks are cheaper than the generic endpoints+leases default.
    if not obj.resource_lock:
        obj.resource_lock = defaults.resource_lock
    if not obj.resource_namespace:
        obj.resource_namespace = defaults.resource_namespace
    if not obj.resource_name:
        obj.resource_name = defaults.resource_name
    recommended_leader_election_defaults(obj, defaults.leader_election)


def set_defaults_client_connection(
    obj: ClientConnectionConfiguration, defaults: SchedulerDefaults = SCHEDULER_DEFAULTS
) -> None:
    if not obj.content_type:
        obj.content_type = defaults.content_type
    if obj.qps == 0.0:
        obj.qps = defaults.qps
    if obj.burst == 0:
        obj.burst = defaults.burst


def set_defaults_scalars(
    obj: KubeSchedulerConfiguration, defaults: SchedulerDefaults = SCHEDULER_DEFAULTS
) -> None:
    """Apply every scalar default except parallelism.

    Contention profiling is only defaulted once profiling itself is resolved
    and enabled.
    """
    if obj.percentage_of_nodes_to_score is None:
        obj.percentage_of_nodes_to_score = defaults.percentage_of_nodes_to_score

    set_defaults_leader_election(obj.leader_election, defaults)
    set_defaults_client_connection(obj.client_connection, defaults)

    if obj.pod_initial_backoff_seconds is None:
        obj.pod_initial_backoff_seconds = defaults.pod_initial_backoff_seconds
    if obj.pod_max_backoff_seconds is None:
        obj.pod_max_backoff_seconds = defaults.pod_max_backoff_seconds

    if obj.enable_profiling is None:
        obj.enable_profiling = defaults.enable_profiling
    if obj.enable_profiling and obj.enable_contention_profiling is None:
        obj.enable_contention_profiling = defaults.enable_contention_profiling
