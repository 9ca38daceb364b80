"""Explicit default settings applied by the scalar defaulter."""

from __future__ import annotations

from dataclasses import dataclass

from schedconf.constants import (
    DEFAULT_PERCENTAGE_OF_NODES_TO_SCORE,
    DEFAULT_SCHEDULER_NAME,
    SCHEDULER_DEFAULT_LOCK_OBJECT_NAME,
    SCHEDULER_DEFAULT_LOCK_OBJECT_NAMESPACE,
)
from schedconf.enums import ResourceLock


@dataclass(frozen=True)
class LeaderElectionDefaults:
    """Generic leader-election timings shared by control-plane components."""

    leader_elect: bool = True
    lease_duration: str = "15s"
    renew_deadline: str = "10s"
    retry_period: str = "2s"
    resource_lock: str = ResourceLock.ENDPOINTS_LEASES.value


@dataclass(frozen=True)
class SchedulerDefaults:
    """Read-only table of every scalar default the scheduler fills in."""

    parallelism: int = 16
    scheduler_name: str = DEFAULT_SCHEDULER_NAME
    percentage_of_nodes_to_score: int = DEFAULT_PERCENTAGE_OF_NODES_TO_SCORE
    resource_lock: str = ResourceLock.LEASES.value
    resource_namespace: str = SCHEDULER_DEFAULT_LOCK_OBJECT_NAMESPACE
    resource_name: str = SCHEDULER_DEFAULT_LOCK_OBJECT_NAME
    content_type: str = "application/vnd.kubernetes.protobuf"
    qps: float = 50.0
    burst: int = 100
    pod_initial_backoff_seconds: int = 1
    pod_max_backoff_seconds: int = 10
    enable_profiling: bool = True
    enable_contention_profiling: bool = True
    leader_election: LeaderElectionDefaults = LeaderElectionDefaults()


SCHEDULER_DEFAULTS = SchedulerDefaults()

DEFAULT_RESOURCE_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("cpu", 1),
    ("memory", 1),
)
"""Resources scored by default, as (name, weight) pairs."""
