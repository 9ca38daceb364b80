"""Centralized semantic enums for the scheduler configuration schema."""

from __future__ import annotations

from enum import Enum


class ExtensionPoint(str, Enum):
    """Named stages of the scheduling pipeline, keyed by their attribute name."""

    MULTI_POINT = "multi_point"
    PRE_FILTER = "pre_filter"
    FILTER = "filter"
    POST_FILTER = "post_filter"
    RESERVE = "reserve"
    PRE_SCORE = "pre_score"
    SCORE = "score"
    PRE_BIND = "pre_bind"
    BIND = "bind"
    POST_BIND = "post_bind"
    PERMIT = "permit"
    QUEUE_SORT = "queue_sort"


EXTENSION_POINTS: tuple[ExtensionPoint, ...] = tuple(ExtensionPoint)


class ScoringStrategyType(str, Enum):
    """Scoring strategies understood by the NodeResourcesFit plugin."""

    LEAST_ALLOCATED = "LeastAllocated"
    MOST_ALLOCATED = "MostAllocated"
    REQUESTED_TO_CAPACITY_RATIO = "RequestedToCapacityRatio"


class PodTopologySpreadConstraintsDefaulting(str, Enum):
    """Where PodTopologySpread takes its default constraints from."""

    SYSTEM = "System"
    LIST = "List"


class ResourceLock(str, Enum):
    """Lock object kinds usable for leader election."""

    LEASES = "leases"
    ENDPOINTS_LEASES = "endpointsleases"
    CONFIGMAPS_LEASES = "configmapsleases"
