"""Configuration helpers for the tool itself."""

from __future__ import annotations

from .defaults import SCHEDULER_DEFAULTS, LeaderElectionDefaults, SchedulerDefaults
from .env import ENV_REGISTRY, EnvSetting, load_environment
from .features import (
    DEFAULT_FEATURE_GATE,
    VOLUME_CAPACITY_PRIORITY,
    FeatureGate,
    feature_gate_from_env,
)

__all__ = [
    "DEFAULT_FEATURE_GATE",
    "ENV_REGISTRY",
    "EnvSetting",
    "FeatureGate",
    "LeaderElectionDefaults",
    "SCHEDULER_DEFAULTS",
    "SchedulerDefaults",
    "VOLUME_CAPACITY_PRIORITY",
    "feature_gate_from_env",
    "load_environment",
]
