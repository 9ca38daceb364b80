"""Global constants shared by the scheduler configuration schema."""

from __future__ import annotations

GROUP_NAME = "kubescheduler.config.k8s.io"
API_VERSION = f"{GROUP_NAME}/v1"
"""apiVersion stamped onto configuration documents and typed plugin args."""
CONFIGURATION_KIND = "KubeSchedulerConfiguration"

ARGS_KIND_SUFFIX = "Args"
"""Suffix appended to a plugin name to derive its argument kind."""

DEFAULT_SCHEDULER_NAME = "default-scheduler"
SCHEDULER_DEFAULT_LOCK_OBJECT_NAMESPACE = "kube-system"
SCHEDULER_DEFAULT_LOCK_OBJECT_NAME = "kube-scheduler"

DEFAULT_PERCENTAGE_OF_NODES_TO_SCORE = 0
"""Zero lets the scheduler pick an adaptive percentage based on cluster size."""

MAX_CUSTOM_PRIORITY_SCORE = 10

ALL_PLUGINS = "*"
"""Wildcard plugin name that disables every default plugin at an extension point."""
