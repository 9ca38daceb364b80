"""The built-in plugin set every profile starts from."""

from __future__ import annotations

from schedconf.plugins import names
from schedconf.schema.models import Plugin, Plugins, PluginSet

_DEFAULT_MULTI_POINT: tuple[tuple[str, int | None], ...] = (
    (names.PRIORITY_SORT, None),
    (names.NODE_UNSCHEDULABLE, None),
    (names.NODE_NAME, None),
    (names.TAINT_TOLERATION, 3),
    (names.NODE_AFFINITY, 2),
    (names.NODE_PORTS, None),
    (names.NODE_RESOURCES_FIT, 1),
    (names.VOLUME_RESTRICTIONS, None),
    (names.EBS_LIMITS, None),
    (names.GCE_PD_LIMITS, None),
    (names.NODE_VOLUME_LIMITS, None),
    (names.AZURE_DISK_LIMITS, None),
    (names.VOLUME_BINDING, None),
    (names.VOLUME_ZONE, None),
    (names.POD_TOPOLOGY_SPREAD, 2),
    (names.INTER_POD_AFFINITY, 2),
    (names.DEFAULT_PREEMPTION, None),
    (names.NODE_RESOURCES_BALANCED_ALLOCATION, 1),
    (names.IMAGE_LOCALITY, 1),
    (names.DEFAULT_BINDER, None),
)


def default_plugins() -> Plugins:
    """Return a fresh copy of the default plugins, all enabled at multi-point."""
    return Plugins(
        multi_point=PluginSet(
            enabled=[
                Plugin(name=name, weight=weight) for name, weight in _DEFAULT_MULTI_POINT
            ]
        )
    )
