"""Profile and top-level configuration defaulting."""

from __future__ import annotations

from collections.abc import Callable
import logging

from schedconf.config.defaults import SCHEDULER_DEFAULTS, SchedulerDefaults
from schedconf.defaulting.completer import complete_plugin_config
from schedconf.defaulting.scalar import set_defaults_parallelism, set_defaults_scalars
from schedconf.plugins.defaults import default_plugins
from schedconf.plugins.merge import merge_plugins
from schedconf.plugins.registry import ArgsRegistry, build_default_registry
from schedconf.schema.models import (
    KubeSchedulerConfiguration,
    KubeSchedulerProfile,
    Plugins,
)

logger = logging.getLogger(__name__)

MergeFunc = Callable[[Plugins, Plugins | None], Plugins]


def set_defaults_profile(
    profile: KubeSchedulerProfile,
    registry: ArgsRegistry,
    merge: MergeFunc = merge_plugins,
) -> None:
    """Merge the default plugins into `profile` and complete its plugin args.

    Errors raised by `merge` propagate unchanged.
    """
    profile.plugins = merge(default_plugins(), profile.plugins)
    complete_plugin_config(profile, registry)


def set_defaults_configuration(
    obj: KubeSchedulerConfiguration,
    registry: ArgsRegistry | None = None,
    defaults: SchedulerDefaults = SCHEDULER_DEFAULTS,
    merge: MergeFunc = merge_plugins,
) -> KubeSchedulerConfiguration:
    """Fill every unset field of `obj` in place and return it.

    Running this twice leaves an already defaulted configuration unchanged.
    """
    if registry is None:
        registry = build_default_registry()

    set_defaults_parallelism(obj, defaults)

    if not obj.profiles:
        obj.profiles.append(KubeSchedulerProfile())
    # Only one profile gets a default name; validation rejects unnamed ones.
    if len(obj.profiles) == 1 and obj.profiles[0].scheduler_name is None:
        obj.profiles[0].scheduler_name = defaults.scheduler_name

    for profile in obj.profiles:
        set_defaults_profile(profile, registry, merge)
        logger.debug(
            "Defaulted profile %s with %d plugin configs",
            profile.scheduler_name,
            len(profile.plugin_config),
        )

    set_defaults_scalars(obj, defaults)
    return obj
