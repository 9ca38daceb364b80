"""schedconf: defaulting engine for kube-scheduler configuration.

Only the names re-exported here and `schedconf.errors` are public.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
    "ArgsRegistry",
    "FeatureGate",
    "KubeSchedulerConfiguration",
    "build_default_registry",
    "load_configuration",
    "set_defaults_configuration",
]

if TYPE_CHECKING:
    from .config.features import FeatureGate
    from .defaulting.profile import set_defaults_configuration
    from .loader import load_configuration
    from .plugins.registry import ArgsRegistry, build_default_registry
    from .schema.models import KubeSchedulerConfiguration


def __getattr__(name: str) -> Any:
    if name == "ArgsRegistry":
        from .plugins.registry import ArgsRegistry

        return ArgsRegistry
    if name == "build_default_registry":
        from .plugins.registry import build_default_registry

        return build_default_registry
    if name == "FeatureGate":
        from .config.features import FeatureGate

        return FeatureGate
    if name == "KubeSchedulerConfiguration":
        from .schema.models import KubeSchedulerConfiguration

        return KubeSchedulerConfiguration
    if name == "load_configuration":
        from .loader import load_configuration

        return load_configuration
    if name == "set_defaults_configuration":
        from .defaulting.profile import set_defaults_configuration

        return set_defaults_configuration
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
