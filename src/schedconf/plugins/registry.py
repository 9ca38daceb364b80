"""Registry mapping argument kinds to their type and default-filling routine."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
import threading
from types import MappingProxyType

from schedconf.config.features import DEFAULT_FEATURE_GATE, FeatureGate
from schedconf.constants import ARGS_KIND_SUFFIX
from schedconf.errors import RegistryError
from schedconf.schema.args import PluginArgs, TypedArgs

ArgsDefaulter = Callable[[PluginArgs, FeatureGate], None]


def args_kind_for(plugin_name: str) -> str:
    """Return the argument kind name derived from a plugin name."""
    return f"{plugin_name}{ARGS_KIND_SUFFIX}"


@dataclass(frozen=True)
class ArgsKind:
    """One registered argument kind."""

    kind: str
    args_type: type[PluginArgs]
    defaulter: ArgsDefaulter | None = None


class ArgsRegistry:
    """Explicit kind -> (type, defaulter) mapping consulted while defaulting.

    Registration swaps in a new read-only snapshot under a lock, so lookups
    never lock and several configurations can be defaulted concurrently
    against the same registry. Out-of-tree kinds register themselves before
    the defaulting pass runs.
    """

    def __init__(self, feature_gate: FeatureGate | None = None) -> None:
        self._feature_gate = feature_gate or DEFAULT_FEATURE_GATE
        self._kinds: Mapping[str, ArgsKind] = MappingProxyType({})
        self._lock = threading.Lock()

    @property
    def feature_gate(self) -> FeatureGate:
        return self._feature_gate

    def register(
        self,
        kind: str,
        args_type: type[PluginArgs],
        defaulter: ArgsDefaulter | None = None,
    ) -> None:
        if not kind:
            raise RegistryError("argument kind must not be empty")
        if not (isinstance(args_type, type) and issubclass(args_type, PluginArgs)):
            raise RegistryError(f"{kind}: {args_type!r} is not a PluginArgs type")
        with self._lock:
            if kind in self._kinds:
                raise RegistryError(f"argument kind {kind!r} is already registered")
            updated = dict(self._kinds)
            updated[kind] = ArgsKind(kind=kind, args_type=args_type, defaulter=defaulter)
            self._kinds = MappingProxyType(updated)

    def has(self, kind: str) -> bool:
        return kind in self._kinds

    def kinds(self) -> list[str]:
        return sorted(self._kinds)

    def lookup(self, kind: str) -> ArgsKind | None:
        return self._kinds.get(kind)

    def new(self, kind: str) -> PluginArgs | None:
        """Return a zero-value instance of `kind`, or None when it is unknown."""
        spec = self._kinds.get(kind)
        if spec is None:
            return None
        return spec.args_type()

    def default(self, args: TypedArgs) -> None:
        """Fill unset fields of `args.payload` in place; unknown kinds are left as is."""
        spec = self._kinds.get(args.kind)
        if spec is None or spec.defaulter is None:
            return
        if not isinstance(args.payload, spec.args_type):
            raise RegistryError(
                f"{args.kind}: payload is {type(args.payload).__name__}, "
                f"expected {spec.args_type.__name__}"
            )
        spec.defaulter(args.payload, self._feature_gate)


def build_default_registry(feature_gate: FeatureGate | None = None) -> ArgsRegistry:
    """Return a registry holding every in-tree argument kind."""
    from schedconf.plugins.args_defaults import IN_TREE_KINDS

    registry = ArgsRegistry(feature_gate)
    for kind, args_type, defaulter in IN_TREE_KINDS:
        registry.register(kind, args_type, defaulter)
    return registry


__all__ = [
    "ArgsDefaulter",
    "ArgsKind",
    "ArgsRegistry",
    "args_kind_for",
    "build_default_registry",
]
