"""Feature gates consulted while defaulting plugin arguments."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from schedconf.config.env import FEATURE_GATES_ENV, load_environment, setting
from schedconf.errors import FeatureGateError

VOLUME_CAPACITY_PRIORITY = "VolumeCapacityPriority"

KNOWN_FEATURES: Mapping[str, bool] = MappingProxyType(
    {
        VOLUME_CAPACITY_PRIORITY: False,
    }
)
"""Every feature this package understands, mapped to its default state."""

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class FeatureGate:
    """Boolean oracle keyed by feature name.

    Overrides are fixed at construction; `enabled` is evaluated on every call
    so defaulters always see the gate the caller handed in.
    """

    def __init__(self, overrides: Mapping[str, bool] | None = None) -> None:
        overrides = dict(overrides or {})
        unknown = sorted(set(overrides) - set(KNOWN_FEATURES))
        if unknown:
            raise FeatureGateError(f"unrecognized feature gate: {', '.join(unknown)}")
        self._state = {**KNOWN_FEATURES, **overrides}

    def enabled(self, name: str) -> bool:
        try:
            return self._state[name]
        except KeyError:
            raise FeatureGateError(f"feature {name!r} is not known") from None

    def as_dict(self) -> dict[str, bool]:
        return dict(self._state)

    @classmethod
    def parse(cls, spec: str) -> FeatureGate:
        """Build a gate from a `Name=bool,Name=bool` string."""
        overrides: dict[str, bool] = {}
        for item in spec.split(","):
            item = item.strip()
            if not item:
                continue
            name, sep, raw = item.partition("=")
            if not sep:
                raise FeatureGateError(f"missing bool value for {name.strip()!r}")
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                overrides[name.strip()] = True
            elif value in _FALSE_VALUES:
                overrides[name.strip()] = False
            else:
                raise FeatureGateError(f"invalid value of {name.strip()}: {raw!r}")
        return cls(overrides)

    def __repr__(self) -> str:
        return f"FeatureGate({self._state!r})"


def feature_gate_from_env(dotenv_path: str | Path | None = None) -> FeatureGate:
    """Build a gate from `SCHEDCONF_FEATURE_GATES`, loading `.env` first."""
    load_environment(dotenv_path)
    return FeatureGate.parse(setting(FEATURE_GATES_ENV))


DEFAULT_FEATURE_GATE = FeatureGate()
