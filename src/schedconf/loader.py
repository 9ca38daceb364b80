"""Reads scheduler configuration documents and writes defaulted ones back out."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
import yaml

from schedconf.constants import API_VERSION, CONFIGURATION_KIND
from schedconf.errors import ConfigLoadError
from schedconf.plugins.registry import ArgsRegistry, args_kind_for
from schedconf.schema.args import OpaqueArgs, TypedArgs
from schedconf.schema.models import KubeSchedulerConfiguration, PluginConfig

logger = logging.getLogger(__name__)


def decode_args(
    plugin_name: str, raw: Any, registry: ArgsRegistry
) -> TypedArgs | OpaqueArgs | None:
    """Decode one `pluginConfig[].args` value.

    Arguments of a registered kind become `TypedArgs`; anything else is kept
    as `OpaqueArgs` holding the YAML text of the raw value, so dates, binary
    values and mixed-type keys survive unchanged.
    """
    if raw is None:
        return None
    kind = args_kind_for(plugin_name)
    spec = registry.lookup(kind)
    if spec is None:
        try:
            text = yaml.safe_dump(raw, sort_keys=False, allow_unicode=True)
        except yaml.YAMLError as exc:
            raise ConfigLoadError(
                f"args for plugin {plugin_name} cannot be serialized: {exc}"
            ) from exc
        return OpaqueArgs(raw=text.encode("utf-8"))
    if not isinstance(raw, Mapping):
        raise ConfigLoadError(f"args for plugin {plugin_name} must be a mapping")
    declared = raw.get("kind")
    if declared and declared != kind:
        raise ConfigLoadError(
            f"args for plugin {plugin_name} declare kind {declared}, expected {kind}"
        )
    try:
        payload = spec.args_type.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigLoadError(f"invalid args for plugin {plugin_name}: {exc}") from exc
    return TypedArgs(kind=kind, payload=payload)


def _without_nulls(raw: Any) -> Any:
    """Drop null-valued keys so they read as unset, like an omitted key."""
    if not isinstance(raw, Mapping):
        return raw
    return {key: value for key, value in raw.items() if value is not None}


def _decode_plugins(raw: Any) -> Any:
    plugins = _without_nulls(raw)
    if not isinstance(plugins, dict):
        return plugins
    return {point: _without_nulls(plugin_set) for point, plugin_set in plugins.items()}


def _decode_profile(raw: Any, registry: ArgsRegistry) -> Any:
    if not isinstance(raw, Mapping):
        return raw
    profile = _without_nulls(raw)
    if "plugins" in profile:
        profile["plugins"] = _decode_plugins(profile["plugins"])
    entries = profile.get("pluginConfig")
    if isinstance(entries, list):
        decoded: list[Any] = []
        for entry in entries:
            if isinstance(entry, Mapping) and isinstance(entry.get("name"), str):
                entry = PluginConfig(
                    name=entry["name"],
                    args=decode_args(entry["name"], entry.get("args"), registry),
                )
            decoded.append(entry)
        profile["pluginConfig"] = decoded
    return profile


def parse_configuration(
    data: Mapping[str, Any], registry: ArgsRegistry
) -> KubeSchedulerConfiguration:
    """Build a configuration object from an already parsed document."""
    kind = data.get("kind")
    if kind is not None and kind != CONFIGURATION_KIND:
        raise ConfigLoadError(f"expected kind {CONFIGURATION_KIND}, got {kind}")
    document = _without_nulls(data)
    for section in ("leaderElection", "clientConnection"):
        if section in document:
            document[section] = _without_nulls(document[section])
    profiles = document.get("profiles")
    if isinstance(profiles, list):
        document["profiles"] = [_decode_profile(p, registry) for p in profiles]
    try:
        return KubeSchedulerConfiguration.model_validate(document)
    except ValidationError as exc:
        raise ConfigLoadError(f"invalid configuration: {exc}") from exc


def load_configuration(
    path: str | Path, registry: ArgsRegistry
) -> KubeSchedulerConfiguration:
    """Load a configuration from a YAML (or JSON) file."""
    resolved = Path(path)
    if not resolved.is_file():
        raise ConfigLoadError(f"config file not found: {resolved}")
    try:
        data = yaml.safe_load(resolved.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"failed to parse {resolved}: {exc}") from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"config file must contain a mapping, got {type(data).__name__}"
        )
    logger.debug("Loaded configuration document from %s", resolved)
    return parse_configuration(data, registry)


def _dump_args(args: TypedArgs | OpaqueArgs | None) -> Any:
    if args is None:
        return None
    if isinstance(args, OpaqueArgs):
        return yaml.safe_load(args.raw.decode("utf-8"))
    return args.payload.model_dump(by_alias=True, exclude_none=True, mode="json")


def dump_configuration(obj: KubeSchedulerConfiguration) -> dict[str, Any]:
    """Return the camelCase document for `obj`, as it would appear on disk."""
    document = obj.model_dump(
        by_alias=True, exclude_none=True, exclude={"profiles"}, mode="json"
    )
    document.setdefault("apiVersion", API_VERSION)
    document.setdefault("kind", CONFIGURATION_KIND)
    profiles = []
    for profile in obj.profiles:
        dumped = profile.model_dump(
            by_alias=True, exclude_none=True, exclude={"plugin_config"}, mode="json"
        )
        entries = []
        for entry in profile.plugin_config:
            item: dict[str, Any] = {"name": entry.name}
            args = _dump_args(entry.args)
            if args is not None:
                item["args"] = args
            entries.append(item)
        if entries:
            dumped["pluginConfig"] = entries
        profiles.append(dumped)
    document["profiles"] = profiles
    return document
