"""Support routines for the schedconf CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from schedconf.config.env import LOG_LEVEL_ENV, setting
from schedconf.config.features import FeatureGate, feature_gate_from_env
from schedconf.defaulting.profile import set_defaults_configuration
from schedconf.loader import dump_configuration, load_configuration
from schedconf.plugins.defaults import default_plugins
from schedconf.plugins.registry import ArgsRegistry, build_default_registry
from schedconf.utilities.logger_manager import LoggerConfig, LoggerManager

OUTPUT_FORMATS = ("yaml", "json")


def configure_logging(
    log_level: str | None = None, structured: bool = False
) -> LoggerManager:
    """Install CLI log handlers; the level falls back to SCHEDCONF_LOG_LEVEL."""
    level = log_level or setting(LOG_LEVEL_ENV) or "WARNING"
    return LoggerManager(LoggerConfig(log_level=level, structured_logging=structured))


def build_registry(feature_gates: str | None = None) -> ArgsRegistry:
    """Return the in-tree registry, gated by the flag or the environment."""
    gate = FeatureGate.parse(feature_gates) if feature_gates else feature_gate_from_env()
    return build_default_registry(gate)


def default_document(
    config_path: str | Path, registry: ArgsRegistry, logger: logging.Logger
) -> dict[str, Any]:
    """Load, default, and dump a configuration file."""
    config = load_configuration(config_path, registry)
    logger.info(
        "Defaulting configuration",
        extra={"context": {"path": str(config_path), "profiles": len(config.profiles)}},
    )
    set_defaults_configuration(config, registry)
    return dump_configuration(config)


def describe_plugins(registry: ArgsRegistry) -> dict[str, Any]:
    """Summarize the default plugin set and the registered argument kinds."""
    multi_point = default_plugins().multi_point.enabled
    return {
        "defaultPlugins": [
            {"name": p.name, **({"weight": p.weight} if p.weight is not None else {})}
            for p in multi_point
        ],
        "argumentKinds": registry.kinds(),
        "featureGates": registry.feature_gate.as_dict(),
    }


def render(document: dict[str, Any], output_format: str = "yaml") -> str:
    """Serialize a dumped document; JSON writes YAML-only scalars such as dates as strings."""
    if output_format == "json":
        return json.dumps(document, indent=2, ensure_ascii=False, default=str)
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
