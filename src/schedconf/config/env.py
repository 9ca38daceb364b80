"""Loads tool settings from the environment and optional `.env` files."""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class EnvSetting:
    """Describes one environment variable the tool understands."""

    name: str
    env_var: str
    description: str


FEATURE_GATES_ENV = "SCHEDCONF_FEATURE_GATES"
LOG_LEVEL_ENV = "SCHEDCONF_LOG_LEVEL"

ENV_REGISTRY: tuple[EnvSetting, ...] = (
    EnvSetting(
        "feature-gates",
        FEATURE_GATES_ENV,
        "Comma separated Name=bool pairs, e.g. VolumeCapacityPriority=true",
    ),
    EnvSetting("log-level", LOG_LEVEL_ENV, "Log level used by the CLI"),
)


def load_environment(dotenv_path: str | Path | None = None) -> None:
    """Load `.env` files when available to seed environment lookups."""
    path = Path(dotenv_path) if dotenv_path else Path(".env")
    if path.exists():
        load_dotenv(dotenv_path=path)


def setting(env_var: str, default: str = "") -> str:
    """Return the stripped value of a known environment variable."""
    if env_var not in {spec.env_var for spec in ENV_REGISTRY}:
        raise KeyError(f"Unknown setting: {env_var}")
    return os.getenv(env_var, default).strip()


__all__ = [
    "ENV_REGISTRY",
    "FEATURE_GATES_ENV",
    "LOG_LEVEL_ENV",
    "EnvSetting",
    "load_environment",
    "setting",
]
