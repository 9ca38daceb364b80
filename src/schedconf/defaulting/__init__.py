"""Defaulting passes over the scheduler configuration."""

from __future__ import annotations

from .completer import complete_plugin_config, plugin_names
from .profile import set_defaults_configuration, set_defaults_profile
from .scalar import (
    recommended_leader_election_defaults,
    set_defaults_client_connection,
    set_defaults_leader_election,
    set_defaults_parallelism,
    set_defaults_scalars,
)

__all__ = [
    "complete_plugin_config",
    "plugin_names",
    "recommended_leader_election_defaults",
    "set_defaults_client_connection",
    "set_defaults_configuration",
    "set_defaults_leader_election",
    "set_defaults_parallelism",
    "set_defaults_profile",
    "set_defaults_scalars",
]
