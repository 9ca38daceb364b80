from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from schedconf.config.env import FEATURE_GATES_ENV, LOG_LEVEL_ENV
from schedconf.config.features import VOLUME_CAPACITY_PRIORITY, FeatureGate
from schedconf.plugins.registry import ArgsRegistry, build_default_registry

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Keep `.env` lookups and tool settings from leaking between tests."""
    for env_var in (FEATURE_GATES_ENV, LOG_LEVEL_ENV):
        # setenv first so teardown removes values a test loads from a .env file.
        monkeypatch.setenv(env_var, "")
        monkeypatch.delenv(env_var)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def registry() -> ArgsRegistry:
    return build_default_registry(FeatureGate())


@pytest.fixture
def capacity_registry() -> ArgsRegistry:
    return build_default_registry(FeatureGate({VOLUME_CAPACITY_PRIORITY: True}))


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
