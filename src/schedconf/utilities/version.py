"""Runtime version resolution helpers."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import shutil
import subprocess  # nosec B404 - subprocess is used with fixed git arguments

DISTRIBUTION_NAME = "schedconf"


def _git_describe(repo_root: Path) -> str | None:
    git_exec = shutil.which("git")
    if not git_exec or not (repo_root / ".git").exists():
        return None
    try:
        result = subprocess.run(  # nosec S603
            [git_exec, "describe", "--tags", "--always", "--dirty"],
            check=True,
            capture_output=True,
            text=True,
            cwd=repo_root,
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return result.stdout.strip() or None


def get_runtime_version() -> str:
    """Resolve the version from installed metadata, falling back to git."""
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        pass
    described = _git_describe(Path(__file__).resolve().parents[3])
    if described:
        return f"dev+{described}"
    return "dev+unknown"
