"""Additional utilities for Nox."""

from __future__ import annotations

import pathlib
import shutil

from pipelines import config, nox

ARTIFACTS = (
    ".nox",
    "build",
    "dist",
    f"{config.MAIN_PACKAGE}.egg-info",
    config.ARTIFACT_DIRECTORY,
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    ".coverage",
    "coverage.xml",
)


@nox.session(venv_backend="none")
def purge(session: nox.Session) -> None:
    """Delete build, test and coverage artifacts."""
    for name in ARTIFACTS:
        path = pathlib.Path(name)
        if not path.exists():
            continue
        if path.is_dir():
            shutil.rmtree(path)
        else:
            path.unlink()
        session.log(f"Removed {name!r}")
