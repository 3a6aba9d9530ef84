"""Linting and static type analysis."""

from __future__ import annotations

from pipelines import config, nox


@nox.session()
def ruff(session: nox.Session) -> None:
    """Lint and check formatting using ruff."""
    nox.sync(session, "ruff")

    session.run("ruff", "check", *session.posargs)
    session.run("ruff", "format", "--check", *config.PYTHON_PATHS)


@nox.session()
def mypy(session: nox.Session) -> None:
    """Perform static type analysis on the package using mypy."""
    nox.sync(session, "mypy")

    session.run("mypy", "-p", config.MAIN_PACKAGE, "--config-file", config.PYPROJECT_TOML)
