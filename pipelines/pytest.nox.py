"""Pytest integration."""

from __future__ import annotations

from pipelines import config, nox

RUN_FLAGS = ["-c", config.PYPROJECT_TOML, "--showlocals"]
COVERAGE_FLAGS = [
    "--cov",
    config.MAIN_PACKAGE,
    "--cov-config",
    config.PYPROJECT_TOML,
    "--cov-report",
    "term",
    "--cov-report",
    f"html:{config.COVERAGE_HTML_PATH}",
    "--cov-report",
    "xml",
]


@nox.session()
def pytest(session: nox.Session) -> None:
    """Run the buildmeta unit tests, optionally measuring code coverage.

    Coverage is enabled with the `--coverage` flag.
    """
    nox.sync(session, "pytest")

    flags = [*RUN_FLAGS]
    posargs = list(session.posargs)
    if "--coverage" in posargs:
        posargs.remove("--coverage")
        flags.extend(COVERAGE_FLAGS)

    session.run("python", "-m", "pytest", *flags, *posargs, config.TEST_PACKAGE)
