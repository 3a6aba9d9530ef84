"""Shared nox helpers: the session decorator and dependency group installation."""

from __future__ import annotations

import typing

import nox

NoxCallbackSigT = typing.Callable[[nox.Session], None]

Session = nox.Session

# Sessions run by a bare `nox` invocation
nox.options.sessions = ["codespell", "pytest", "ruff", "mypy"]
nox.options.default_venv_backend = "uv"


def session(**kwargs: typing.Any) -> typing.Callable[[NoxCallbackSigT], NoxCallbackSigT]:  # noqa: ANN401
    """Register a nox session that reuses its virtualenv unless told otherwise."""
    kwargs.setdefault("reuse_venv", True)

    def decorator(func: NoxCallbackSigT) -> NoxCallbackSigT:
        return nox.session(**kwargs)(func)

    return decorator


def sync(session: nox.Session, /, *groups: str, project: bool = True) -> None:
    """Install dependency groups with `uv sync`, plus buildmeta itself when ``project`` is set.

    No lock file is committed, so uv resolves the groups from ``pyproject.toml``.
    """
    args = [arg for group in groups for arg in ("--group" if project else "--only-group", group)]
    if not project:
        args.append("--no-install-project")

    session.run_install("uv", "sync", *args, silent=True, env={"UV_PROJECT_ENVIRONMENT": session.virtualenv.location})
