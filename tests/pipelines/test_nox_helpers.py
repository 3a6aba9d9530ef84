import pathlib
import runpy

import pytest
from mock import MagicMock

pytest.importorskip("nox")

from pipelines import nox as pipeline_nox  # noqa: E402

PIPELINES_DIRECTORY = pathlib.Path(__file__).resolve().parents[2] / "pipelines"


@pytest.fixture
def session():
    session = MagicMock()
    session.virtualenv.location = "/tmp/venv"
    return session


def test_sync_installs_groups_without_lock_file(session):
    pipeline_nox.sync(session, "pytest")

    args = session.run_install.call_args.args
    assert args == ("uv", "sync", "--group", "pytest")
    assert "--locked" not in args
    assert session.run_install.call_args.kwargs["env"] == {"UV_PROJECT_ENVIRONMENT": "/tmp/venv"}


def test_sync_without_project(session):
    pipeline_nox.sync(session, "codespell", project=False)

    assert session.run_install.call_args.args == (
        "uv",
        "sync",
        "--only-group",
        "codespell",
        "--no-install-project",
    )


def test_purge_removes_listed_artifacts_only(session, tmp_path, monkeypatch):
    namespace = runpy.run_path(str(PIPELINES_DIRECTORY / "utils.nox.py"))
    monkeypatch.chdir(tmp_path)
    (tmp_path / "build").mkdir()
    (tmp_path / "build" / "lib.txt").write_text("x")
    (tmp_path / ".coverage").write_text("")
    (tmp_path / "keep.txt").write_text("")

    namespace["purge"](session)

    assert not (tmp_path / "build").exists()
    assert not (tmp_path / ".coverage").exists()
    assert (tmp_path / "keep.txt").exists()
    assert session.log.call_count == 2
