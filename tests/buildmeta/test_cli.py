import json
import runpy

import pytest

from buildmeta import cli


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for field in ("NAME", "SHA", "VERSION"):
        monkeypatch.delenv(f"BUILDMETA_{field}", raising=False)


def test_main_prints_metadata_as_json(monkeypatch, capsys):
    monkeypatch.setenv("BUILDMETA_NAME", "demo-app")
    monkeypatch.setenv("BUILDMETA_VERSION", "v1.2.3")

    assert cli.main([]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "demo-app"
    assert data["version_major"] == "1"
    assert data["date"] is None


def test_main_reports_invalid_metadata(monkeypatch, capsys):
    monkeypatch.setenv("BUILDMETA_SHA", "HEAD")

    assert cli.main([]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "'sha'" in captured.err
    assert "'HEAD'" in captured.err


def test_main_verbose_configures_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(cli.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    assert cli.main(["--verbose"]) == 0
    assert calls
    assert calls[0]["level"] == "DEBUG"


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("buildmeta ")


def test_module_entry_point_exits_with_status(monkeypatch):
    monkeypatch.setattr("sys.argv", ["buildmeta"])
    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("buildmeta", run_name="__main__")

    assert exc_info.value.code == 0
