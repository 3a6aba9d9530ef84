import platform

from buildmeta.core import environment


def test_arch_matches_platform():
    assert environment.arch() == platform.machine()


def test_os_name_is_lowercase_system(monkeypatch):
    monkeypatch.setattr(platform, "system", lambda: "Linux")
    assert environment.os_name() == "linux"


def test_python_version_matches_platform():
    assert environment.python_version() == platform.python_version()
