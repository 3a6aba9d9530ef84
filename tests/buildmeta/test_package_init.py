import buildmeta
from buildmeta import _about


def test_public_api_is_exported():
    for name in buildmeta.__all__:
        assert hasattr(buildmeta, name)


def test_about_values_are_reexported():
    assert buildmeta.__version__ == _about.__version__
    assert buildmeta.__license__ == "MIT"


def test_load_is_available_from_package():
    loaded = buildmeta.load({"name": "demo-app"})
    assert isinstance(loaded, buildmeta.BuildMetadata)
    assert loaded.name == "demo-app"
