import pytest

from buildmeta.models import URL, Author, MetadataError, RawMetadata, SemVer


def test_author_str_with_name_and_email():
    assert str(Author("Jane Doe", "jdoe@example.com")) == "Jane Doe <jdoe@example.com>"


def test_author_str_with_single_part():
    assert str(Author("Jane Doe", "")) == "Jane Doe"
    assert str(Author("", "jdoe@example.com")) == "jdoe@example.com"
    assert str(Author()) == ""


def test_semver_is_empty():
    assert SemVer().is_empty() is True
    assert SemVer("1", "2", "3").is_empty() is False


def test_url_str_round_trips_components():
    url = URL("https", "example.com:8443", "/docs", "q=1", "top", "user")
    assert url.netloc == "user@example.com:8443"
    assert str(url) == "https://user@example.com:8443/docs?q=1#top"


def test_url_str_without_user():
    assert str(URL("http", "localhost")) == "http://localhost"


class TestRawMetadata:
    def test_defaults_are_empty(self):
        raw = RawMetadata()
        assert raw.author == ""
        assert raw.version == ""

    def test_is_frozen(self):
        raw = RawMetadata(name="demo-app")
        with pytest.raises(AttributeError):
            raw.name = "other"

    def test_from_mapping(self):
        raw = RawMetadata.from_mapping({"name": "demo-app", "version": "v1.0.0", "note": None})
        assert raw.name == "demo-app"
        assert raw.version == "v1.0.0"
        assert raw.note == ""

    def test_from_mapping_rejects_unknown_field(self):
        with pytest.raises(MetadataError) as exc_info:
            RawMetadata.from_mapping({"nmae": "demo-app"})

        assert exc_info.value.field == "nmae"
        assert exc_info.value.reason == "unknown field"

    def test_from_environ(self):
        environ = {
            "BUILDMETA_NAME": "demo-app",
            "BUILDMETA_AUTHOR_URL": "https://example.com/profile",
            "OTHER_NAME": "ignored",
        }
        raw = RawMetadata.from_environ(environ)
        assert raw.name == "demo-app"
        assert raw.author_url == "https://example.com/profile"
        assert raw.title == ""

    def test_from_environ_custom_prefix(self):
        raw = RawMetadata.from_environ({"APP_TITLE": "Demo", "BUILDMETA_TITLE": "ignored"}, prefix="APP_")
        assert raw.title == "Demo"

    def test_from_environ_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.setenv("BUILDMETA_LICENSE", "MIT")
        assert RawMetadata.from_environ().license == "MIT"
