from buildmeta.models import MetadataError


def test_metadata_error_exposes_field_and_value():
    err = MetadataError("sha", "HEAD")
    assert err.field == "sha"
    assert err.value == "HEAD"
    assert err.reason is None
    assert str(err) == "Invalid value for build metadata field 'sha': 'HEAD'."


def test_metadata_error_includes_reason():
    err = MetadataError("dev", "yes", "expected 'true' or 'false'")
    assert err.reason == "expected 'true' or 'false'"
    assert "'dev'" in str(err)
    assert "'yes'" in str(err)
    assert "expected 'true' or 'false'" in str(err)


def test_metadata_error_is_a_value_error():
    assert isinstance(MetadataError("url", "x"), ValueError)
