import pytest

from label_policy.exceptions import InvalidLabelKeysError
from label_policy.labels.validator import LabelKeyValidator, classify_key, split_key, validate_label_keys
from label_policy.models import ViolationReason


@pytest.mark.parametrize(
    "key",
    [
        "my-label",
        "my.label",
        "my_label",
        "example.com/my-label",
        "foo.bar.baz/qux",
        "a/b",
        "abc123",
        "abc.def-ghi_jkl",
        "MyLabel",
        "example.com/MyLabel",
        "a" * 243 + "/b",
        "a" * 243 + ".com/abc",
    ],
)
def test_valid_keys(key):
    assert validate_label_keys({key}).ok


@pytest.mark.parametrize(
    "key",
    [
        "",
        "/my-label",
        "example.com/",
        "-my-label",
        "example.com/-my-label",
        "example.com/my-label-",
        "example.com/my label",
        "example.com/my@label",
        "Example.com/my-label",
        "example..com/my-label",
        "a" + "b" * 63,
        "a" * 254 + ".com/abc",
        "my-label\n",
        "ключ",
    ],
)
def test_invalid_keys(key):
    report = validate_label_keys({key})
    assert not report.ok
    assert report.invalid_keys == [key]


def test_empty_set_is_valid():
    report = validate_label_keys(set())
    assert report.ok
    assert report.message() is None


def test_split_key_uses_last_slash():
    assert split_key("a/b/c") == ("a/b", "c")
    assert split_key("example.com/") == ("example.com", "")
    assert split_key("my-label") == (None, "my-label")


def test_multiple_slashes_are_not_a_valid_prefix():
    violation = classify_key("a/b/c")
    assert violation is not None
    assert violation.reason == ViolationReason.PATTERN


def test_name_length_boundary():
    assert classify_key("a" * 63) is None
    assert classify_key("example.com/" + "a" * 63) is None
    assert classify_key("a" * 64).reason == ViolationReason.NAME_TOO_LONG
    assert classify_key("example.com/" + "a" * 64).reason == ViolationReason.NAME_TOO_LONG


def test_prefix_length_boundary():
    assert classify_key("a" * 251 + "/a") is None
    assert classify_key("a" * 254 + "/a").reason == ViolationReason.PREFIX_TOO_LONG
    # a 253-char prefix always pushes the whole key past 253
    assert classify_key("a" * 253 + "/a").reason == ViolationReason.KEY_TOO_LONG


def test_key_too_long():
    key = "a" * 200 + "/" + "b" * 60
    assert classify_key(key).reason == ViolationReason.KEY_TOO_LONG


def test_prefix_too_long_takes_precedence():
    key = "A" * 254 + "/" + "b" * 64
    assert classify_key(key).reason == ViolationReason.PREFIX_TOO_LONG


def test_lengths_are_counted_in_bytes():
    assert classify_key("é" * 32).reason == ViolationReason.NAME_TOO_LONG
    assert classify_key("é" * 31).reason == ViolationReason.PATTERN


def test_report_message_lists_every_invalid_key():
    long_name = "a" + "b" * 63
    report = validate_label_keys(["foo@bar", "my-label", long_name])
    assert report.invalid_keys == ["foo@bar", long_name]
    assert report.message() == f"Invalid annotation names: foo@bar, {long_name} (name too long)"


def test_validity_is_independent_of_other_keys():
    keys = {"my-label", "Example.com/x", "example.com/y", ""}
    report = validate_label_keys(keys)
    assert sorted(report.invalid_keys) == ["", "Example.com/x"]
    for key in keys:
        alone = validate_label_keys({key})
        assert alone.ok == (key not in report.invalid_keys)


def test_validation_is_idempotent():
    keys = {"a/b/c", "my-label", "example.com/"}
    assert validate_label_keys(keys) == validate_label_keys(keys)


def test_validator_ensure_valid_raises_with_report():
    validator = LabelKeyValidator()
    validator.ensure_valid({"my-label"})
    with pytest.raises(InvalidLabelKeysError, match="Invalid annotation names: example.com/") as excinfo:
        validator.ensure_valid({"example.com/"})
    assert excinfo.value.report.invalid_keys == ["example.com/"]


def test_validator_accepts_custom_pattern():
    validator = LabelKeyValidator(r"^[a-z]+$")
    assert validator.is_valid("team")
    assert not validator.is_valid("team-a")
