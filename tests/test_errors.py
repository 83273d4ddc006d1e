from __future__ import annotations

import pytest

import stringkit
from stringkit.errors import InvalidArgumentError, require_not_empty, require_not_none


def test_invalid_argument_is_a_value_error():
    error = InvalidArgumentError("value")
    assert isinstance(error, ValueError)
    assert error.argument == "value"
    assert str(error) == "value is required"


def test_require_not_none():
    assert require_not_none("", "value") == ""
    with pytest.raises(InvalidArgumentError, match="word is required"):
        require_not_none(None, "word")


def test_require_not_empty():
    assert require_not_empty("x", "old_value") == "x"
    with pytest.raises(InvalidArgumentError, match="must not be empty"):
        require_not_empty("", "old_value")
    with pytest.raises(InvalidArgumentError, match="is required"):
        require_not_empty(None, "old_value")


@pytest.mark.parametrize(
    ("name", "args"),
    [
        ("append_missing", (None, "x")),
        ("append_missing", ("x", None)),
        ("is_alphanumeric", (None,)),
        ("pluralize", (None,)),
        ("replace_case_insensitive", (None, "a", "b")),
        ("replace_case_insensitive", ("x", None, "b")),
        ("replace_case_insensitive", ("x", "", "b")),
        ("to_bytes", (None, "utf-8")),
        ("to_ascii_bytes", (None,)),
        ("to_unicode_bytes", (None,)),
        ("to_utf8_bytes", (None,)),
        ("to_csv_safe", (None,)),
        ("to_lower_trimmed", (None,)),
    ],
)
def test_every_operation_rejects_absent_arguments(name, args):
    with pytest.raises(InvalidArgumentError):
        getattr(stringkit, name)(*args)
