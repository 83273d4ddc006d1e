from __future__ import annotations

import pytest

from stringkit import InvalidArgumentError, is_alphanumeric


@pytest.mark.parametrize("value", ["", "abc123", "ABCxyz", "0123456789"])
def test_alphanumeric(value):
    assert is_alphanumeric(value)


@pytest.mark.parametrize(
    "value",
    ["abc-123", "héllo", "two words", "tab\t", "１２３", "line\n", "under_score"],
)
def test_not_alphanumeric(value):
    assert not is_alphanumeric(value)


def test_none_value():
    with pytest.raises(InvalidArgumentError):
        is_alphanumeric(None)
