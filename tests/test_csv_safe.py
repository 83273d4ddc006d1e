from __future__ import annotations

import io

import polars as pl
import pytest

from stringkit import InvalidArgumentError, to_csv_row, to_csv_safe
from stringkit.config import CONFIG


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("plain", "plain"),
        ("", ""),
        ("a,b", '"a,b"'),
        ('she said "hi"', '"she said ""hi"""'),
        (" leading", '" leading"'),
        ("trailing ", '"trailing "'),
        ("line\nbreak", '"line\nbreak"'),
        ('"', '""""'),
        ('a "b" c', '"a ""b"" c"'),
        ("inner space", "inner space"),
    ],
)
def test_to_csv_safe(value, expected):
    assert to_csv_safe(value) == expected


def test_unquoted_value_is_same_object():
    value = "no special characters"
    assert to_csv_safe(value) is value


def test_platform_line_separator_forces_quoting(monkeypatch):
    monkeypatch.setitem(CONFIG, "csv_line_separator", "\r\n")
    assert to_csv_safe("a\r\nb") == '"a\r\nb"'
    monkeypatch.setitem(CONFIG, "csv_line_separator", " ")
    assert to_csv_safe("a b") == '"a b"'


def test_none_value():
    with pytest.raises(InvalidArgumentError):
        to_csv_safe(None)


def test_to_csv_row_joins_escaped_fields():
    assert to_csv_row(["id", "name, first", 'say "x"']) == 'id,"name, first","say ""x"""'


def test_to_csv_row_rejects_none_items():
    with pytest.raises(InvalidArgumentError):
        to_csv_row(None)
    with pytest.raises(InvalidArgumentError, match=r"values\[1\]"):
        to_csv_row(["a", None])


def test_rows_parse_back_with_a_csv_reader():
    values = ["plain", "a,b", 'she said "hi"', " leading", "trailing ", "multi\nline"]
    record = to_csv_row(values) + "\n"

    frame = pl.read_csv(
        io.BytesIO(record.encode("utf-8")),
        has_header=False,
        infer_schema=False,
    )

    assert frame.row(0) == tuple(values)

