from __future__ import annotations

import importlib
from pathlib import Path

import pytest

import stringkit

SOURCE_ROOT = Path(stringkit.__file__).parent
MODULES = sorted(SOURCE_ROOT.rglob("*.py"))


@pytest.mark.parametrize("path", MODULES, ids=lambda path: path.name)
def test_every_module_compiles(path):
    compile(path.read_text(encoding="utf-8"), str(path), "exec")


@pytest.mark.parametrize(
    "name",
    ["stringkit.text", "stringkit.codec", "stringkit.plural", "stringkit.text.csv_safe"],
)
def test_subpackages_import(name):
    assert importlib.import_module(name).__all__


def test_public_names_resolve():
    for name in stringkit.__all__:
        assert hasattr(stringkit, name)
