from __future__ import annotations

import pytest

from stringkit.plural import PLURALIZER


class StubPluralizer:
    """Appends "s"; counts calls."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def pluralize(self, word: str) -> str:
        self.calls.append(word)
        return f"{word}s"


@pytest.fixture
def stub_pluralizer() -> StubPluralizer:
    return StubPluralizer()


@pytest.fixture
def fresh_pluralizer():
    """Start and finish the test with an unbuilt shared pluralizer."""
    PLURALIZER.reset()
    yield PLURALIZER
    PLURALIZER.reset()
