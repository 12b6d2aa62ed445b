"""Shared fixtures for the lazyseq test suite."""

from collections.abc import Iterator

import pytest


class CountingSource:
    """An infinite source of integers recording how many values were pulled from it."""

    def __init__(self, start: int = 0) -> None:
        self.start = start
        self.pulls = 0

    def __iter__(self) -> Iterator[int]:
        value = self.start
        while True:
            self.pulls += 1
            yield value
            value += 1


@pytest.fixture
def source() -> CountingSource:
    """An instrumented infinite source starting at 0."""
    return CountingSource()
