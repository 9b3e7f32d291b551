"""Shared fakes: a store that records calls and a session that records statements."""
from typing import List, Optional, Sequence, Set

import pytest


class FakeStore:
    """Stand-in for SeedStore with a unique-word set as the dictionary table."""

    def __init__(self, existing: Optional[Set[str]] = None, fail_on_chunk: Optional[int] = None):
        self.dictionary: Set[str] = set(existing or ())
        self.themes: List[str] = []
        self.calls: List[str] = []
        self.chunks: List[int] = []
        self.fail_on_chunk = fail_on_chunk

    async def count_dictionary(self) -> int:
        self.calls.append("count")
        return len(self.dictionary)

    async def clear(self):
        self.calls.append("clear")
        self.dictionary.clear()
        self.themes.clear()

    async def create_theme(self, theme) -> int:
        self.calls.append("theme")
        self.themes.append(theme.name)
        return len(theme.words)

    async def insert_dictionary_words(self, words: Sequence[str]) -> int:
        self.calls.append("words")
        if self.fail_on_chunk is not None and len(self.chunks) == self.fail_on_chunk:
            raise RuntimeError("connection lost")
        self.chunks.append(len(words))
        new = [w for w in words if w not in self.dictionary]
        self.dictionary.update(new)
        return len(set(new))


class FakeResult:
    def __init__(self, scalar=None, rows=None):
        self._scalar = scalar
        self._rows = rows or []

    def scalar_one(self):
        return self._scalar

    def scalars(self):
        return self

    def all(self):
        return list(self._rows)


class RecordingSession:
    """Captures statements and added objects; returns canned results."""

    def __init__(self, count: int = 0, returned_ids=None):
        self.statements = []
        self.added = []
        self.commits = 0
        self.count = count
        self.returned_ids = returned_ids

    async def execute(self, stmt):
        self.statements.append(stmt)
        if self.returned_ids is not None:
            return FakeResult(rows=self.returned_ids)
        return FakeResult(scalar=self.count)

    def add(self, obj):
        self.added.append(obj)

    async def commit(self):
        self.commits += 1


@pytest.fixture
def fake_store():
    return FakeStore()
