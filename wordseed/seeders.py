# wordseed/seeders.py
from __future__ import annotations

import logging
import os
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from .models import Dictionary, Theme, Word
from .schema import ThemeIn

log = logging.getLogger(__name__)

BATCH_SIZE = int(os.getenv("SEED_BATCH_SIZE", "1000"))

T = TypeVar("T")

# (processed, total, percent, inserted_so_far)
Progress = Callable[[int, int, int, int], None]

class SeedStore:
    """All statements the seeding run issues, over one session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def count_dictionary(self) -> int:
        res = await self.session.execute(select(func.count()).select_from(Dictionary))
        return int(res.scalar_one())

    async def clear(self):
        # children before parents
        await self.session.execute(delete(Word))
        await self.session.execute(delete(Theme))
        await self.session.execute(delete(Dictionary))
        await self.session.commit()

    async def create_theme(self, theme: ThemeIn) -> int:
        row = Theme(
            name=theme.name,
            category=theme.category,
            difficulty=theme.difficulty,
            words=[Word(word=w.word, length=w.length) for w in theme.words],
        )
        self.session.add(row)
        await self.session.commit()
        return len(row.words)

    async def insert_dictionary_words(self, words: Sequence[str]) -> int:
        """Insert one chunk, skipping words already present. Returns rows inserted."""
        if not words:
            return 0
        stmt = (
            insert(Dictionary)
            .values([{"word": w} for w in words])
            .on_conflict_do_nothing(index_elements=[Dictionary.word])
            .returning(Dictionary.id)
        )
        res = await self.session.execute(stmt)
        inserted = len(res.scalars().all())
        await self.session.commit()
        return inserted

def _log_progress(processed: int, total: int, percent: int, inserted: int):
    log.info("Progress: %d/%d (%d%%) - Inserted: %d", processed, total, percent, inserted)

async def batch_insert(
    values: Sequence[T],
    insert_chunk: Callable[[Sequence[T]], Awaitable[int]],
    batch_size: int = BATCH_SIZE,
    on_progress: Optional[Progress] = _log_progress,
) -> int:
    """
    Feed `values` to `insert_chunk` in slices of `batch_size`, in order.
    Returns the sum of what each call reports as inserted. A failing chunk
    propagates; earlier chunks stay written.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    total = len(values)
    inserted = 0
    for start in range(0, total, batch_size):
        chunk = values[start:start + batch_size]
        inserted += await insert_chunk(chunk)
        processed = min(start + batch_size, total)
        if on_progress:
            on_progress(processed, total, round(processed / total * 100), inserted)
    return inserted

async def seed_dictionary(store: SeedStore, words: Sequence[str], batch_size: int = BATCH_SIZE) -> int:
    log.info("Seeding dictionary with %d words...", len(words))
    return await batch_insert(words, store.insert_dictionary_words, batch_size)

async def seed_themes(store: SeedStore, themes: List[ThemeIn]) -> int:
    log.info("Seeding themes...")
    for theme in themes:
        n = await store.create_theme(theme)
        log.info("  %s (%d words)", theme.name, n)
    return len(themes)
