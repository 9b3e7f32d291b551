# wordseed/seed.py
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Awaitable, Callable, List, Optional

from .db_pg import create_schema, make_sessionmaker, open_engine, ping
from .prompt import Confirm, always_yes, confirm_reseed
from .schema import SeedSummary, ThemeIn, WordListOptions
from .seeders import BATCH_SIZE, SeedStore, seed_dictionary, seed_themes
from .themes import THEMES
from .word_fetcher import get_word_list
from .word_sources import WORD_SOURCES

log = logging.getLogger(__name__)

# Pipeline defaults; CLI flags override
SOURCE = os.getenv("SEED_WORD_SOURCE", "WORDLE_ANSWERS")
MIN_LEN = int(os.getenv("SEED_MIN_LEN", "3"))
MAX_LEN = int(os.getenv("SEED_MAX_LEN", "10"))
MAX_WORDS = int(os.getenv("SEED_MAX_WORDS", "20000"))
USE_CACHE = os.getenv("SEED_USE_CACHE", "true").lower() not in ("0", "false", "no")
RESEED_THRESHOLD = int(os.getenv("SEED_RESEED_THRESHOLD", "20000"))

FetchWords = Callable[[WordListOptions], Awaitable[List[str]]]

async def run_seed(
    store: SeedStore,
    *,
    options: WordListOptions,
    threshold: int = RESEED_THRESHOLD,
    confirm: Confirm = confirm_reseed,
    themes: List[ThemeIn] = THEMES,
    fetch_words: FetchWords = get_word_list,
    batch_size: int = BATCH_SIZE,
) -> SeedSummary:
    """Clear, then load themes and the dictionary. Database errors propagate."""
    existing = await store.count_dictionary()
    if existing > threshold and not confirm(existing, threshold):
        log.info("Skipping seed.")
        return SeedSummary(skipped=True)

    log.info("Clearing existing data...")
    await store.clear()

    themes_created = await seed_themes(store, themes)
    words = await fetch_words(options)
    inserted = await seed_dictionary(store, words, batch_size)

    return SeedSummary(
        themes_created=themes_created,
        theme_words=sum(len(t.words) for t in themes),
        dictionary_words=inserted,
    )

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Seed the word-puzzle database with themes and a dictionary")
    p.add_argument("--source", choices=sorted(WORD_SOURCES), default=SOURCE)
    p.add_argument("--min-length", type=int, default=MIN_LEN)
    p.add_argument("--max-length", type=int, default=MAX_LEN)
    p.add_argument("--max-words", type=int, default=MAX_WORDS)
    p.add_argument("--no-cache", action="store_true", help="ignore and do not write the local word cache")
    p.add_argument("--threshold", type=int, default=RESEED_THRESHOLD,
                   help="ask before reseeding when the dictionary holds more rows than this")
    p.add_argument("--yes", action="store_true", help="reseed without asking")
    p.add_argument("-v", "--verbose", action="store_true")
    return p

async def _main(args: argparse.Namespace) -> SeedSummary:
    options = WordListOptions(
        source=args.source,
        min_length=args.min_length,
        max_length=args.max_length,
        max_words=args.max_words,
        use_cache=USE_CACHE and not args.no_cache,
    )
    async with open_engine() as engine:
        await ping(engine)
        await create_schema(engine)
        async with make_sessionmaker(engine)() as session:
            return await run_seed(
                SeedStore(session),
                options=options,
                threshold=args.threshold,
                confirm=always_yes if args.yes else confirm_reseed,
            )

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(levelname)s %(message)s",
    )
    log.info("Starting seed...")
    try:
        summary = asyncio.run(_main(args))
    except Exception:
        log.exception("Seed failed")
        return 1

    if summary.skipped:
        log.info("Nothing changed. Goodbye!")
        return 0
    log.info("Summary:")
    log.info("  Themes created: %d", summary.themes_created)
    log.info("  Theme words: %d", summary.theme_words)
    log.info("  Dictionary words: %d", summary.dictionary_words)
    log.info("Seed completed successfully!")
    return 0

def run():
    sys.exit(main())

if __name__ == "__main__":
    run()
