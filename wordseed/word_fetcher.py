# wordseed/word_fetcher.py
from __future__ import annotations

import json
import logging
import os
import re
import time
from pathlib import Path
from typing import Callable, List, Optional

import httpx
from pydantic import ValidationError

from .schema import CacheRecord, WordListOptions
from .word_sources import FALLBACK_WORDS, WORD_SOURCES

log = logging.getLogger(__name__)

CACHE_DIR = Path(os.getenv("WORD_CACHE_DIR", str(Path(__file__).parent / ".cache")))
CACHE_TTL_MS = 7 * 24 * 60 * 60 * 1000   # one week
FETCH_TIMEOUT = float(os.getenv("WORD_FETCH_TIMEOUT", "30"))

_WORD_RE = re.compile(r"^[A-Z]+$")

def now_ms() -> int:
    return int(time.time() * 1000)

def cache_path(source: str, cache_dir: Optional[Path] = None) -> Path:
    return Path(cache_dir or CACHE_DIR) / f"words_{source}.json"

def filter_words(text: str, min_length: int, max_length: int, max_words: int) -> List[str]:
    """Uppercase, keep A-Z tokens within the length bounds, keep source order."""
    out: List[str] = []
    for line in text.split("\n"):
        w = line.strip().upper()
        if not _WORD_RE.match(w):
            continue
        if not (min_length <= len(w) <= max_length):
            continue
        out.append(w)
    return out[:max_words]

def read_cache(path: Path, now: int) -> Optional[List[str]]:
    """Words from a fresh cache file, or None on miss/expired/corrupt."""
    if not path.exists():
        return None
    log.info("Loading words from cache %s", path)
    try:
        record = CacheRecord.model_validate_json(path.read_bytes())
    except (OSError, ValidationError) as e:
        log.warning("Cache file corrupted (%s), downloading fresh list...", e)
        return None
    if now - record.timestamp >= CACHE_TTL_MS:
        log.info("Cache expired, downloading fresh list...")
        return None
    log.info("Loaded %d words from cache", len(record.words))
    return record.words

def write_cache(path: Path, record: CacheRecord):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(record.model_dump(), indent=2), encoding="utf-8")

async def _get_text(client: httpx.AsyncClient, url: str) -> str:
    r = await client.get(url, follow_redirects=True)
    r.raise_for_status()
    return r.text

async def get_word_list(
    options: Optional[WordListOptions] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    cache_dir: Optional[Path] = None,
    clock: Callable[[], int] = now_ms,
) -> List[str]:
    """
    Resolve a word list for `options.source`:
    - fresh cache file (younger than a week) -> returned as stored
    - otherwise one download, filtered and truncated, then cached
    - any failure on the download path -> FALLBACK_WORDS
    """
    opts = options or WordListOptions()
    path = cache_path(opts.source, cache_dir)

    if opts.use_cache:
        cached = read_cache(path, clock())
        if cached is not None:
            return cached

    url = WORD_SOURCES[opts.source]
    log.info("Downloading word list from %s...", opts.source)
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=httpx.Timeout(FETCH_TIMEOUT), follow_redirects=True) as c:
                text = await _get_text(c, url)
        else:
            text = await _get_text(client, url)

        words = filter_words(text, opts.min_length, opts.max_length, opts.max_words)
        log.info("Downloaded %d valid words", len(words))

        if opts.use_cache:
            write_cache(path, CacheRecord(timestamp=clock(), source=opts.source, words=words))
            log.info("Saved to cache %s", path)

        return words
    except Exception as e:
        log.warning("Failed to download word list: %s", e)
        log.info("Using fallback word list...")
        return list(FALLBACK_WORDS)
