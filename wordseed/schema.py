import re
from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

from .models import Difficulty

SourceName = Literal["WORDLE_ANSWERS", "WORDLE_ALLOWED", "COMMON_10K", "COMPREHENSIVE"]

_WORD_RE = re.compile(r"^[A-Z]+$")

class WordEntry(BaseModel):
    word: str
    length: int

    @model_validator(mode="after")
    def _check_word(self):
        if not _WORD_RE.match(self.word):
            raise ValueError(f"word must be A-Z only: {self.word!r}")
        if self.length != len(self.word):
            raise ValueError(
                f"length {self.length} does not match {self.word!r} ({len(self.word)} letters)"
            )
        return self

class ThemeIn(BaseModel):
    name: str
    category: str
    difficulty: Difficulty
    words: List[WordEntry]

class CacheRecord(BaseModel):
    timestamp: int          # epoch ms
    source: str
    words: List[str]

class WordListOptions(BaseModel):
    source: SourceName = "COMMON_10K"
    min_length: int = Field(3, ge=1)
    max_length: int = Field(12, ge=1)
    max_words: int = Field(50000, ge=0)
    use_cache: bool = True

class SeedSummary(BaseModel):
    themes_created: int = 0
    theme_words: int = 0
    dictionary_words: int = 0
    skipped: bool = False
