"""Reseed confirmation and fixture integrity."""
import pytest
from pydantic import ValidationError

from wordseed.models import Difficulty
from wordseed.prompt import always_yes, confirm_reseed
from wordseed.schema import ThemeIn, WordEntry
from wordseed.themes import THEMES


class TestConfirmReseed:

    @pytest.mark.parametrize("answer", ["y", "Y"])
    def test_yes(self, answer):
        assert confirm_reseed(25000, 20000, ask=lambda prompt: answer)

    @pytest.mark.parametrize("answer", ["", "n", "N", "yes", "maybe", " y "])
    def test_anything_else_declines(self, answer):
        assert not confirm_reseed(25000, 20000, ask=lambda prompt: answer)

    def test_closed_stdin_declines(self):
        def ask(prompt):
            raise EOFError
        assert not confirm_reseed(25000, 20000, ask=ask)

    def test_prompt_text(self):
        prompts = []
        confirm_reseed(1, 0, ask=lambda p: prompts.append(p) or "n")
        assert prompts == ["Clear and reseed? (y/N): "]

    def test_always_yes(self):
        assert always_yes(10**6, 0)


class TestWordEntry:

    def test_valid(self):
        assert WordEntry(word="OVEN", length=4).length == 4

    def test_length_mismatch_fails(self):
        with pytest.raises(ValidationError):
            WordEntry(word="SECATEURS", length=10)

    def test_lowercase_fails(self):
        with pytest.raises(ValidationError):
            WordEntry(word="oven", length=4)

    def test_bad_difficulty(self):
        with pytest.raises(ValidationError):
            ThemeIn(name="X", category="Y", difficulty="impossible", words=[])


class TestThemeFixtures:

    def test_ten_themes_of_three_words(self):
        assert len(THEMES) == 10
        assert all(len(t.words) == 3 for t in THEMES)

    def test_lengths_match_words(self):
        for theme in THEMES:
            for entry in theme.words:
                assert entry.length == len(entry.word)

    def test_difficulties(self):
        assert {t.difficulty for t in THEMES} == set(Difficulty)

    def test_unique_names(self):
        names = [t.name for t in THEMES]
        assert len(names) == len(set(names))
