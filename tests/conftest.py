"""Shared fixtures for kana-romaji tests."""

import pytest

from kana_romaji.transliterate import KanaTransliterator


@pytest.fixture
def transliterator() -> KanaTransliterator:
    """Return a fresh transliterator instance."""
    return KanaTransliterator()


@pytest.fixture
def vowel_spelling_transliterator() -> KanaTransliterator:
    """Return a transliterator that spells out lengthened vowels."""
    return KanaTransliterator(append_small_vowel=True)
