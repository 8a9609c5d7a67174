"""
Kana lookup tables.

Provides:
- SYLLABLES: kana → base romaji, hiragana and katakana unified
- GLIDES, SMALL_VOWELS, ANOMALIES: the three kinds of small kana modifier
- SMALL_MARKERS: every small kana that modifies the preceding syllable
- Character classification helpers

The katakana half of each table is derived from the hiragana half, so the
two scripts always romanize identically.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

__all__ = [
    "SYLLABLES",
    "GLIDES",
    "SMALL_VOWELS",
    "ANOMALIES",
    "SMALL_MARKERS",
    "HOLD",
    "COUNT",
    "is_kana",
    "is_syllable",
    "is_small",
    "katakana_to_hiragana",
    "hiragana_to_katakana",
]

# Distance between the hiragana (U+3041..U+3096) and katakana
# (U+30A1..U+30F6) blocks
_KATAKANA_OFFSET = 0x60
_HIRAGANA_FIRST = 0x3041
_HIRAGANA_LAST = 0x3096


def katakana_to_hiragana(ch: str) -> str:
    """Convert a single katakana char to hiragana; leave others as-is."""
    code = ord(ch)
    if _HIRAGANA_FIRST + _KATAKANA_OFFSET <= code <= _HIRAGANA_LAST + _KATAKANA_OFFSET:
        return chr(code - _KATAKANA_OFFSET)
    return ch


def hiragana_to_katakana(ch: str) -> str:
    """Convert a single hiragana char to katakana; leave others as-is."""
    code = ord(ch)
    if _HIRAGANA_FIRST <= code <= _HIRAGANA_LAST:
        return chr(code + _KATAKANA_OFFSET)
    return ch


def _both_scripts(hiragana: dict[str, str]) -> Mapping[str, str]:
    """Extend a hiragana table with its katakana counterparts, read-only."""
    table = dict(hiragana)
    for kana, value in hiragana.items():
        table[hiragana_to_katakana(kana)] = value
    return MappingProxyType(table)


# =============================================================================
# Syllables
# =============================================================================

# Voiced rows keep this system's historical spellings: ぢ and づ are written
# di and du, and the b-row is v except for bu.
SYLLABLES = _both_scripts({
    "あ": "a",   "い": "i",   "う": "u",   "え": "e",   "お": "o",
    "か": "ka",  "き": "ki",  "く": "ku",  "け": "ke",  "こ": "ko",
    "が": "ga",  "ぎ": "gi",  "ぐ": "gu",  "げ": "ge",  "ご": "go",
    "さ": "sa",  "し": "shi", "す": "su",  "せ": "se",  "そ": "so",
    "ざ": "za",  "じ": "ji",  "ず": "zu",  "ぜ": "ze",  "ぞ": "zo",
    "た": "ta",  "ち": "chi", "つ": "tsu", "て": "te",  "と": "to",
    "だ": "da",  "ぢ": "di",  "づ": "du",  "で": "de",  "ど": "do",
    "な": "na",  "に": "ni",  "ぬ": "nu",  "ね": "ne",  "の": "no",
    "は": "ha",  "ひ": "hi",  "ふ": "fu",  "へ": "he",  "ほ": "ho",
    "ば": "va",  "び": "vi",  "ぶ": "bu",  "べ": "ve",  "ぼ": "vo",
    "ぱ": "pa",  "ぴ": "pi",  "ぷ": "pu",  "ぺ": "pe",  "ぽ": "po",
    "ま": "ma",  "み": "mi",  "む": "mu",  "め": "me",  "も": "mo",
    "や": "ya",               "ゆ": "yu",               "よ": "yo",
    "ら": "ra",  "り": "ri",  "る": "ru",  "れ": "re",  "ろ": "ro",
    "わ": "wa",  "ゐ": "wi",              "ゑ": "we",  "を": "wo",
    "ん": "n",
    "ゔ": "vu",
})


# =============================================================================
# Small kana modifiers
# =============================================================================

# Palatalization: replaces the vowel of the preceding syllable
GLIDES = _both_scripts({
    "ゃ": "ya",
    "ゅ": "yu",
    "ょ": "yo",
})

# Vowel lengthening
SMALL_VOWELS = _both_scripts({
    "ぁ": "a",
    "ぃ": "i",
    "ぅ": "u",
    "ぇ": "e",
    "ぉ": "o",
})

HOLD = "hold"
COUNT = "count"

# No clean romaji; reported as <syllable.tag>
ANOMALIES = _both_scripts({
    "っ": HOLD,   # tsu == hold consonant
    "ゕ": COUNT,  # ka == counting mark
    "ゖ": COUNT,  # ke == counting mark
})

SMALL_MARKERS = frozenset(GLIDES) | frozenset(SMALL_VOWELS) | frozenset(ANOMALIES)


def is_syllable(char: str) -> bool:
    """Check if character is a full kana syllable."""
    return char in SYLLABLES


def is_small(char: str) -> bool:
    """Check if character is a small kana modifier."""
    return char in SMALL_MARKERS


def is_kana(char: str) -> bool:
    """Check if character is any kana this package knows about."""
    return char in SYLLABLES or char in SMALL_MARKERS
