"""
Transliteration submodule.

Re-exports the rule engine.
"""

from kana_romaji.transliterate._rules import (
    KanaTransliterator,
    Segment,
    TransliterationResult,
    transliterate,
)

__all__ = [
    "KanaTransliterator",
    "Segment",
    "TransliterationResult",
    "transliterate",
]
