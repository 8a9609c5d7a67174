"""
kana-romaji: Japanese kana to romaji transliteration.

Converts hiragana and katakana to romaji, leaving everything else
(including kanji) unmodified, with a space at every boundary between
converted and unconverted text.

Basic usage:
    >>> from kana_romaji import romanize
    >>> romanize("私はカナ")
    '私 hakana'

Transliterator usage:
    >>> from kana_romaji.transliterate import KanaTransliterator
    >>> t = KanaTransliterator()
    >>> t.transliterate("にほん")
    'nihon\\n'
"""

from kana_romaji.transliterate import (
    KanaTransliterator,
    Segment,
    TransliterationResult,
    transliterate,
)
from kana_romaji._tables import is_kana, katakana_to_hiragana, hiragana_to_katakana

__version__ = "0.1.0"
__all__ = [
    "romanize",
    "transliterate",
    "KanaTransliterator",
    "Segment",
    "TransliterationResult",
    "is_kana",
    "katakana_to_hiragana",
    "hiragana_to_katakana",
]


def romanize(text: str) -> str:
    """
    Transliterate kana in text, without the trailing newline.

    Args:
        text: Any Unicode text

    Returns:
        Romaji with non-kana characters copied through
    """
    return transliterate(text)[:-1]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "KanaRomanizerComponent":
        try:
            from kana_romaji.spacy import KanaRomanizerComponent
            return KanaRomanizerComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install kana-romaji[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
