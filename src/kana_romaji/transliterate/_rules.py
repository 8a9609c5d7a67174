"""
Table-driven kana → romaji transliterator.

A single left-to-right scan with one character of lookahead. Each kana
syllable is looked up in the syllable table; a small kana immediately after
it is consumed as a modifier (glide, lengthening vowel, or an anomaly that
has no clean romaji). Everything else is copied through verbatim, and one
space is inserted wherever the output switches between kana-derived and
verbatim text.

Example:
    >>> from kana_romaji.transliterate import transliterate
    >>> transliterate("にほん")
    'nihon\\n'

    >>> from kana_romaji.transliterate import KanaTransliterator
    >>> KanaTransliterator().transliterate("私はカナ", terminate=False)
    '私 hakana'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from kana_romaji._tables import (
    ANOMALIES,
    GLIDES,
    SMALL_MARKERS,
    SMALL_VOWELS,
    SYLLABLES,
)

__all__ = [
    "KanaTransliterator",
    "Segment",
    "TransliterationResult",
    "transliterate",
]

logger = logging.getLogger(__name__)

# Segment kinds
SYLLABLE = "syllable"
GLIDE = "glide"
LONG_VOWEL = "long_vowel"
ANOMALY = "anomaly"
VERBATIM = "verbatim"

_KANA_KINDS = frozenset({SYLLABLE, GLIDE, LONG_VOWEL, ANOMALY})

# =============================================================================
# Data Classes
# =============================================================================


@dataclass
class Segment:
    """One emitted unit of output."""

    position: int
    source: str
    output: str
    kind: str

    @property
    def is_kana(self) -> bool:
        return self.kind in _KANA_KINDS


@dataclass
class TransliterationResult:
    """Detailed result from transliteration."""

    original: str
    romaji: str
    segments: list[Segment] = field(default_factory=list)

    @property
    def anomalies(self) -> list[Segment]:
        """Segments whose modifier had no clean romaji."""
        return [s for s in self.segments if s.kind == ANOMALY]


# =============================================================================
# Main Transliterator Class
# =============================================================================


class KanaTransliterator:
    """
    Transliterate hiragana and katakana to romaji.

    Args:
        append_small_vowel: Spell out the lengthened vowel after the hyphen
            (``ka-a``) instead of the hyphen alone (``ka-``).
        track_statistics: Update ``stats`` while scanning. Disable for an
            instance shared between callers; the counters are not locked.

    Example:
        >>> t = KanaTransliterator()
        >>> t.transliterate("ちゃ")
        'cha\\n'
    """

    def __init__(
        self,
        *,
        append_small_vowel: bool = False,
        track_statistics: bool = True,
    ) -> None:
        self.append_small_vowel = append_small_vowel
        self.track_statistics = track_statistics
        self.reset_statistics()

    def _modify(self, position: int, char: str, base: str, small: str) -> Segment:
        """Combine a syllable with the small kana that follows it."""
        source = char + small

        glide = GLIDES.get(small)
        if glide is not None:
            # Swap the syllable's vowel for the glide's: chi + ya -> cha
            return Segment(position, source, base[:-1] + glide[1:], GLIDE)

        vowel = SMALL_VOWELS.get(small)
        if vowel is not None:
            output = base + "-"
            if self.append_small_vowel:
                output += vowel
            return Segment(position, source, output, LONG_VOWEL)

        tag = ANOMALIES[small]
        logger.debug("Unresolved small kana %r after %r at %d (%s)", small, char, position, tag)
        return Segment(position, source, f"<{base}.{tag}>", ANOMALY)

    def iter_segments(self, chars: Iterable[str]) -> Iterator[Segment]:
        """
        Scan characters incrementally, yielding one Segment per output unit.

        Accepts any iterable of single characters, so a stream can be driven
        character by character; only one character is held as lookahead.

        Args:
            chars: Characters to scan

        Yields:
            Segments in input order
        """
        it = iter(chars)
        position = 0
        current = next(it, None)

        while current is not None:
            following = next(it, None)
            base = SYLLABLES.get(current)

            if base is None:
                segment = Segment(position, current, current, VERBATIM)
            elif following is not None and following in SMALL_MARKERS:
                segment = self._modify(position, current, base, following)
                following = next(it, None)
            else:
                segment = Segment(position, current, base, SYLLABLE)

            if self.track_statistics:
                self._count(segment)
            yield segment
            position += len(segment.source)
            current = following

    def _count(self, segment: Segment) -> None:
        self.stats['total_chars'] += len(segment.source)
        if segment.kind == VERBATIM:
            self.stats['verbatim'] += 1
            return

        self.stats['syllables'] += 1
        if segment.kind == SYLLABLE:
            return

        transformations = self.stats['transformations']
        transformations[segment.kind] = transformations.get(segment.kind, 0) + 1
        if segment.kind == ANOMALY:
            tag = ANOMALIES[segment.source[-1]]
            self.stats['anomalies'][tag] = self.stats['anomalies'].get(tag, 0) + 1

    @staticmethod
    def _spaced(segments: Iterable[Segment], terminate: bool) -> Iterator[str]:
        """Interleave word-boundary spaces between segments of different class."""
        previous: Optional[bool] = None
        for segment in segments:
            if previous is not None and previous != segment.is_kana:
                yield " "
            previous = segment.is_kana
            yield segment.output
        if terminate:
            yield "\n"

    def iter_output(self, chars: Iterable[str], terminate: bool = True) -> Iterator[str]:
        """
        Yield output pieces incrementally.

        Args:
            chars: Characters to scan
            terminate: Whether to finish with a newline

        Yields:
            Spaces, romaji, verbatim characters and the final newline
        """
        return self._spaced(self.iter_segments(chars), terminate)

    def transliterate(self, text: str, terminate: bool = True) -> str:
        """
        Transliterate kana in text to romaji.

        Args:
            text: Any Unicode text
            terminate: Whether to append the trailing newline

        Returns:
            Romaji with non-kana characters copied through
        """
        return "".join(self.iter_output(text, terminate=terminate))

    def transliterate_detailed(self, text: str, terminate: bool = True) -> TransliterationResult:
        """
        Transliterate with a record of every emitted segment.

        Example:
            >>> result = KanaTransliterator().transliterate_detailed("きっ")
            >>> result.romaji
            '<ki.hold>\\n'
            >>> result.anomalies[0].source
            'きっ'
        """
        segments = list(self.iter_segments(text))
        romaji = "".join(self._spaced(segments, terminate))
        return TransliterationResult(original=text, romaji=romaji, segments=segments)

    def print_statistics(self):
        """Print transliteration statistics."""
        total = self.stats['total_chars']

        if total == 0:
            print("No characters processed.")
            return

        print("\n" + "="*60)
        print("TRANSLITERATION STATISTICS")
        print("="*60)
        print(f"Total characters scanned: {total:,}")
        print(f"Kana syllables: {self.stats['syllables']:,}")
        print(f"Copied verbatim: {self.stats['verbatim']:,}")
        print(f"\nModifiers applied:")

        for kind, count in sorted(self.stats['transformations'].items(),
                                  key=lambda x: x[1], reverse=True):
            print(f"  {kind:20} : {count:>6,}x")

        for tag, count in sorted(self.stats['anomalies'].items()):
            print(f"  {'<' + tag + '>':20} : {count:>6,}x")

        print("="*60 + "\n")

    def reset_statistics(self):
        """Reset transliteration statistics."""
        self.stats = {
            'total_chars': 0,
            'syllables': 0,
            'verbatim': 0,
            'transformations': {},
            'anomalies': {},
        }


# =============================================================================
# Module-level Convenience Function
# =============================================================================

# Singleton instance for convenience function
_default_transliterator: Optional[KanaTransliterator] = None


def transliterate(text: str) -> str:
    """
    Transliterate kana in text to romaji.

    Convenience function that uses a shared transliterator instance.
    The shared instance keeps no statistics, so concurrent calls share no
    mutable state.

    Args:
        text: Any Unicode text

    Returns:
        Romaji followed by a newline

    Example:
        >>> transliterate("かんじ")
        'kanji\\n'
    """
    global _default_transliterator
    if _default_transliterator is None:
        _default_transliterator = KanaTransliterator(track_statistics=False)
    return _default_transliterator.transliterate(text)
