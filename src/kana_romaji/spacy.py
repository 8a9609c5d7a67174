"""
spaCy integration for kana-romaji.

Provides a pipeline component that attaches romaji to docs and tokens.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("xx")
    >>> nlp.add_pipe("kana_romanizer")
    >>> doc = nlp("私はカナ")
    >>> doc._.romaji
    '私 hakana'
"""

from typing import Optional

from spacy.language import Language
from spacy.tokens import Doc, Token

from kana_romaji._tables import is_kana
from kana_romaji.transliterate._rules import KanaTransliterator

__all__ = [
    "KanaRomanizerComponent",
    "create_kana_romanizer",
]


@Language.factory(
    "kana_romanizer",
    default_config={"append_small_vowel": False},
    assigns=["doc._.romaji", "token._.romaji", "token._.has_kana"],
)
def create_kana_romanizer(
    nlp: Language,
    name: str,
    append_small_vowel: bool = False,
) -> "KanaRomanizerComponent":
    """Create a kana romanizer pipeline component."""
    return KanaRomanizerComponent(nlp, name, append_small_vowel=append_small_vowel)


class KanaRomanizerComponent:
    """
    spaCy pipeline component for kana → romaji transliteration.

    Extensions:
        - Doc._.romaji: Transliterated document text.
        - Token._.romaji: Transliterated token text.
        - Token._.has_kana: Whether the token contains any kana.

    Note: token.text is NEVER modified.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        append_small_vowel: bool = False,
    ) -> None:
        self.name = name
        self.append_small_vowel = append_small_vowel
        self._transliterator = KanaTransliterator(
            append_small_vowel=append_small_vowel, track_statistics=False
        )

        if not Doc.has_extension("romaji"):
            Doc.set_extension("romaji", default=None)
        if not Token.has_extension("romaji"):
            Token.set_extension("romaji", default=None)
        if not Token.has_extension("has_kana"):
            Token.set_extension("has_kana", default=False)

    def __call__(self, doc: Doc) -> Doc:
        doc._.romaji = self._transliterator.transliterate(doc.text, terminate=False)

        for token in doc:
            token._.romaji = self._transliterator.transliterate(token.text, terminate=False)
            token._.has_kana = any(is_kana(c) for c in token.text)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "KanaRomanizerComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "KanaRomanizerComponent":
        return self


def get_romanizer_pipe(nlp: Language) -> Optional[KanaRomanizerComponent]:
    """Get the kana romanizer component from a pipeline."""
    if "kana_romanizer" in nlp.pipe_names:
        return nlp.get_pipe("kana_romanizer")
    return None
