"""
Command-line interface for kana-romaji.

Usage:
    kana にほんご              # transliterate the arguments
    echo カタカナ | kana       # transliterate standard input
    python -m kana_romaji 私はカナ

With arguments, they are joined with single spaces and transliterated.
Every argument is text, including ones that start with a dash.
Without arguments, all of standard input is read and transliterated.
"""

import logging
import sys

from kana_romaji.transliterate import KanaTransliterator

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(name)s: %(levelname)s: %(message)s"


def _ensure_utf8(stream) -> None:
    """Switch a text stream to UTF-8 if it is using something else."""
    encoding = (getattr(stream, "encoding", None) or "").lower().replace("-", "")
    if encoding != "utf8" and hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8")


def _run(argv: list[str]) -> int:
    if argv:
        text = " ".join(argv)
    else:
        _ensure_utf8(sys.stdin)
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.critical("failed to read standard input: %s", e)
            return 1

    _ensure_utf8(sys.stdout)
    transliterator = KanaTransliterator(track_statistics=False)
    for piece in transliterator.iter_output(text):
        sys.stdout.write(piece)
    sys.stdout.flush()
    return 0


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Report on the current stderr regardless of handlers already on the root
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger = logging.getLogger("kana_romaji")
    package_logger.addHandler(handler)
    try:
        return _run(list(argv))
    finally:
        package_logger.removeHandler(handler)


if __name__ == "__main__":
    sys.exit(main())
