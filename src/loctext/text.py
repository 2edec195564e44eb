"""Text ingestion at the library boundary.

Every public operation accepts only well-formed ``str`` values. Conversions
from other representations are explicit and fallible: bytes go through
:func:`decode_text`, and nothing is coerced implicitly.

Also provides cluster-aware length helpers. A *cluster* here is a base
codepoint followed by any combining marks (and conjoining Hangul jamo), which
is what a reader perceives as one character.
"""

from __future__ import annotations

import codecs
import unicodedata
from collections.abc import Iterator

from loctext.exceptions import MalformedTextError

# Hangul conjoining medial vowels and final consonants attach to the
# preceding syllable or leading consonant.
_JAMO_ATTACHING = range(0x1160, 0x1200)


def validate_text(value: object) -> str:
    """Return ``value`` if it is a well-formed text value.

    Args:
        value: Candidate text.

    Returns:
        The same string, unchanged.

    Raises:
        MalformedTextError: If value is not a str or contains a lone
            surrogate codepoint.
    """
    if not isinstance(value, str):
        raise MalformedTextError(f"expected str, got {type(value).__name__}")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise MalformedTextError("lone surrogate codepoint", index=e.start) from e
    return value


def decode_text(data: bytes | bytearray, encoding: str = "utf-8") -> str:
    """Decode raw bytes into a text value.

    Decoding is strict: either the whole input decodes or nothing is
    returned.

    Args:
        data: Raw bytes.
        encoding: Codec name understood by Python's codec registry.

    Returns:
        Decoded text.

    Raises:
        MalformedTextError: If the codec is unknown or the bytes are invalid
            for it.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise MalformedTextError(f"expected bytes, got {type(data).__name__}")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise MalformedTextError(f"unknown encoding '{encoding}'") from e
    try:
        text = bytes(data).decode(encoding, errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedTextError(
            f"invalid {encoding} byte sequence", index=e.start
        ) from e
    return validate_text(text)


def _attaches(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M") or ord(ch) in _JAMO_ATTACHING


def iter_clusters(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` offsets of each cluster in ``text``.

    A mark at the very start of the string forms a cluster of its own.
    """
    n = len(text)
    i = 0
    while i < n:
        j = i + 1
        while j < n and _attaches(text[j]):
            j += 1
        yield i, j
        i = j


def clusters(text: str) -> list[str]:
    """Split text into perceived characters.

    Example:
        >>> len(clusters("ca\\u0301fe"))
        4
    """
    validate_text(text)
    return [text[start:end] for start, end in iter_clusters(text)]


def text_length(text: str) -> int:
    """Return the number of codepoints in ``text``."""
    return len(validate_text(text))


def grapheme_length(text: str) -> int:
    """Return the number of perceived characters in ``text``.

    Precomposed and decomposed spellings of the same word have the same
    grapheme length even though their codepoint lengths differ.
    """
    validate_text(text)
    return sum(1 for _ in iter_clusters(text))
