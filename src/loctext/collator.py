"""Locale-sensitive comparison and substring matching.

Two families of operations are offered, and they are deliberately separate:

Fixed matching (``equals_fixed``, ``contains_fixed``, ``find_fixed``)
    Compares raw codepoints. No normalization, no case folding, no rule
    lookups. Runs at C speed: O(n) equality, ``str.find`` for search. Use it
    when exact representation matters or when throughput does.

Collation matching (``equals``, ``compare``, ``contains``, ``find``)
    Compares what a reader perceives. Both operands are NFC-normalized,
    optionally case-folded with the locale's exceptions, and ordered by a
    multi-level key built from the locale's tailorings. Every call pays for
    normalization plus a per-cluster Python loop, so it is strictly slower
    than fixed matching. ``find`` is O(n·m) in clusters.

The collation key has four levels, compared in order:

1. primary: base letters, with locale tailorings (Swedish "ö" after "z",
   Czech "ch" after "h")
2. secondary: diacritics
3. tertiary: case, lowercase first (omitted when ignoring case)
4. identical: the normalized (and folded) codepoints

Because the identical level is the normalized text itself, ``compare``
returns EQUAL exactly when ``equals`` returns True.

Different locales may disagree on equality under ``ignore_case``: Turkish
folds "İ" with "i" and keeps "I" apart, root does not.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from loctext.casemap import fold_with, lower_with
from loctext.locales import Locale, RuleSet, get_rules
from loctext.normalizer import normalize
from loctext.text import iter_clusters, validate_text

SortKey = tuple[Any, ...]


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class CollationOptions:
    """Options for collation-based operations.

    Attributes:
        locale: Locale identifier or Locale; None selects root.
        ignore_case: Fold case (with locale exceptions) before comparing.
    """

    locale: str | Locale | None = None
    ignore_case: bool = False


DEFAULT_OPTIONS = CollationOptions()


@dataclass(frozen=True)
class MatchSpan:
    """Half-open codepoint span ``[start, end)`` in the searched text."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the matched substring of ``text``."""
        return text[self.start : self.end]


def comparable_form(text: str, rules: RuleSet, ignore_case: bool) -> str:
    """Return the text as collation sees it: NFC, folded when ignoring case."""
    nfc = normalize(text)
    if ignore_case:
        return unicodedata.normalize("NFC", fold_with(nfc, rules))
    return nfc


def _is_mark(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M")


def _weights(base: str, rules: RuleSet) -> tuple[tuple, tuple]:
    """Build primary and secondary levels for lower-cased NFC text."""
    weights = rules.weights
    max_len = rules.max_element_length
    primary: list[tuple[int, ...]] = []
    secondary: list[tuple[int, ...]] = []
    n = len(base)
    i = 0
    while i < n:
        for length in range(min(max_len, n - i), 0, -1):
            weight = weights.get(base[i : i + length])
            if weight is not None:
                primary.append(weight)
                secondary.append(())
                i += length
                break
        else:
            decomposed = unicodedata.normalize("NFD", base[i])
            i += 1
            head = decomposed[0]
            if _is_mark(head):
                # Unattached mark: no primary weight
                secondary.append(tuple(ord(m) for m in decomposed))
                continue
            marks = tuple(ord(m) for m in decomposed[1:] if _is_mark(m))
            # Hangul syllables decompose into jamo letters, each a primary
            letters = head.casefold() + "".join(
                ch for ch in decomposed[1:] if not _is_mark(ch)
            )
            for k, piece in enumerate(letters):
                primary.append(weights.get(piece, (ord(piece),)))
                secondary.append(marks if k == 0 else ())
    return tuple(primary), tuple(secondary)


def _case_weight(ch: str) -> int:
    return 1 if ch.isupper() or ch.istitle() else 0


def build_key(text: str, rules: RuleSet, ignore_case: bool) -> SortKey:
    """Build the four-level collation key for an already validated text."""
    comparable = comparable_form(text, rules, ignore_case)
    if ignore_case:
        base = comparable
        tertiary: tuple[int, ...] = ()
    else:
        base = unicodedata.normalize("NFC", lower_with(comparable, rules))
        tertiary = tuple(_case_weight(ch) for ch in comparable)
    primary, secondary = _weights(base, rules)
    return (primary, secondary, tertiary, comparable)


def _iter_matches(
    haystack: str, needle: str, rules: RuleSet, ignore_case: bool
) -> Iterator[MatchSpan]:
    """Yield non-overlapping matches of ``needle``, left to right."""
    target = comparable_form(needle, rules, ignore_case)
    if not target:
        yield MatchSpan(0, 0)
        return

    spans = list(iter_clusters(haystack))
    units = [comparable_form(haystack[s:e], rules, ignore_case) for s, e in spans]
    i = 0
    while i < len(spans):
        accumulated = ""
        for j in range(i, len(spans)):
            accumulated += units[j]
            if len(accumulated) >= len(target):
                if accumulated == target:
                    yield MatchSpan(spans[i][0], spans[j][1])
                    i = j
                break
            if not target.startswith(accumulated):
                break
        i += 1


def sort_key(text: str, options: CollationOptions | None = None) -> SortKey:
    """Return a key that orders texts consistently with :func:`compare`.

    Suitable for ``sorted(texts, key=...)``. Keys from different options
    must not be mixed.
    """
    options = options or DEFAULT_OPTIONS
    validate_text(text)
    return build_key(text, get_rules(options.locale), options.ignore_case)


def equals(a: str, b: str, options: CollationOptions | None = None) -> bool:
    """Check whether two texts are equal under collation rules.

    Precomposed and decomposed spellings are equal; with ``ignore_case``,
    case differences are folded using the locale's exceptions.

    Raises:
        MalformedTextError: If either operand is not well-formed.
        UnknownLocaleError: If the locale has no rule table.
    """
    options = options or DEFAULT_OPTIONS
    validate_text(a)
    validate_text(b)
    rules = get_rules(options.locale)
    return comparable_form(a, rules, options.ignore_case) == comparable_form(
        b, rules, options.ignore_case
    )


def equals_fixed(a: str, b: str) -> bool:
    """Check exact codepoint identity, skipping normalization entirely."""
    validate_text(a)
    validate_text(b)
    return a == b


def compare(a: str, b: str, options: CollationOptions | None = None) -> Ordering:
    """Three-way collation comparison.

    Example:
        >>> compare("apple", "Apple")
        <Ordering.LESS: -1>
        >>> compare("apple", "Apple", CollationOptions(ignore_case=True))
        <Ordering.EQUAL: 0>
    """
    options = options or DEFAULT_OPTIONS
    validate_text(a)
    validate_text(b)
    rules = get_rules(options.locale)
    key_a = build_key(a, rules, options.ignore_case)
    key_b = build_key(b, rules, options.ignore_case)
    if key_a < key_b:
        return Ordering.LESS
    if key_a > key_b:
        return Ordering.GREATER
    return Ordering.EQUAL


def find(
    haystack: str, needle: str, options: CollationOptions | None = None
) -> MatchSpan | None:
    """Find the first collation match of ``needle`` in ``haystack``.

    Matches start and end on cluster boundaries (a base letter with its
    marks), so "e" does not match inside "é". The returned span indexes the
    original haystack, whatever its encoding form. An empty needle matches
    at offset 0.

    Returns:
        MatchSpan of the first match, or None.
    """
    options = options or DEFAULT_OPTIONS
    validate_text(haystack)
    validate_text(needle)
    matches = _iter_matches(
        haystack, needle, get_rules(options.locale), options.ignore_case
    )
    return next(matches, None)


def find_all(
    haystack: str, needle: str, options: CollationOptions | None = None
) -> list[MatchSpan]:
    """Find all non-overlapping collation matches, left to right."""
    options = options or DEFAULT_OPTIONS
    validate_text(haystack)
    validate_text(needle)
    return list(
        _iter_matches(haystack, needle, get_rules(options.locale), options.ignore_case)
    )


def contains(
    haystack: str, needle: str, options: CollationOptions | None = None
) -> bool:
    """Check whether ``needle`` occurs in ``haystack`` under collation rules."""
    return find(haystack, needle, options) is not None


def find_fixed(haystack: str, needle: str) -> MatchSpan | None:
    """Find the first exact codepoint match of ``needle``."""
    validate_text(haystack)
    validate_text(needle)
    index = haystack.find(needle)
    if index < 0:
        return None
    return MatchSpan(index, index + len(needle))


def find_all_fixed(haystack: str, needle: str) -> list[MatchSpan]:
    """Find all non-overlapping exact codepoint matches, left to right.

    An empty needle yields a single match at offset 0, as in :func:`find_all`.
    """
    validate_text(haystack)
    validate_text(needle)
    if not needle:
        return [MatchSpan(0, 0)]
    spans: list[MatchSpan] = []
    index = haystack.find(needle)
    while index >= 0:
        spans.append(MatchSpan(index, index + len(needle)))
        index = haystack.find(needle, index + len(needle))
    return spans


def contains_fixed(haystack: str, needle: str) -> bool:
    """Check for an exact codepoint substring."""
    validate_text(haystack)
    validate_text(needle)
    return needle in haystack


class Collator:
    """Collation operations bound to one set of options.

    The locale is resolved on construction, so an unknown identifier fails
    here rather than on first use.

    Example:
        collator = Collator("sv")
        collator.compare("öl", "zebra")  # Ordering.GREATER
        sorted(words, key=collator.key)
    """

    def __init__(
        self, locale: str | Locale | None = None, *, ignore_case: bool = False
    ) -> None:
        self.options = CollationOptions(locale=locale, ignore_case=ignore_case)
        self._rules = get_rules(locale)

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def key(self, text: str) -> SortKey:
        validate_text(text)
        return build_key(text, self._rules, self.options.ignore_case)

    def equals(self, a: str, b: str) -> bool:
        return equals(a, b, self.options)

    def compare(self, a: str, b: str) -> Ordering:
        return compare(a, b, self.options)

    def contains(self, haystack: str, needle: str) -> bool:
        return contains(haystack, needle, self.options)

    def find(self, haystack: str, needle: str) -> MatchSpan | None:
        return find(haystack, needle, self.options)

    def find_all(self, haystack: str, needle: str) -> list[MatchSpan]:
        return find_all(haystack, needle, self.options)

    def __repr__(self) -> str:
        return (
            f"Collator(locale={self._rules.language!r}, "
            f"ignore_case={self.options.ignore_case})"
        )
