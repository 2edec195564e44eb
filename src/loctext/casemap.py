"""Locale-aware case mapping.

Each operation applies the locale's exception table first (longest source
sequence wins) and the Unicode default mapping to everything else. Under the
Turkish locale "i" upper-cases to "İ" and "ı" to "I"; under root,
"i" upper-cases to "I" and there is no dotless-i rule.

Mappings may change length ("ß" upper-cases to "SS"), so callers must not
assume output and input have the same length.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Mapping

from loctext.exceptions import UnsupportedOperationError
from loctext.locales import Locale, RuleSet, get_rules
from loctext.text import iter_clusters, validate_text

# Apostrophes that join word parts when title-casing ("they're", "o’clock")
_APOSTROPHES = frozenset({"'", "’"})

# Greek and Greek Extended blocks
_GREEK_RANGES = ((0x0370, 0x0400), (0x1F00, 0x2000))


def _apply(
    text: str,
    mapping: Mapping[str, str],
    default: Callable[[str], str],
) -> str:
    """Map text through exception table ``mapping``, else ``default``.

    Runs of unmapped text are passed to ``default`` whole so that
    context-sensitive defaults (Greek final sigma) still see their context.
    """
    if not mapping:
        return default(text)

    max_len = max(len(k) for k in mapping)
    out: list[str] = []
    run_start = 0
    i = 0
    n = len(text)
    while i < n:
        for length in range(min(max_len, n - i), 0, -1):
            replacement = mapping.get(text[i : i + length])
            if replacement is not None:
                break
        else:
            i += 1
            continue
        if run_start < i:
            out.append(default(text[run_start:i]))
        out.append(replacement)
        i += length
        run_start = i
    if run_start < n:
        out.append(default(text[run_start:]))
    return "".join(out)


def _is_greek(ch: str) -> bool:
    cp = ord(ch)
    return any(start <= cp < end for start, end in _GREEK_RANGES)


def _strip_marks_after_greek(text: str, marks: frozenset[str]) -> str:
    out: list[str] = []
    for start, end in iter_clusters(text):
        cluster = text[start:end]
        decomposed = unicodedata.normalize("NFD", cluster)
        if not _is_greek(decomposed[0]):
            out.append(cluster)
            continue
        kept = "".join(ch for ch in decomposed if ch not in marks)
        # Recompose Greek clusters only; other text keeps its form
        out.append(unicodedata.normalize("NFC", kept))
    return "".join(out)


def upper_with(text: str, rules: RuleSet) -> str:
    """Upper-case text with an already resolved rule set."""
    result = _apply(text, rules.upper_map, str.upper)
    if rules.upper_strip_marks:
        result = _strip_marks_after_greek(result, rules.upper_strip_marks)
    return result


def lower_with(text: str, rules: RuleSet) -> str:
    """Lower-case text with an already resolved rule set."""
    return _apply(text, rules.lower_map, str.lower)


def fold_with(text: str, rules: RuleSet) -> str:
    """Case-fold text with an already resolved rule set."""
    return _apply(text, rules.fold_map, str.casefold)


def to_upper(text: str, locale: str | Locale | None = None) -> str:
    """Convert text to upper case under a locale's rules.

    Args:
        text: Text to convert.
        locale: Locale identifier; None selects root.

    Returns:
        Upper-cased text.

    Raises:
        MalformedTextError: If text is not a well-formed text value.
        UnknownLocaleError: If the locale has no rule table.

    Example:
        >>> to_upper("istanbul", "tr")
        'İSTANBUL'
        >>> to_upper("istanbul")
        'ISTANBUL'
    """
    validate_text(text)
    return upper_with(text, get_rules(locale))


def to_lower(text: str, locale: str | Locale | None = None) -> str:
    """Convert text to lower case under a locale's rules.

    Example:
        >>> to_lower("ISPARTA", "tr")
        'ısparta'
    """
    validate_text(text)
    return lower_with(text, get_rules(locale))


def fold_case(text: str, locale: str | Locale | None = None) -> str:
    """Case-fold text for case-insensitive comparison.

    Folding is stronger than lower-casing ("ß" folds to "ss") and honours
    the same locale exceptions as :func:`to_lower`.
    """
    validate_text(text)
    return fold_with(text, get_rules(locale))


def _is_word_char(ch: str) -> bool:
    return unicodedata.category(ch)[0] in "LMN"


def _title_word(word: str, rules: RuleSet) -> str:
    # Marks with no base letter are skipped; the first letter or digit
    # after them is the one title-cased ("1st" stays "1st").
    start = 0
    while start < len(word) and unicodedata.category(word[start]).startswith("M"):
        start += 1
    prefix, word = word[:start], word[start:]
    if not word:
        return prefix
    for digraph in rules.title_digraphs:
        if word[: len(digraph)].casefold() == digraph:
            head = word[: len(digraph)].upper()
            rest = word[len(digraph) :]
            break
    else:
        first = word[0]
        head = rules.title_map.get(first) or first.title()
        rest = word[1:]
    return prefix + head + lower_with(rest, rules)


def to_title(text: str, locale: str | Locale | None = None) -> str:
    """Capitalize the first letter of each word, lower-casing the rest.

    A word is a run of letters, marks and digits; an apostrophe between two
    word characters does not end the word, so "they're" becomes "They're".
    Leading marks are skipped and the next character is title-cased, so a
    word starting with a digit keeps its letters lower-case ("1st").

    Raises:
        MalformedTextError: If text is not a well-formed text value.
        UnknownLocaleError: If the locale has no rule table.
        UnsupportedOperationError: If the locale defines no title casing.
    """
    validate_text(text)
    rules = get_rules(locale)
    if not rules.title_supported:
        raise UnsupportedOperationError("title", rules.language)

    out: list[str] = []
    n = len(text)
    i = 0
    while i < n:
        if not _is_word_char(text[i]):
            out.append(text[i])
            i += 1
            continue
        j = i + 1
        while j < n and (
            _is_word_char(text[j])
            or (text[j] in _APOSTROPHES and j + 1 < n and _is_word_char(text[j + 1]))
        ):
            j += 1
        out.append(_title_word(text[i:j], rules))
        i = j
    return "".join(out)
