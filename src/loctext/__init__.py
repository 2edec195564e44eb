"""loctext - locale-aware text normalization, case mapping and collation."""

from loctext.casemap import fold_case, to_lower, to_title, to_upper
from loctext.collator import (
    CollationOptions,
    Collator,
    MatchSpan,
    Ordering,
    compare,
    contains,
    contains_fixed,
    equals,
    equals_fixed,
    find,
    find_all,
    find_all_fixed,
    find_fixed,
    sort_key,
)
from loctext.exceptions import (
    LocTextError,
    MalformedTextError,
    RuleTableError,
    UnknownLocaleError,
    UnsupportedOperationError,
)
from loctext.locales import ROOT, Locale, available_locales, resolve_locale
from loctext.normalizer import NormalizationForm, is_normalized, normalize
from loctext.sorter import sort, sorted_unique
from loctext.text import decode_text, grapheme_length, text_length, validate_text

__version__ = "0.1.0"

__all__ = [
    # Text values
    "decode_text",
    "grapheme_length",
    "text_length",
    "validate_text",
    # Normalizer
    "NormalizationForm",
    "is_normalized",
    "normalize",
    # Case mapper
    "fold_case",
    "to_lower",
    "to_title",
    "to_upper",
    # Collator
    "CollationOptions",
    "Collator",
    "MatchSpan",
    "Ordering",
    "compare",
    "contains",
    "contains_fixed",
    "equals",
    "equals_fixed",
    "find",
    "find_all",
    "find_all_fixed",
    "find_fixed",
    "sort_key",
    # Sorter
    "sort",
    "sorted_unique",
    # Locales
    "ROOT",
    "Locale",
    "available_locales",
    "resolve_locale",
    # Errors
    "LocTextError",
    "MalformedTextError",
    "RuleTableError",
    "UnknownLocaleError",
    "UnsupportedOperationError",
]
