"""Locale identifiers and rule tables.

Supported locales form a closed set, one YAML table per language:

- root: Unicode default case mapping and codepoint-based collation
- en: English (root rules)
- tr, az: Turkish and Azerbaijani dotted/dotless i, alphabet order
- sv: Swedish (å, ä, ö after z)
- es: Spanish (ñ after n)
- cs: Czech (háček letters, "ch" after h)
- haw: Hawaiian (vowels before consonants)
- nl: Dutch ("ij" title-cased as a unit)
- el: Greek (accents dropped when upper-casing)
- ja: Japanese (no title casing)
"""

from loctext.locales.identifiers import ROOT, Locale, parse_locale
from loctext.locales.models import RuleSet
from loctext.locales.registry import (
    available_locales,
    clear_rule_cache,
    get_rules,
    resolve_locale,
)

__all__ = [
    "ROOT",
    "Locale",
    "RuleSet",
    "available_locales",
    "clear_rule_cache",
    "get_rules",
    "parse_locale",
    "resolve_locale",
]
