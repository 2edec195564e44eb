"""Locale rule table registry.

Rule tables ship as YAML files in ``loctext/locales/data``. Each table is
loaded, validated and compiled at most once per process, on first use of its
language. The cache is guarded by a lock with a double-checked fast path, so
concurrent first use of a locale yields exactly one RuleSet instance.
"""

from __future__ import annotations

import logging
import threading
from functools import lru_cache
from importlib import resources

import yaml
from pydantic import ValidationError

from loctext.exceptions import RuleTableError, UnknownLocaleError
from loctext.locales.identifiers import ROOT, Locale, parse_locale
from loctext.locales.models import LocaleTableModel, RuleSet, compile_table

logger = logging.getLogger(__name__)

_DATA_PACKAGE = "loctext.locales"
_DATA_DIR = "data"

# Compiled rule sets keyed by language code
_rules_cache: dict[str, RuleSet] = {}
_rules_cache_lock = threading.Lock()


@lru_cache(maxsize=1)
def available_languages() -> frozenset[str]:
    """Return the language codes that have a shipped rule table."""
    data_dir = resources.files(_DATA_PACKAGE).joinpath(_DATA_DIR)
    return frozenset(
        entry.name[: -len(".yaml")]
        for entry in data_dir.iterdir()
        if entry.name.endswith(".yaml")
    )


def available_locales() -> list[str]:
    """Return supported locale identifiers, root first then alphabetical."""
    languages = available_languages()
    others = sorted(lang for lang in languages if lang != ROOT.language)
    return [ROOT.language, *others] if ROOT.language in languages else others


def resolve_locale(identifier: str | Locale | None) -> Locale:
    """Parse an identifier and confirm a rule table exists for it.

    Args:
        identifier: Locale tag, Locale, or None for root.

    Returns:
        The parsed Locale.

    Raises:
        UnknownLocaleError: If the identifier is malformed or its language
            has no rule table. The root locale is never substituted.
    """
    locale = parse_locale(identifier)
    if locale.language not in available_languages():
        raise UnknownLocaleError(identifier, "no rule table for this language")
    return locale


def _load_table(language: str) -> RuleSet:
    """Read, validate and compile the YAML table for one language."""
    resource = resources.files(_DATA_PACKAGE).joinpath(_DATA_DIR, f"{language}.yaml")
    try:
        raw = yaml.safe_load(resource.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise RuleTableError(
            f"Failed to read rule table for '{language}': {e}", language=language
        ) from e

    if not isinstance(raw, dict):
        raise RuleTableError(
            f"Rule table for '{language}' must be a mapping", language=language
        )

    try:
        table = LocaleTableModel.model_validate(raw)
        if table.language != language:
            raise RuleTableError(
                f"Rule table file '{language}.yaml' declares language "
                f"'{table.language}'",
                language=language,
            )
        rules = compile_table(table)
    except (ValidationError, ValueError) as e:
        raise RuleTableError(
            f"Invalid rule table for '{language}': {e}", language=language
        ) from e

    logger.debug(
        "Loaded rule table %s (%s): %d tailored elements",
        language,
        rules.name,
        rules.tailored_count,
    )
    return rules


def get_rules(locale: str | Locale | None = None) -> RuleSet:
    """Return the compiled rule set for a locale.

    Thread-safe: the first caller for a language loads the table while
    holding the lock; every other caller receives the same instance.

    Args:
        locale: Locale tag, Locale, or None for root.

    Returns:
        Shared, immutable RuleSet.

    Raises:
        UnknownLocaleError: If the locale has no rule table.
        RuleTableError: If the shipped table is invalid.
    """
    language = resolve_locale(locale).language

    # Fast path: dict reads are atomic in CPython
    rules = _rules_cache.get(language)
    if rules is not None:
        return rules

    with _rules_cache_lock:
        # Double-check after acquiring lock (another thread may have loaded it)
        rules = _rules_cache.get(language)
        if rules is None:
            rules = _load_table(language)
            _rules_cache[language] = rules
        return rules


def clear_rule_cache() -> None:
    """Drop all compiled rule sets. Primarily useful for testing."""
    with _rules_cache_lock:
        _rules_cache.clear()
    available_languages.cache_clear()
