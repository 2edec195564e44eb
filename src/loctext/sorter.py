"""Locale-consistent sorting."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from loctext.collator import build_key, comparable_form
from loctext.locales import Locale, get_rules
from loctext.text import validate_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _identity(item):  # noqa: ANN001, ANN202
    return item


def sort(
    texts: Iterable[T],
    locale: str | Locale | None = None,
    *,
    ignore_case: bool = False,
    key: Callable[[T], str] | None = None,
    reverse: bool = False,
) -> list[T]:
    """Sort texts in the collation order of a locale.

    The order agrees with :func:`loctext.collator.compare` under the same
    locale and ``ignore_case``. The sort is stable: items that compare
    equal keep their input order, also when ``reverse`` is set. The empty
    string sorts before every non-empty text.

    Args:
        texts: Texts, or records holding texts when ``key`` is given.
        locale: Locale identifier; None selects root.
        ignore_case: Treat case variants as equal.
        key: Extracts the text to sort by from each item.
        reverse: Sort in descending order.

    Returns:
        A new list.

    Raises:
        MalformedTextError: If any extracted text is not well-formed.
        UnknownLocaleError: If the locale has no rule table.

    Example:
        >>> sort(["öl", "zebra", "apple"], "sv")
        ['apple', 'zebra', 'öl']
        >>> sort(["öl", "zebra", "apple"])
        ['apple', 'öl', 'zebra']
    """
    rules = get_rules(locale)
    extract = key or _identity
    items = list(texts)
    logger.debug(
        "Sorting %d values (locale=%s, ignore_case=%s)",
        len(items),
        rules.language,
        ignore_case,
    )

    # Keys are computed once per item; an invalid item fails before any
    # ordering is produced.
    keyed = [
        (build_key(validate_text(extract(item)), rules, ignore_case), item)
        for item in items
    ]
    keyed.sort(key=lambda entry: entry[0], reverse=reverse)
    return [item for _, item in keyed]


def sorted_unique(
    texts: Iterable[T],
    locale: str | Locale | None = None,
    *,
    ignore_case: bool = False,
    key: Callable[[T], str] | None = None,
) -> list[T]:
    """Sort and drop items that collate equal to an earlier one.

    The first occurrence (in input order) of each equivalence class is kept,
    so "e\\u0301" and "\\u00e9" collapse to whichever appeared first.
    """
    rules = get_rules(locale)
    extract = key or _identity
    result: list[T] = []
    previous: str | None = None
    for item in sort(texts, locale, ignore_case=ignore_case, key=key):
        comparable = comparable_form(extract(item), rules, ignore_case)
        if comparable != previous:
            result.append(item)
            previous = comparable
    return result
