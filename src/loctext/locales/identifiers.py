"""Locale identifier parsing.

Accepts BCP 47 style tags ("tr-TR", "sr-Latn-RS") as well as POSIX locale
names ("tr_TR.UTF-8", "de_DE@euro"). Only the language subtag selects a rule
table; script and region are kept on the parsed value for reporting.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from loctext.exceptions import UnknownLocaleError

ROOT_LANGUAGE = "root"

# Identifiers that select the root rule set
ROOT_ALIASES: frozenset[str] = frozenset({"", "root", "und", "c", "posix"})

_LANGUAGE_RE = re.compile(r"^[a-z]{2,3}$")
_SCRIPT_RE = re.compile(r"^[a-z]{4}$")
_REGION_RE = re.compile(r"^(?:[a-z]{2}|[0-9]{3})$")


@dataclass(frozen=True)
class Locale:
    """A parsed locale identifier.

    Attributes:
        language: Lowercase ISO 639 language code, or "root".
        script: Titlecase ISO 15924 script code, if given.
        region: Uppercase ISO 3166 region or UN M.49 area code, if given.
    """

    language: str
    script: str | None = None
    region: str | None = None

    @property
    def tag(self) -> str:
        """Canonical BCP 47 style tag, e.g. "tr-TR"."""
        parts = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        return "-".join(parts)

    @property
    def is_root(self) -> bool:
        return self.language == ROOT_LANGUAGE

    def __str__(self) -> str:
        return self.tag


ROOT = Locale(ROOT_LANGUAGE)


def parse_locale(identifier: str | Locale | None) -> Locale:
    """Parse a locale identifier without checking that a rule table exists.

    Args:
        identifier: Tag string, an existing Locale, or None for root.

    Returns:
        Parsed Locale.

    Raises:
        UnknownLocaleError: If the identifier is not syntactically valid.

    Example:
        >>> parse_locale("tr_TR.UTF-8").tag
        'tr-TR'
    """
    if identifier is None:
        return ROOT
    if isinstance(identifier, Locale):
        return identifier
    if not isinstance(identifier, str):
        raise UnknownLocaleError(identifier, "identifier must be a string")

    # Drop POSIX encoding and modifier suffixes: "tr_TR.UTF-8@euro"
    raw = identifier.strip().split(".", 1)[0].split("@", 1)[0]
    normalized = raw.replace("_", "-").casefold()
    if normalized in ROOT_ALIASES:
        return ROOT

    subtags = normalized.split("-")
    language = subtags.pop(0)
    if not _LANGUAGE_RE.match(language):
        raise UnknownLocaleError(identifier, "invalid language subtag")

    script = None
    region = None
    if subtags and _SCRIPT_RE.match(subtags[0]):
        script = subtags.pop(0).title()
    if subtags and _REGION_RE.match(subtags[0]):
        region = subtags.pop(0).upper()
    if subtags:
        raise UnknownLocaleError(
            identifier, f"unexpected subtag '{subtags[0]}'"
        )

    return Locale(language=language, script=script, region=region)
