"""Unicode normalization.

Canonicalizes text so that precomposed characters (a single "á" codepoint)
and decomposed sequences ("a" followed by U+0301) produce one representative
sequence. Normalization concerns codepoint equivalence only and takes no
locale.

The codepoint tables come from the interpreter's ``unicodedata`` module; see
:func:`unicode_version` for the Unicode version in use.
"""

from __future__ import annotations

import unicodedata
from enum import Enum

from loctext.text import validate_text


class NormalizationForm(Enum):
    """Unicode normalization forms."""

    NFC = "NFC"  # Canonical composition (default)
    NFD = "NFD"  # Canonical decomposition
    NFKC = "NFKC"  # Compatibility composition
    NFKD = "NFKD"  # Compatibility decomposition


DEFAULT_FORM = NormalizationForm.NFC


def _coerce_form(form: NormalizationForm | str) -> NormalizationForm:
    if isinstance(form, NormalizationForm):
        return form
    try:
        return NormalizationForm(str(form).upper())
    except ValueError:
        valid = ", ".join(f.value for f in NormalizationForm)
        raise ValueError(
            f"Unknown normalization form '{form}'. Valid forms: {valid}"
        ) from None


def normalize(text: str, form: NormalizationForm | str = DEFAULT_FORM) -> str:
    """Return the normalized form of ``text``.

    Idempotent: ``normalize(normalize(x)) == normalize(x)``.

    Args:
        text: Text to normalize.
        form: Normalization form, NFC by default.

    Returns:
        Normalized text (a new string, or the input when already normal).

    Raises:
        MalformedTextError: If text is not a well-formed text value.
        ValueError: If form is not a known normalization form.

    Example:
        >>> normalize("cafe\\u0301") == "caf\\u00e9"
        True
    """
    validate_text(text)
    return unicodedata.normalize(_coerce_form(form).value, text)


def is_normalized(text: str, form: NormalizationForm | str = DEFAULT_FORM) -> bool:
    """Check whether ``text`` is already in the given normalization form."""
    validate_text(text)
    return unicodedata.is_normalized(_coerce_form(form).value, text)


def strip_marks(text: str) -> str:
    """Remove combining marks, returning NFC text.

    "Crème brûlée" becomes "Creme brulee". Locale tailorings are not
    consulted, so letters that some alphabets treat as distinct (Swedish
    "å") are reduced to their base letter too.
    """
    decomposed = normalize(text, NormalizationForm.NFD)
    filtered = "".join(
        ch for ch in decomposed if not unicodedata.category(ch).startswith("M")
    )
    return unicodedata.normalize("NFC", filtered)


def unicode_version() -> str:
    """Return the Unicode database version backing normalization."""
    return unicodedata.unidata_version
