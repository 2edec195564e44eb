"""Rule table models.

Rule tables are YAML documents validated with the Pydantic models below, then
compiled into a :class:`RuleSet`: a frozen, read-only structure that every
case mapping and collation call shares.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Primary weight of a collation element. Untailored letters weigh (codepoint,);
# tailored elements extend their anchor's weight, so (ord("z"), 1) sorts
# right after "z" and before any higher codepoint.
Weight = tuple[int, ...]


def _check_nfc(value: str, what: str) -> str:
    if not value:
        raise ValueError(f"{what} must not be empty")
    if unicodedata.normalize("NFC", value) != value:
        raise ValueError(f"{what} {value!r} must be NFC-normalized")
    return value


class CaseRulesModel(BaseModel):
    """Pydantic model for locale case-mapping exceptions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    upper: dict[str, str] = Field(default_factory=dict)
    lower: dict[str, str] = Field(default_factory=dict)
    title: dict[str, str] = Field(default_factory=dict)
    fold: dict[str, str] = Field(default_factory=dict)
    title_digraphs: list[str] = Field(default_factory=list)
    upper_strip_marks: list[str] = Field(default_factory=list)
    title_supported: bool = True

    @field_validator("upper", "lower", "title", "fold")
    @classmethod
    def validate_mapping_keys(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject empty source sequences."""
        for source in v:
            if not source:
                raise ValueError("case mapping sources must not be empty")
        return v

    @field_validator("upper_strip_marks")
    @classmethod
    def validate_marks(cls, v: list[str]) -> list[str]:
        """Each entry must be a single combining mark."""
        for mark in v:
            if len(mark) != 1 or not unicodedata.category(mark).startswith("M"):
                raise ValueError(f"{mark!r} is not a single combining mark")
        return v


class TailoringModel(BaseModel):
    """Pydantic model for one collation tailoring.

    Places ``sequence`` immediately after ``after`` in primary order, in the
    listed order. Elements may be multi-character contractions ("ch").
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    after: str
    sequence: list[str] = Field(min_length=1)

    @field_validator("after")
    @classmethod
    def validate_after(cls, v: str) -> str:
        return _check_nfc(v, "tailoring anchor")

    @field_validator("sequence")
    @classmethod
    def validate_sequence(cls, v: list[str]) -> list[str]:
        for element in v:
            _check_nfc(element, "tailored element")
        if len(set(v)) != len(v):
            raise ValueError("tailored elements must be unique")
        return v


class CollationRulesModel(BaseModel):
    """Pydantic model for locale collation rules."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tailorings: list[TailoringModel] = Field(default_factory=list)


class LocaleTableModel(BaseModel):
    """Pydantic model for a complete locale rule table file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    language: str
    name: str
    case: CaseRulesModel = Field(default_factory=CaseRulesModel)
    collation: CollationRulesModel = Field(default_factory=CollationRulesModel)


@dataclass(frozen=True)
class RuleSet:
    """Compiled, immutable rules for one language.

    Mapping fields are read-only views; a RuleSet can be shared freely
    between threads.
    """

    language: str
    name: str
    upper_map: Mapping[str, str]
    lower_map: Mapping[str, str]
    title_map: Mapping[str, str]
    fold_map: Mapping[str, str]
    title_digraphs: tuple[str, ...]
    upper_strip_marks: frozenset[str]
    title_supported: bool
    weights: Mapping[str, Weight]
    max_element_length: int

    @property
    def tailored_count(self) -> int:
        return len(self.weights)


def _freeze(mapping: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


def compile_table(table: LocaleTableModel) -> RuleSet:
    """Compile a validated table into a RuleSet.

    Tailorings are applied in file order, so a later tailoring may anchor on
    an element placed by an earlier one.

    Raises:
        ValueError: If an anchor is neither a single codepoint nor a
            previously tailored element.
    """
    weights: dict[str, Weight] = {}
    for tailoring in table.collation.tailorings:
        anchor = tailoring.after
        if anchor in weights:
            base = weights[anchor]
        elif len(anchor) == 1:
            base = (ord(anchor),)
        else:
            raise ValueError(
                f"tailoring anchor {anchor!r} is not a single codepoint "
                "or a previously tailored element"
            )
        for rank, element in enumerate(tailoring.sequence, start=1):
            weights[element] = base + (rank,)

    case = table.case
    return RuleSet(
        language=table.language,
        name=table.name,
        upper_map=_freeze(case.upper),
        lower_map=_freeze(case.lower),
        title_map=_freeze(case.title),
        fold_map=_freeze(case.fold),
        title_digraphs=tuple(d.casefold() for d in case.title_digraphs),
        upper_strip_marks=frozenset(case.upper_strip_marks),
        title_supported=case.title_supported,
        weights=MappingProxyType(weights),
        max_element_length=max((len(e) for e in weights), default=0),
    )
