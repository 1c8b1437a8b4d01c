"""Sections of a bug report and the structured summary/description view."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum

from .terms import StructuredTerm, Term


class SectionType(IntEnum):
    """The n-gram sections a report carries."""

    SUM_UNI = 0
    SUM_BI = 1
    SUM_TRI = 2
    DESC_UNI = 3
    DESC_BI = 4
    DESC_TRI = 5
    ALL_UNI = 6
    ALL_BI = 7
    ALL_TRI = 8


@dataclass(frozen=True)
class Section:
    """An immutable bag of terms; its length is the sum of the frequencies."""

    terms: tuple[Term, ...]
    length: int = field(init=False)

    def __post_init__(self) -> None:
        terms = tuple(self.terms)
        object.__setattr__(self, "terms", terms)
        object.__setattr__(self, "length", sum(t.term_frequency for t in terms))


def merge_terms(
    summary_terms: Iterable[Term], description_terms: Iterable[Term]
) -> list[StructuredTerm]:
    """Merge two term lists sorted by id into structured terms, in id order."""
    merged: list[StructuredTerm] = []
    summary_iter = iter(summary_terms)
    desc_iter = iter(description_terms)
    summary = next(summary_iter, None)
    desc = next(desc_iter, None)

    while summary is not None and desc is not None:
        if summary.tid > desc.tid:
            merged.append(StructuredTerm(desc.tid, 0, desc.term_frequency))
            desc = next(desc_iter, None)
        elif summary.tid < desc.tid:
            merged.append(StructuredTerm(summary.tid, summary.term_frequency, 0))
            summary = next(summary_iter, None)
        else:
            merged.append(
                StructuredTerm(summary.tid, summary.term_frequency, desc.term_frequency)
            )
            summary = next(summary_iter, None)
            desc = next(desc_iter, None)

    while summary is not None:
        merged.append(StructuredTerm(summary.tid, summary.term_frequency, 0))
        summary = next(summary_iter, None)
    while desc is not None:
        merged.append(StructuredTerm(desc.tid, 0, desc.term_frequency))
        desc = next(desc_iter, None)
    return merged


class StructuredSection:
    """Summary and description terms merged per term id, with both lengths."""

    __slots__ = ("_terms", "_summary_length", "_description_length")

    def __init__(self, summary_section: Section, description_section: Section) -> None:
        self._terms: tuple[StructuredTerm, ...] = tuple(
            merge_terms(summary_section.terms, description_section.terms)
        )
        self._summary_length = summary_section.length
        self._description_length = description_section.length

    @property
    def terms(self) -> Sequence[StructuredTerm]:
        return self._terms

    @property
    def summary_length(self) -> int:
        return self._summary_length

    @property
    def description_length(self) -> int:
        return self._description_length

    def __repr__(self) -> str:
        return (
            f"StructuredSection(terms={list(self._terms)!r}, "
            f"summary_length={self._summary_length}, "
            f"description_length={self._description_length})"
        )