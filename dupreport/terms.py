"""Term records: a term id paired with its frequency in a section."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """A term id with an integer frequency."""

    tid: int
    term_frequency: int


@dataclass(frozen=True)
class PreciseTerm:
    """A term id with a fractional frequency."""

    tid: int
    term_frequency: float


@dataclass(frozen=True)
class StructuredTerm:
    """A term id with its frequency in the summary and in the description."""

    tid: int
    summary_tf: int
    description_tf: int