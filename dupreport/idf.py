"""Inverse document frequencies over a growing collection of reports."""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import IntEnum

from .terms import Term


class IDFCollectionType(IntEnum):
    """Which sections an IDF collection was built from."""

    IDF_SUMM = 0
    IDF_DESC = 1
    IDF_BOTH = 2


class _FrequencyInfo:
    """Document count of one term with a cached idf."""

    __slots__ = ("idf", "doc_count", "version")

    def __init__(self) -> None:
        self.idf = 0.0
        self.doc_count = 0
        self.version = 0

    def get_idf(self, latest_version: int) -> float:
        if self.doc_count == 0:
            return 0.0
        if self.version < latest_version:
            self.version = latest_version
            self.idf = math.log2(latest_version / self.doc_count)
        return self.idf


class IDFCollection:
    """Counts, per term id, how many reports contain the term."""

    def __init__(self, max_id: int) -> None:
        if max_id < 0:
            raise ValueError(f"max_id must not be negative: {max_id}")
        self._frequencies = [_FrequencyInfo() for _ in range(max_id + 1)]
        self._number_of_documents = 0

    def _info(self, term_id: int) -> _FrequencyInfo:
        if not 0 <= term_id < len(self._frequencies):
            raise IndexError(f"term id {term_id} out of range")
        return self._frequencies[term_id]

    def add_one_report(self, unigrams: Iterable[Term], bigrams: Iterable[Term]) -> None:
        """Record one report; each listed term counts once per occurrence in the lists."""
        for term in unigrams:
            self._info(term.tid).doc_count += 1
        for term in bigrams:
            self._info(term.tid).doc_count += 1
        self._number_of_documents += 1

    def get_idf(self, term_id: int) -> float:
        """The log2 idf of a term, or 0 when no report contains it."""
        return self._info(term_id).get_idf(self._number_of_documents)

    def number_of_documents(self) -> int:
        return self._number_of_documents