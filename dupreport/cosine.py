"""Cosine similarity between bug reports over tf-based term weight vectors."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import Protocol

from .idf import IDFCollection, IDFCollectionType
from .reports import AbstractBugReport
from .terms import Term


class _IDFSource(Protocol):
    """Anything that hands out the IDF collection of a given type."""

    def idf_collection(self, collection_type: IDFCollectionType) -> IDFCollection:
        ...


def _accumulate(tfs: Counter[int], terms: Iterable[Term], term_weight: int) -> None:
    for term in terms:
        tfs[term.tid] += term_weight * term.term_frequency


def _normalized_weights(
    tfs: Mapping[int, int],
    idf: IDFCollection,
    weigh: Callable[[int, float], float],
) -> dict[int, float]:
    """Weigh every term and scale the vector to unit length.

    A vector whose length is zero is returned unscaled.
    """
    weights = {tid: weigh(tf, idf.get_idf(tid)) for tid, tf in tfs.items()}
    length = math.sqrt(sum(w * w for w in weights.values()))
    if length == 0:
        return weights
    return {tid: w / length for tid, w in weights.items()}


def _dot(query: Mapping[int, float], doc: Mapping[int, float]) -> float:
    return sum(weight * doc[tid] for tid, weight in query.items() if tid in doc)


class PlainSimilarityMeasure(ABC):
    """A textual similarity between a query report and a candidate report."""

    @abstractmethod
    def compute_similarity(
        self,
        query_report: AbstractBugReport,
        doc_report: AbstractBugReport,
        buckets: _IDFSource,
    ) -> float:
        """The similarity of ``doc_report`` to ``query_report``."""


class CosineSimilarityMeasure(PlainSimilarityMeasure):
    """Cosine similarity over summary and description unigrams together.

    Summary term frequencies are multiplied by ``summary_weight``. Weights use
    the combined (``IDF_BOTH``) collection and are cached per report id.
    """

    def __init__(self, summary_weight: int) -> None:
        self.summary_weight = summary_weight
        self._cache: dict[int, dict[int, float]] = {}

    @abstractmethod
    def weigh_term(self, tf: int, idf: float) -> float:
        """The weight of a term with the given frequency and idf."""

    def _compute_weights(
        self, report: AbstractBugReport, buckets: _IDFSource
    ) -> dict[int, float]:
        tfs: Counter[int] = Counter()
        _accumulate(tfs, report.summary_unigrams.terms, self.summary_weight)
        _accumulate(tfs, report.description_unigrams.terms, 1)
        idf = buckets.idf_collection(IDFCollectionType.IDF_BOTH)
        return _normalized_weights(tfs, idf, self.weigh_term)

    def _weights(self, report: AbstractBugReport, buckets: _IDFSource) -> dict[int, float]:
        weights = self._cache.get(report.id)
        if weights is None:
            weights = self._compute_weights(report, buckets)
            self._cache[report.id] = weights
        return weights

    def term_weights(
        self, report: AbstractBugReport, buckets: _IDFSource
    ) -> Mapping[int, float]:
        """The unit-length weight vector of a report, computed once per id."""
        return MappingProxyType(self._weights(report, buckets))

    def compute_similarity(
        self,
        query_report: AbstractBugReport,
        doc_report: AbstractBugReport,
        buckets: _IDFSource,
    ) -> float:
        doc = self._weights(doc_report, buckets)
        query = self._weights(query_report, buckets)
        return _dot(query, doc)


class ICSE07SimilarityMeasure(CosineSimilarityMeasure):
    """Weights a term by ``1 + log2(tf)``."""

    def weigh_term(self, tf: int, idf: float) -> float:
        return 1 + math.log2(tf)


class DSN08SimilarityMeasure(CosineSimilarityMeasure):
    """Weights a term by ``3 + 2 * log2(tf)``."""

    def weigh_term(self, tf: int, idf: float) -> float:
        return 3 + 2 * math.log2(tf)


class ICSE08SimilarityMeasure(CosineSimilarityMeasure):
    """Weights a term by ``tf * idf``."""

    def weigh_term(self, tf: int, idf: float) -> float:
        return tf * idf