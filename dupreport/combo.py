"""Cosine similarity computed separately on summary and description, then combined."""

from __future__ import annotations

import math
from abc import abstractmethod
from collections import Counter
from collections.abc import Iterable

from .cosine import (
    PlainSimilarityMeasure,
    _accumulate,
    _dot,
    _IDFSource,
    _normalized_weights,
)
from .idf import IDFCollectionType
from .reports import AbstractBugReport
from .terms import Term


class ComboCosineSimilarityMeasure(PlainSimilarityMeasure):
    """``summary_weight * summary cosine + description cosine``.

    Summary vectors use the ``IDF_SUMM`` collection and description vectors the
    ``IDF_DESC`` collection; both are cached per report id.
    """

    def __init__(self, summary_weight: int) -> None:
        self.summary_weight = summary_weight
        self._summary_cache: dict[int, dict[int, float]] = {}
        self._description_cache: dict[int, dict[int, float]] = {}

    @abstractmethod
    def weigh_term(self, tf: int, idf: float) -> float:
        """The weight of a term with the given frequency and idf."""

    def _vector(
        self,
        cache: dict[int, dict[int, float]],
        report: AbstractBugReport,
        terms: Iterable[Term],
        collection_type: IDFCollectionType,
        buckets: _IDFSource,
    ) -> dict[int, float]:
        weights = cache.get(report.id)
        if weights is None:
            tfs: Counter[int] = Counter()
            _accumulate(tfs, terms, 1)
            idf = buckets.idf_collection(collection_type)
            weights = _normalized_weights(tfs, idf, self.weigh_term)
            cache[report.id] = weights
        return weights

    def _summary_vector(
        self, report: AbstractBugReport, buckets: _IDFSource
    ) -> dict[int, float]:
        return self._vector(
            self._summary_cache,
            report,
            report.summary_unigrams.terms,
            IDFCollectionType.IDF_SUMM,
            buckets,
        )

    def _description_vector(
        self, report: AbstractBugReport, buckets: _IDFSource
    ) -> dict[int, float]:
        return self._vector(
            self._description_cache,
            report,
            report.description_unigrams.terms,
            IDFCollectionType.IDF_DESC,
            buckets,
        )

    def summary_similarity(
        self,
        query_report: AbstractBugReport,
        doc_report: AbstractBugReport,
        buckets: _IDFSource,
    ) -> float:
        """Cosine similarity of the summary unigrams."""
        doc = self._summary_vector(doc_report, buckets)
        query = self._summary_vector(query_report, buckets)
        return _dot(query, doc)

    def description_similarity(
        self,
        query_report: AbstractBugReport,
        doc_report: AbstractBugReport,
        buckets: _IDFSource,
    ) -> float:
        """Cosine similarity of the description unigrams."""
        doc = self._description_vector(doc_report, buckets)
        query = self._description_vector(query_report, buckets)
        return _dot(query, doc)

    def compute_similarity(
        self,
        query_report: AbstractBugReport,
        doc_report: AbstractBugReport,
        buckets: _IDFSource,
    ) -> float:
        summary = self.summary_similarity(query_report, doc_report, buckets)
        description = self.description_similarity(query_report, doc_report, buckets)
        return self.summary_weight * summary + description


class ComboICSE07SimilarityMeasure(ComboCosineSimilarityMeasure):
    """Weights a term by ``1 + log2(tf)``."""

    def weigh_term(self, tf: int, idf: float) -> float:
        return 1 + math.log2(tf)


class ComboDSN08SimilarityMeasure(ComboCosineSimilarityMeasure):
    """Weights a term by ``3 + 2 * log2(tf)``."""

    def weigh_term(self, tf: int, idf: float) -> float:
        return 3 + 2 * math.log2(tf)


class ComboICSE08SimilarityMeasure(ComboCosineSimilarityMeasure):
    """Weights a term by ``tf * idf``."""

    def weigh_term(self, tf: int, idf: float) -> float:
        return tf * idf