import pytest

from dupreport.combo import (
    ComboDSN08SimilarityMeasure,
    ComboICSE07SimilarityMeasure,
    ComboICSE08SimilarityMeasure,
)
from dupreport.cosine import (
    DSN08SimilarityMeasure,
    ICSE07SimilarityMeasure,
    ICSE08SimilarityMeasure,
)
from dupreport.idf import IDFCollection, IDFCollectionType
from dupreport.reports import MasterBugReport
from dupreport.terms import Term


class FakeBuckets:
    def __init__(self, collections):
        self._collections = collections

    def idf_collection(self, collection_type):
        return self._collections[collection_type]


def populated(max_id=10):
    idf = IDFCollection(max_id)
    for tid in range(1, 6):
        idf.add_one_report([Term(tid, 1)], [])
    return idf


def make_buckets(summary=None, description=None):
    return FakeBuckets(
        {
            IDFCollectionType.IDF_SUMM: summary or populated(),
            IDFCollectionType.IDF_DESC: description or populated(),
        }
    )


def report(rid, summary=(), description=()):
    return MasterBugReport(
        rid,
        summary_unigrams=[Term(t, f) for t, f in summary],
        description_unigrams=[Term(t, f) for t, f in description],
    )


ALL_MEASURES = [
    ComboICSE07SimilarityMeasure,
    ComboDSN08SimilarityMeasure,
    ComboICSE08SimilarityMeasure,
]


@pytest.mark.parametrize(
    "combo_cls, plain_cls",
    [
        (ComboICSE07SimilarityMeasure, ICSE07SimilarityMeasure),
        (ComboDSN08SimilarityMeasure, DSN08SimilarityMeasure),
        (ComboICSE08SimilarityMeasure, ICSE08SimilarityMeasure),
    ],
)
@pytest.mark.parametrize("tf, idf", [(1, 0.0), (2, 1.5), (7, 0.25)])
def test_weigh_term_matches_plain_measure(combo_cls, plain_cls, tf, idf):
    assert combo_cls(1).weigh_term(tf, idf) == pytest.approx(
        plain_cls(1).weigh_term(tf, idf)
    )


@pytest.mark.parametrize("cls", ALL_MEASURES)
def test_identical_reports(cls):
    buckets = make_buckets()
    a = report(1, summary=[(1, 2), (2, 1)], description=[(3, 1), (4, 2)])
    b = report(2, summary=[(1, 2), (2, 1)], description=[(3, 1), (4, 2)])
    measure = cls(2)
    assert measure.summary_similarity(a, b, buckets) == pytest.approx(1)
    assert measure.description_similarity(a, b, buckets) == pytest.approx(1)
    assert measure.compute_similarity(a, b, buckets) == pytest.approx(3.0)


@pytest.mark.parametrize("cls", ALL_MEASURES)
def test_only_description_matches(cls):
    buckets = make_buckets()
    a = report(1, summary=[(1, 1)], description=[(3, 2)])
    b = report(2, summary=[(2, 1)], description=[(3, 2)])
    measure = cls(2)
    assert measure.summary_similarity(a, b, buckets) == 0
    assert measure.compute_similarity(a, b, buckets) == pytest.approx(
        measure.description_similarity(a, b, buckets)
    )


@pytest.mark.parametrize("cls", ALL_MEASURES)
def test_combination_is_weighted_sum(cls):
    buckets = make_buckets()
    a = report(1, summary=[(1, 2), (2, 1)], description=[(3, 1)])
    b = report(2, summary=[(2, 3), (1, 1)], description=[(3, 2), (4, 1)])
    measure = cls(2)
    summary = measure.summary_similarity(a, b, buckets)
    description = measure.description_similarity(a, b, buckets)
    assert 0 < summary < 1
    assert 0 < description <= 1
    assert measure.compute_similarity(a, b, buckets) == pytest.approx(
        2 * summary + description
    )


@pytest.mark.parametrize("cls", ALL_MEASURES)
def test_similarity_is_symmetric(cls):
    buckets = make_buckets()
    a = report(1, summary=[(1, 2)], description=[(3, 1), (5, 1)])
    b = report(2, summary=[(1, 1), (2, 1)], description=[(3, 2)])
    assert cls(1).compute_similarity(a, b, buckets) == pytest.approx(
        cls(1).compute_similarity(b, a, buckets)
    )


def test_summary_uses_summary_idf_collection():
    summary_idf = IDFCollection(10)
    summary_idf.add_one_report([Term(1, 1)], [])
    buckets = make_buckets(summary=summary_idf)
    a = report(1, summary=[(1, 1)], description=[(3, 1)])
    b = report(2, summary=[(1, 1)], description=[(3, 1)])
    measure = ComboICSE08SimilarityMeasure(2)
    assert measure.summary_similarity(a, b, buckets) == 0
    assert measure.description_similarity(a, b, buckets) == pytest.approx(1)


def test_combined_collection_is_not_consulted():
    buckets = make_buckets()
    a = report(1, summary=[(1, 1)], description=[(2, 1)])
    b = report(2, summary=[(1, 1)], description=[(2, 1)])
    measure = ComboICSE07SimilarityMeasure(1)
    assert measure.compute_similarity(a, b, buckets) == pytest.approx(2)


def test_missing_collection_raises():
    buckets = FakeBuckets({IDFCollectionType.IDF_SUMM: populated()})
    a = report(1, description=[(1, 1)])
    with pytest.raises(KeyError):
        ComboICSE07SimilarityMeasure(1).description_similarity(a, a, buckets)


def test_vectors_are_cached_per_report_id():
    buckets = make_buckets()
    measure = ComboICSE08SimilarityMeasure(1)
    a = report(1, summary=[(1, 1), (6, 1)])
    b = report(2, summary=[(6, 1)])
    before = measure.summary_similarity(a, b, buckets)
    buckets.idf_collection(IDFCollectionType.IDF_SUMM).add_one_report([Term(6, 1)], [])
    assert measure.summary_similarity(a, b, buckets) == pytest.approx(before)
    assert ComboICSE08SimilarityMeasure(1).summary_similarity(
        a, b, buckets
    ) != pytest.approx(before)


def test_empty_reports_score_zero():
    buckets = make_buckets()
    assert ComboDSN08SimilarityMeasure(2).compute_similarity(
        report(1), report(2, summary=[(1, 1)]), buckets
    ) == 0