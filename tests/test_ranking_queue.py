import pytest

from dupreport.ranking_queue import MasterReportPriorityQueue
from dupreport.reports import MasterBugReport


def _master(report_id, similarity):
    master = MasterBugReport(report_id)
    master.similarity_info.set_similarity(similarity, report_id)
    return master


def test_drain_sorted_descending():
    queue = MasterReportPriorityQueue()
    for report_id, sim in [(1, 0.2), (2, 0.9), (3, 0.5), (4, 0.1)]:
        queue.add(_master(report_id, sim))
    assert len(queue) == 4

    ranked = queue.drain_sorted()
    assert [m.id for m in ranked] == [2, 3, 1, 4]
    sims = [m.similarity_info.similarity for m in ranked]
    assert sims == sorted(sims, reverse=True)


def test_drain_empties_queue():
    queue = MasterReportPriorityQueue()
    queue.add(_master(1, 0.3))
    queue.drain_sorted()
    assert len(queue) == 0
    assert queue.drain_sorted() == []


def test_ties_keep_insertion_order():
    queue = MasterReportPriorityQueue()
    for report_id in (5, 6, 7):
        queue.add(_master(report_id, 0.4))
    assert [m.id for m in queue.drain_sorted()] == [5, 6, 7]


def test_same_objects_returned():
    queue = MasterReportPriorityQueue()
    masters = [_master(i, i / 10) for i in range(1, 4)]
    for master in masters:
        queue.add(master)
    ranked = queue.drain_sorted()
    assert {id(m) for m in ranked} == {id(m) for m in masters}


def test_add_none_rejected():
    with pytest.raises(ValueError):
        MasterReportPriorityQueue().add(None)