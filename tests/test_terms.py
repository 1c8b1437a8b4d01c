import dataclasses

import pytest

from dupreport.terms import PreciseTerm, StructuredTerm, Term


def test_term_holds_values():
    term = Term(7, 3)
    assert term.tid == 7
    assert term.term_frequency == 3


def test_term_equality():
    assert Term(1, 2) == Term(1, 2)
    assert Term(1, 2) != Term(1, 3)


def test_term_is_immutable():
    term = Term(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        term.tid = 5
    assert term.tid == 1
    assert term == Term(1, 2)


def test_precise_term_keeps_fraction():
    term = PreciseTerm(4, 0.25)
    assert term.tid == 4
    assert term.term_frequency == 0.25


def test_structured_term_fields():
    term = StructuredTerm(9, 2, 5)
    assert (term.tid, term.summary_tf, term.description_tf) == (9, 2, 5)


def test_terms_are_hashable():
    assert len({Term(1, 1), Term(1, 1), Term(2, 1)}) == 2