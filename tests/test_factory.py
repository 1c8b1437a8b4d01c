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
from dupreport.factory import (
    SimilarityMeasureType,
    create_similarity_measure,
    parse_similarity_measure_type,
    similarity_measure_type_mapping,
    similarity_measure_type_name,
)

USABLE = [t for t in SimilarityMeasureType if t is not SimilarityMeasureType.NONE]


@pytest.mark.parametrize("measure_type", USABLE)
def test_parse_round_trips_codes(measure_type):
    assert parse_similarity_measure_type(int(measure_type)) is measure_type


@pytest.mark.parametrize("code", [0, 2, 4, 21, 9999])
def test_parse_rejects_unknown_codes(code):
    with pytest.raises(ValueError, match="unhandled"):
        parse_similarity_measure_type(code)


@pytest.mark.parametrize("measure_type", USABLE)
def test_name_matches_enum_name(measure_type):
    assert similarity_measure_type_name(measure_type) == measure_type.name


def test_name_of_none_is_an_error():
    with pytest.raises(ValueError):
        similarity_measure_type_name(SimilarityMeasureType.NONE)


def test_mapping_text():
    assert similarity_measure_type_mapping() == (
        "1:ICSE_07_W1_NO_BIGRAM, 3:ICSE_07_W2_NO_BIGRAM, "
        "5:DSN_08_W1_NO_BIGRAM, 8:DSN_08_W2_NO_BIGRAM, "
        "9: ICSE_08_W1_NO_BIGRAM, 10: ICSE_08_W2_NO_BIGRAM, "
        "11:COMBO_ICSE_07_W1_NO_BIGRAM, 13:COMBO_ICSE_07_W2_NO_BIGRAM, "
        "15:COMBO_DSN_08_W1_NO_BIGRAM, 18:COMBO_DSN_08_W2_NO_BIGRAM, "
        "19: COMBO_ICSE_08_W1_NO_BIGRAM, 20: COMBO_ICSE_08_W2_NO_BIGRAM, "
    )


def test_mapping_mentions_every_usable_type():
    text = similarity_measure_type_mapping()
    for measure_type in USABLE:
        assert measure_type.name in text
    assert "NONE" not in text


@pytest.mark.parametrize(
    "measure_type, cls, weight",
    [
        (SimilarityMeasureType.ICSE_07_W1_NO_BIGRAM, ICSE07SimilarityMeasure, 1),
        (SimilarityMeasureType.ICSE_07_W2_NO_BIGRAM, ICSE07SimilarityMeasure, 2),
        (SimilarityMeasureType.DSN_08_W1_NO_BIGRAM, DSN08SimilarityMeasure, 1),
        (SimilarityMeasureType.DSN_08_W2_NO_BIGRAM, DSN08SimilarityMeasure, 2),
        (SimilarityMeasureType.ICSE_08_W1_NO_BIGRAM, ICSE08SimilarityMeasure, 1),
        (SimilarityMeasureType.ICSE_08_W2_NO_BIGRAM, ICSE08SimilarityMeasure, 2),
        (SimilarityMeasureType.COMBO_ICSE_07_W1_NO_BIGRAM, ComboICSE07SimilarityMeasure, 1),
        (SimilarityMeasureType.COMBO_ICSE_07_W2_NO_BIGRAM, ComboICSE07SimilarityMeasure, 2),
        (SimilarityMeasureType.COMBO_DSN_08_W1_NO_BIGRAM, ComboDSN08SimilarityMeasure, 1),
        (SimilarityMeasureType.COMBO_DSN_08_W2_NO_BIGRAM, ComboDSN08SimilarityMeasure, 2),
        (SimilarityMeasureType.COMBO_ICSE_08_W1_NO_BIGRAM, ComboICSE08SimilarityMeasure, 1),
        (SimilarityMeasureType.COMBO_ICSE_08_W2_NO_BIGRAM, ComboICSE08SimilarityMeasure, 2),
    ],
)
def test_create_builds_expected_measure(measure_type, cls, weight):
    measure = create_similarity_measure(measure_type)
    assert type(measure) is cls
    assert measure.summary_weight == weight


def test_create_accepts_plain_int():
    measure = create_similarity_measure(19)
    assert isinstance(measure, ComboICSE08SimilarityMeasure)
    assert measure.summary_weight == 1


def test_create_returns_fresh_instances():
    first = create_similarity_measure(SimilarityMeasureType.ICSE_07_W1_NO_BIGRAM)
    second = create_similarity_measure(SimilarityMeasureType.ICSE_07_W1_NO_BIGRAM)
    assert first is not second


def test_create_rejects_none():
    with pytest.raises(ValueError):
        create_similarity_measure(SimilarityMeasureType.NONE)