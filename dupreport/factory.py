"""Choosing and building plain textual similarity measures by numeric type code."""

from __future__ import annotations

from enum import IntEnum

from .combo import (
    ComboDSN08SimilarityMeasure,
    ComboICSE07SimilarityMeasure,
    ComboICSE08SimilarityMeasure,
)
from .cosine import (
    DSN08SimilarityMeasure,
    ICSE07SimilarityMeasure,
    ICSE08SimilarityMeasure,
    PlainSimilarityMeasure,
)


class SimilarityMeasureType(IntEnum):
    """The available similarity measures and their numeric codes."""

    ICSE_07_W1_NO_BIGRAM = 1
    ICSE_07_W2_NO_BIGRAM = 3
    DSN_08_W1_NO_BIGRAM = 5
    DSN_08_W2_NO_BIGRAM = 8
    ICSE_08_W1_NO_BIGRAM = 9
    ICSE_08_W2_NO_BIGRAM = 10
    COMBO_ICSE_07_W1_NO_BIGRAM = 11
    COMBO_ICSE_07_W2_NO_BIGRAM = 13
    COMBO_DSN_08_W1_NO_BIGRAM = 15
    COMBO_DSN_08_W2_NO_BIGRAM = 18
    COMBO_ICSE_08_W1_NO_BIGRAM = 19
    COMBO_ICSE_08_W2_NO_BIGRAM = 20
    NONE = 9999


_T = SimilarityMeasureType

_BUILDERS: dict[SimilarityMeasureType, tuple[type[PlainSimilarityMeasure], int]] = {
    _T.ICSE_07_W1_NO_BIGRAM: (ICSE07SimilarityMeasure, 1),
    _T.ICSE_07_W2_NO_BIGRAM: (ICSE07SimilarityMeasure, 2),
    _T.DSN_08_W1_NO_BIGRAM: (DSN08SimilarityMeasure, 1),
    _T.DSN_08_W2_NO_BIGRAM: (DSN08SimilarityMeasure, 2),
    _T.ICSE_08_W1_NO_BIGRAM: (ICSE08SimilarityMeasure, 1),
    _T.ICSE_08_W2_NO_BIGRAM: (ICSE08SimilarityMeasure, 2),
    _T.COMBO_ICSE_07_W1_NO_BIGRAM: (ComboICSE07SimilarityMeasure, 1),
    _T.COMBO_ICSE_07_W2_NO_BIGRAM: (ComboICSE07SimilarityMeasure, 2),
    _T.COMBO_DSN_08_W1_NO_BIGRAM: (ComboDSN08SimilarityMeasure, 1),
    _T.COMBO_DSN_08_W2_NO_BIGRAM: (ComboDSN08SimilarityMeasure, 2),
    _T.COMBO_ICSE_08_W1_NO_BIGRAM: (ComboICSE08SimilarityMeasure, 1),
    _T.COMBO_ICSE_08_W2_NO_BIGRAM: (ComboICSE08SimilarityMeasure, 2),
}

# The ICSE 08 entries carry a space after the colon in the published mapping.
_MAPPING_SEPARATORS: tuple[tuple[SimilarityMeasureType, str], ...] = (
    (_T.ICSE_07_W1_NO_BIGRAM, ":"),
    (_T.ICSE_07_W2_NO_BIGRAM, ":"),
    (_T.DSN_08_W1_NO_BIGRAM, ":"),
    (_T.DSN_08_W2_NO_BIGRAM, ":"),
    (_T.ICSE_08_W1_NO_BIGRAM, ": "),
    (_T.ICSE_08_W2_NO_BIGRAM, ": "),
    (_T.COMBO_ICSE_07_W1_NO_BIGRAM, ":"),
    (_T.COMBO_ICSE_07_W2_NO_BIGRAM, ":"),
    (_T.COMBO_DSN_08_W1_NO_BIGRAM, ":"),
    (_T.COMBO_DSN_08_W2_NO_BIGRAM, ":"),
    (_T.COMBO_ICSE_08_W1_NO_BIGRAM, ": "),
    (_T.COMBO_ICSE_08_W2_NO_BIGRAM, ": "),
)


def _usable(measure_type: int) -> SimilarityMeasureType:
    try:
        resolved = SimilarityMeasureType(measure_type)
    except ValueError:
        raise ValueError(
            f"unhandled SimilarityMeasureType type: {measure_type}"
        ) from None
    if resolved not in _BUILDERS:
        raise ValueError(f"unhandled SimilarityMeasureType type: {int(resolved)}")
    return resolved


def parse_similarity_measure_type(value: int) -> SimilarityMeasureType:
    """The measure type with the given code; raises ValueError for an unknown one."""
    return _usable(value)


def similarity_measure_type_name(measure_type: SimilarityMeasureType | int) -> str:
    """The name of a measure type; raises ValueError for NONE or an unknown code."""
    return _usable(measure_type).name


def similarity_measure_type_mapping() -> str:
    """A one-line listing of every code and its measure name."""
    return "".join(
        f"{int(measure_type)}{separator}{measure_type.name}, "
        for measure_type, separator in _MAPPING_SEPARATORS
    )


def create_similarity_measure(
    measure_type: SimilarityMeasureType | int,
) -> PlainSimilarityMeasure:
    """A fresh measure of the given type; raises ValueError for NONE or an unknown code."""
    measure_class, summary_weight = _BUILDERS[_usable(measure_type)]
    return measure_class(summary_weight)