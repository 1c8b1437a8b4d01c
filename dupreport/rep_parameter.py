"""Default parameters of the REP retrieval model, read from a key=value file."""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, "os.PathLike[str]"]

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "1", "on"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "0", "off", "none"})


class ConfigError(ValueError):
    """Raised when a parameter file is missing, incomplete or malformed."""


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    word = str(value).strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ConfigError(f"attribute [{key}] is not a boolean: {value!r}")


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"attribute [{key}] is not a number: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"attribute [{key}] is not a number: {value!r}") from None


def _to_count(key: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"attribute [{key}] is not an integer: {value!r}")
    try:
        number = value if isinstance(value, int) else int(str(value).strip())
    except ValueError:
        raise ConfigError(f"attribute [{key}] is not an integer: {value!r}") from None
    if number < 0:
        raise ConfigError(f"attribute [{key}] must not be negative: {number}")
    return number


_CONVERTERS = {"float": _to_float, "bool": _to_bool, "int": _to_count}


@dataclass(frozen=True)
class DefaultREPParameter:
    """Initial values of the REP parameters and whether each one is held fixed."""

    unigram_weight: float
    unigram_weight_fixed: bool
    bigram_weight: float
    bigram_weight_fixed: bool
    k1: float
    k1_fixed: bool
    summary_weight: float
    summary_weight_fixed: bool
    summary_b: float
    summary_b_fixed: bool
    description_weight: float
    description_weight_fixed: bool
    description_b: float
    description_b_fixed: bool
    component_weight: float
    component_weight_fixed: bool
    sub_component_weight: float
    sub_component_weight_fixed: bool
    report_type_weight: float
    report_type_weight_fixed: bool
    priority_weight: float
    priority_weight_fixed: bool
    version_weight: float
    version_weight_fixed: bool
    k3: float
    k3_fixed: bool
    count_of_irrelevant_reports_per_query: int
    max_query_count: int

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> DefaultREPParameter:
        """Build from upper-case keys such as ``K1`` and ``K1_FIXED``.

        Values may be strings or already typed; a missing key raises ConfigError.
        """
        arguments: dict[str, Any] = {}
        for spec in dataclasses.fields(cls):
            key = spec.name.upper()
            if key not in values:
                raise ConfigError(
                    f"attribute [{key}] does not exist in the config file."
                )
            convert = _CONVERTERS[str(spec.type)]
            arguments[spec.name] = convert(key, values[key])
        return cls(**arguments)


def _read_pairs(text: str) -> dict[str, str]:
    pairs: dict[str, str] = {}
    for line in text.splitlines():
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        pairs[key.strip()] = value.strip()
    return pairs


def load_rep_parameter(path: PathLike) -> DefaultREPParameter:
    """Read the parameters from a ``KEY = value`` file with ``#`` comments."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(
            f"RankNet config file [{os.fspath(path)}] does not exist!"
        ) from None
    return DefaultREPParameter.from_mapping(_read_pairs(text))