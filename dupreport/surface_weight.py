"""Weights of the categorical (surface) features of a bug report."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class ParameterPair:
    """A parameter value and whether learning may change it."""

    value: float = 0.0
    fixed: bool = False


_LABELS: tuple[tuple[str, str], ...] = (
    ("component_weight", "component weight"),
    ("sub_component_weight", "sub component weight"),
    ("report_type_weight", "report type weight"),
    ("priority_weight", "priority weight"),
    ("version_weight", "version weight"),
)


@dataclass
class SurfaceWeight:
    """Weights of component, sub-component, report type, priority and version.

    Sub-component, report-type and priority weights never drop below zero;
    component and version weights may.
    """

    component_weight: ParameterPair = field(default_factory=ParameterPair)
    sub_component_weight: ParameterPair = field(default_factory=ParameterPair)
    report_type_weight: ParameterPair = field(default_factory=ParameterPair)
    priority_weight: ParameterPair = field(default_factory=ParameterPair)
    version_weight: ParameterPair = field(default_factory=ParameterPair)

    def _increase(self, name: str, delta: float, *, clamp: bool) -> None:
        pair: ParameterPair = getattr(self, name)
        if pair.fixed:
            raise ValueError(f"{name} is fixed and cannot be changed")
        if math.isnan(delta):
            raise ValueError(f"cannot change {name} by NaN")
        value = pair.value + delta
        if math.isnan(value):
            raise ValueError(f"{name} became NaN")
        if clamp and value < 0:
            value = 0.0
        setattr(self, name, replace(pair, value=value))

    def increase_component_weight(self, delta: float) -> None:
        self._increase("component_weight", delta, clamp=False)

    def increase_sub_component_weight(self, delta: float) -> None:
        self._increase("sub_component_weight", delta, clamp=True)

    def increase_report_type_weight(self, delta: float) -> None:
        self._increase("report_type_weight", delta, clamp=True)

    def increase_priority_weight(self, delta: float) -> None:
        self._increase("priority_weight", delta, clamp=True)

    def increase_version_weight(self, delta: float) -> None:
        self._increase("version_weight", delta, clamp=False)

    def describe(self) -> str:
        """A readable listing of every weight and whether it is fixed."""
        lines = ["", "Surface weights..."]
        for name, label in _LABELS:
            pair: ParameterPair = getattr(self, name)
            lines.append(f"[{label}, fixed = {int(pair.fixed)}] = {pair.value:f}")
        return "\n".join(lines) + "\n"