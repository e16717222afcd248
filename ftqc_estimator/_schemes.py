# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class FeasibilityClass(str, Enum):
    NEAR_TERM = "near-term"
    LONG_TERM = "long-term"

    def __str__(self) -> str:
        return self.value


TIMELINES: dict[FeasibilityClass, str] = {
    FeasibilityClass.NEAR_TERM: "2-5 years",
    FeasibilityClass.LONG_TERM: "5-10 years",
}


@dataclass(frozen=True, slots=True)
class SchemeDescriptor:
    """
    Static description of a QEC scheme.

    The per-distance formulas are plain functions of the code distance so
    that each descriptor stays immutable and hashable.

    Attributes:
        name: str
            Display name of the scheme.
        physical_qubits_per_logical: Callable[[int], float]
            Physical qubits (data and syndrome) needed to encode one logical
            qubit at distance d.
        t_factory_unit_size: int
            Physical qubits of one distillation unit.
        distillation_rounds: int
            Number of 15-to-1 distillation rounds per magic state.
        clifford_cycles_per_gate: float
            Code cycles spent per layer of logical Clifford gates.
        t_cycles_per_gate: Callable[[int], float]
            Code cycles spent per layer of T gates (injection and
            teleportation of the distilled state) at distance d.
        measurement_cycles_per_op: Callable[[int], float]
            Code cycles spent per layer of logical measurements at distance d.
        feasibility: FeasibilityClass
            Rough hardware timeline for the scheme.
        description: str
            One-line description for reports.
    """

    name: str
    physical_qubits_per_logical: Callable[[int], float]
    t_factory_unit_size: int
    distillation_rounds: int
    clifford_cycles_per_gate: float
    t_cycles_per_gate: Callable[[int], float]
    measurement_cycles_per_op: Callable[[int], float]
    feasibility: FeasibilityClass
    description: str

    @property
    def timeline(self) -> str:
        return TIMELINES[self.feasibility]


# Surface code: d^2 data qubits and d^2 - 1 ancillas, rounded up to 2d^2.
# Magic states are consumed through lattice surgery, which takes d cycles.
def _surface_qubits(distance: int) -> float:
    return 2 * distance**2


def _surface_t_cycles(distance: int) -> float:
    return distance


def _surface_measurement_cycles(distance: int) -> float:
    return distance


# Cat qubits suppress bit flips in hardware, so only a repetition code of
# length d against phase flips is needed.
def _cat_qubits(distance: int) -> float:
    return 4 * distance


def _cat_t_cycles(distance: int) -> float:
    return 0.5 * distance


def _cat_measurement_cycles(distance: int) -> float:
    return 0.5 * distance


# Color codes have transversal Cliffords and single-cycle logical readout.
def _color_qubits(distance: int) -> float:
    return 2.5 * distance**2


def _color_t_cycles(distance: int) -> float:
    return distance


def _single_cycle(distance: int) -> float:
    return 1.0


def _bacon_shor_qubits(distance: int) -> float:
    return 1.5 * distance**2


def _bacon_shor_t_cycles(distance: int) -> float:
    return 1.5 * distance


SURFACE_CODE = SchemeDescriptor(
    name="Surface Code",
    physical_qubits_per_logical=_surface_qubits,
    t_factory_unit_size=1000,
    distillation_rounds=1,
    clifford_cycles_per_gate=1.0,
    t_cycles_per_gate=_surface_t_cycles,
    measurement_cycles_per_op=_surface_measurement_cycles,
    feasibility=FeasibilityClass.NEAR_TERM,
    description="Rotated planar surface code with lattice-surgery operations",
)

CAT_QUBITS = SchemeDescriptor(
    name="Cat Qubits",
    physical_qubits_per_logical=_cat_qubits,
    t_factory_unit_size=400,
    distillation_rounds=1,
    clifford_cycles_per_gate=2.0,
    t_cycles_per_gate=_cat_t_cycles,
    measurement_cycles_per_op=_cat_measurement_cycles,
    feasibility=FeasibilityClass.NEAR_TERM,
    description="Bias-preserving cat qubits protected by a repetition code",
)

COLOR_CODE = SchemeDescriptor(
    name="Color Code",
    physical_qubits_per_logical=_color_qubits,
    t_factory_unit_size=1200,
    distillation_rounds=1,
    clifford_cycles_per_gate=1.0,
    t_cycles_per_gate=_color_t_cycles,
    measurement_cycles_per_op=_single_cycle,
    feasibility=FeasibilityClass.LONG_TERM,
    description="Triangular 4.8.8 color code with transversal Clifford gates",
)

BACON_SHOR = SchemeDescriptor(
    name="Bacon-Shor",
    physical_qubits_per_logical=_bacon_shor_qubits,
    t_factory_unit_size=1800,
    distillation_rounds=2,
    clifford_cycles_per_gate=1.5,
    t_cycles_per_gate=_bacon_shor_t_cycles,
    measurement_cycles_per_op=_single_cycle,
    feasibility=FeasibilityClass.LONG_TERM,
    description="Bacon-Shor subsystem code with gauge-fixed two-body checks",
)

SCHEME_CATALOG: tuple[SchemeDescriptor, ...] = (
    SURFACE_CODE,
    CAT_QUBITS,
    COLOR_CODE,
    BACON_SHOR,
)


def scheme(name: str) -> SchemeDescriptor:
    """Look up a scheme descriptor by its display name."""

    for descriptor in SCHEME_CATALOG:
        if descriptor.name == name:
            return descriptor

    available = [descriptor.name for descriptor in SCHEME_CATALOG]
    raise KeyError(f"Unknown QEC scheme {name!r} (available: {available})")
