# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Any

from ._hardware import HardwarePlatform
from ._schemes import FeasibilityClass


@dataclass(frozen=True, slots=True)
class EstimationInput:
    """
    Logical resource counts of an algorithm together with its error target
    and the hardware platform to estimate for.

    Validation happens in :func:`estimate`, so that an input read from a form
    or a share link can be constructed first and rejected with a precise
    error afterwards.
    """

    logical_qubits: int
    t_gates: int = 0
    clifford_gates: int = 0
    rotation_gates: int = 0
    measurements: int = 0
    target_error_rate: float = 0.01
    hardware_platform: str = HardwarePlatform.SUPERCONDUCTING.value

    @property
    def gate_counts(self) -> dict[str, int]:
        return {
            "t": self.t_gates,
            "clifford": self.clifford_gates,
            "rotation": self.rotation_gates,
            "measurement": self.measurements,
        }

    def replace(self, **changes) -> EstimationInput:
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["hardware_platform"] = str(self.hardware_platform)
        return data


@dataclass(frozen=True, slots=True)
class CycleBreakdown:
    t_cycles: float
    clifford_cycles: float
    measurement_cycles: float

    @property
    def total(self) -> float:
        return self.t_cycles + self.clifford_cycles + self.measurement_cycles


@dataclass(frozen=True, slots=True)
class SchemeReport:
    scheme_name: str
    physical_qubits: int
    data_qubits: int
    t_factory_qubits: int
    factory_count: int
    code_distance: int
    total_code_cycles: float
    runtime_seconds: float
    success_probability_percent: float
    feasibility: FeasibilityClass
    cycle_breakdown: CycleBreakdown

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


class DominantGateType(str, Enum):
    T = "t"
    CLIFFORD = "clifford"
    MEASUREMENT = "measurement"

    def __str__(self) -> str:
        return self.value


class FeasibilityTier(str, Enum):
    NEAR_TERM_REACHABLE = "near-term-reachable"
    CHALLENGING = "challenging"
    BEYOND_CURRENT = "beyond-current"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Insights:
    """
    Facts derived from an estimation for user-facing commentary.

    ``t_reduction_savings`` is an illustrative figure for a 50% reduction of
    the T count, not a physically derived relationship.
    """

    dominant_gate_type: DominantGateType
    t_reduction_savings: int
    feasibility_tier: FeasibilityTier
    low_success_warning: bool

    def to_dict(self) -> dict[str, Any]:
        return _plain(asdict(self))


@dataclass(frozen=True, slots=True)
class EstimationResult:
    per_scheme: tuple[SchemeReport, ...]
    best: SchemeReport
    insights: Insights

    @property
    def code_distance(self) -> int:
        return self.best.code_distance

    def __iter__(self):
        return iter(self.per_scheme)

    def __len__(self) -> int:
        return len(self.per_scheme)

    def __getitem__(self, name: str) -> SchemeReport:
        for report in self.per_scheme:
            if report.scheme_name == name:
                return report
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code_distance": self.code_distance,
            "per_scheme": [report.to_dict() for report in self.per_scheme],
            "best": self.best.scheme_name,
            "insights": self.insights.to_dict(),
        }

    def as_frame(self):
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "Missing optional 'pandas' dependency. To install run: "
                "pip install pandas"
            )

        return pd.DataFrame(
            [
                {
                    "scheme": report.scheme_name,
                    "physical_qubits": report.physical_qubits,
                    "data_qubits": report.data_qubits,
                    "t_factory_qubits": report.t_factory_qubits,
                    "factory_count": report.factory_count,
                    "code_distance": report.code_distance,
                    "code_cycles": report.total_code_cycles,
                    "runtime": pd.Timedelta(report.runtime_seconds, unit="s"),
                    "success_probability": report.success_probability_percent,
                    "feasibility": str(report.feasibility),
                    "best": report is self.best,
                }
                for report in self.per_scheme
            ]
        ).set_index("scheme")


def _plain(value):
    # Converts enum members nested in asdict() output to their values
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, Enum):
        return value.value
    return value
