# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

import logging
import math
from dataclasses import KW_ONLY, dataclass
from numbers import Integral, Real

from ._errors import InvalidInputError
from ._hardware import gate_time
from ._schemes import SCHEME_CATALOG, SchemeDescriptor
from ._types import (
    CycleBreakdown,
    DominantGateType,
    EstimationInput,
    EstimationResult,
    FeasibilityTier,
    Insights,
    SchemeReport,
)


logger = logging.getLogger(__name__)

NEAR_TERM_QUBIT_LIMIT = 10_000
CHALLENGING_QUBIT_LIMIT = 100_000
LOW_SUCCESS_PERCENT = 50.0

# Counts are used in floating-point arithmetic; above 2**53 they lose
# integer precision and products with per-qubit costs can overflow
MAX_COUNT = 2**53


@dataclass(frozen=True, slots=True)
class EstimatorConstants:
    """
    Model constants shared by all QEC schemes.

    Attributes:
        physical_error_rate: float
            Error rate of physical operations.  (Default is 0.001)
        threshold: float
            Error correction threshold.  (Default is 0.01)
        crossing_prefactor: float
            Prefactor of the logical error rate per code cycle, i.e., the
            logical error rate is ``crossing_prefactor * (p / p_th) ** ((d + 1)
            / 2)``.  (Default is 0.1)
        precision_target: float
            Synthesis precision of a single rotation gate, which determines
            how many T gates each rotation decomposes into.  (Default is 1e-8)
        min_distance: int
            Smallest code distance considered.  (Default is 3)
        max_distance: int
            Largest code distance considered.  (Default is 51)
        distillation_input_states: int
            Noisy input states consumed per distilled state in one round.
            (Default is 15, the 15-to-1 protocol)
    """

    _: KW_ONLY
    physical_error_rate: float = 0.001
    threshold: float = 0.01
    crossing_prefactor: float = 0.1
    precision_target: float = 1e-8
    min_distance: int = 3
    max_distance: int = 51
    distillation_input_states: int = 15


DEFAULT_CONSTANTS = EstimatorConstants()


def rotation_t_count(constants: EstimatorConstants = DEFAULT_CONSTANTS) -> int:
    """
    Number of T gates to synthesize one arbitrary rotation, i.e., ``ceil(3 *
    log2(1 / precision_target))``.
    """

    return math.ceil(3 * math.log2(1 / constants.precision_target))


def logical_error_rate(
    distance: int, constants: EstimatorConstants = DEFAULT_CONSTANTS
) -> float:
    """Logical error rate per code cycle at a given code distance."""

    return constants.crossing_prefactor * (
        (constants.physical_error_rate / constants.threshold)
        ** ((distance + 1) / 2)
    )


def code_distance(
    target_error_rate: float,
    total_logical_ops: int,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
) -> int:
    """
    Smallest odd code distance for which the logical error rate per cycle
    stays within the per-operation error budget ``target_error_rate /
    total_logical_ops``, clamped to the distance range of the constants.

    Solves ``budget = prefactor * (p / p_th) ** ((d + 1) / 2)`` for d.  The
    logarithm of the budget is taken as a difference of logarithms so that
    large operation counts do not underflow the budget to zero.
    """

    if total_logical_ops <= 0:
        raise InvalidInputError("Total number of logical operations must be positive")

    log_budget = math.log(target_error_rate) - math.log(total_logical_ops)
    log_ratio = math.log(constants.physical_error_rate / constants.threshold)
    d = 2 * (log_budget - math.log(constants.crossing_prefactor)) / log_ratio - 1

    distance = max(constants.min_distance, math.ceil(d))
    if distance % 2 == 0:
        distance += 1

    return min(distance, constants.max_distance)


def estimate(
    inputs: EstimationInput,
    *,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
) -> EstimationResult:
    """
    Estimate physical resources of an algorithm for every scheme in the
    catalog.

    All schemes share one code distance, derived from the per-operation error
    budget.  For each scheme, the data qubits follow from the scheme's
    encoding rate, and the number of magic state factories is chosen such
    that T states are produced at least as fast as the algorithm consumes
    them.

    :param inputs: Logical resource counts, error target and hardware
    :param constants: Model constants (default: :data:`DEFAULT_CONSTANTS`)
    :return: One report per scheme in catalog order, the scheme with the
        fewest physical qubits, and derived insight facts
    :raises InvalidInputError: If the inputs cannot be estimated
    :raises UnknownHardwareError: If the hardware platform is unknown
    """

    _validate(inputs, constants)
    time_per_gate = gate_time(inputs.hardware_platform)

    logical_qubits = inputs.logical_qubits
    effective_t_gates = inputs.t_gates + inputs.rotation_gates * rotation_t_count(
        constants
    )

    total_logical_ops = sum(
        count for count in inputs.gate_counts.values() if count > 0
    )

    distance = code_distance(inputs.target_error_rate, total_logical_ops, constants)
    logger.debug(
        f"Code distance {distance} for {total_logical_ops} logical operations "
        f"at target error rate {inputs.target_error_rate}"
    )

    parallelism = max(1.0, math.sqrt(logical_qubits))
    depths = _Depths(
        t=math.ceil(effective_t_gates / parallelism) if effective_t_gates else 0,
        clifford=(
            math.ceil(inputs.clifford_gates / logical_qubits)
            if inputs.clifford_gates
            else 0
        ),
        measurement=(
            math.ceil(inputs.measurements / logical_qubits)
            if inputs.measurements
            else 0
        ),
    )

    reports = tuple(
        _evaluate_scheme(
            descriptor,
            logical_qubits,
            effective_t_gates,
            depths,
            distance,
            time_per_gate,
            constants,
        )
        for descriptor in SCHEME_CATALOG
    )

    # min() keeps the first minimal element, i.e., catalog order breaks ties
    best = min(reports, key=lambda report: report.physical_qubits)

    return EstimationResult(
        per_scheme=reports,
        best=best,
        insights=derive_insights(best),
    )


def derive_insights(best: SchemeReport) -> Insights:
    """
    Derive facts for user-facing commentary from the best scheme report.

    The savings of a 50% T-count reduction are half of the factory qubits if
    T gates dominate the cycle count, and a quarter of the data qubits
    otherwise.  This is an illustrative figure only.
    """

    breakdown = best.cycle_breakdown
    # Ties resolve in the order t, clifford, measurement
    dominant = max(
        (
            (breakdown.t_cycles, DominantGateType.T),
            (breakdown.clifford_cycles, DominantGateType.CLIFFORD),
            (breakdown.measurement_cycles, DominantGateType.MEASUREMENT),
        ),
        key=lambda item: item[0],
    )[1]

    if dominant == DominantGateType.T:
        savings = round(best.t_factory_qubits * 0.5)
    else:
        savings = round(best.data_qubits * 0.25)

    if best.physical_qubits < NEAR_TERM_QUBIT_LIMIT:
        tier = FeasibilityTier.NEAR_TERM_REACHABLE
    elif best.physical_qubits <= CHALLENGING_QUBIT_LIMIT:
        tier = FeasibilityTier.CHALLENGING
    else:
        tier = FeasibilityTier.BEYOND_CURRENT

    return Insights(
        dominant_gate_type=dominant,
        t_reduction_savings=savings,
        feasibility_tier=tier,
        low_success_warning=best.success_probability_percent < LOW_SUCCESS_PERCENT,
    )


@dataclass(frozen=True, slots=True)
class _Depths:
    t: int
    clifford: int
    measurement: int


def _evaluate_scheme(
    descriptor: SchemeDescriptor,
    logical_qubits: int,
    effective_t_gates: int,
    depths: _Depths,
    distance: int,
    time_per_gate: float,
    constants: EstimatorConstants,
) -> SchemeReport:
    data_qubits = round(
        logical_qubits * descriptor.physical_qubits_per_logical(distance)
    )
    t_cycles_per_gate = descriptor.t_cycles_per_gate(distance)

    if effective_t_gates > 0:
        cycles_per_t_state = (
            distance
            * constants.distillation_input_states**descriptor.distillation_rounds
        )
        t_states_per_second = 1 / (cycles_per_t_state * time_per_gate * distance)

        clifford_time = depths.clifford * distance * time_per_gate
        t_gate_time = depths.t * t_cycles_per_gate * distance * time_per_gate
        circuit_time = clifford_time + t_gate_time

        required_rate = effective_t_gates / circuit_time
        factory_count = math.ceil(required_rate / t_states_per_second)
        t_factory_qubits = round(
            factory_count
            * descriptor.t_factory_unit_size
            * descriptor.distillation_rounds
        )
    else:
        factory_count = 0
        t_factory_qubits = 0

    breakdown = CycleBreakdown(
        t_cycles=depths.t * t_cycles_per_gate,
        clifford_cycles=depths.clifford * descriptor.clifford_cycles_per_gate,
        measurement_cycles=(
            depths.measurement * descriptor.measurement_cycles_per_op(distance)
        ),
    )
    total_cycles = breakdown.total

    code_cycle_time = distance * time_per_gate
    runtime = total_cycles * code_cycle_time

    total_error = total_cycles * logical_error_rate(distance, constants)
    success = min(100.0, max(0.0, (1 - total_error) * 100))

    logger.debug(
        f"{descriptor.name}: {data_qubits} data qubits, {factory_count} "
        f"factories ({t_factory_qubits} qubits), {total_cycles} code cycles"
    )

    return SchemeReport(
        scheme_name=descriptor.name,
        physical_qubits=data_qubits + t_factory_qubits,
        data_qubits=data_qubits,
        t_factory_qubits=t_factory_qubits,
        factory_count=factory_count,
        code_distance=distance,
        total_code_cycles=total_cycles,
        runtime_seconds=runtime,
        success_probability_percent=success,
        feasibility=descriptor.feasibility,
        cycle_breakdown=breakdown,
    )


def _validate(inputs: EstimationInput, constants: EstimatorConstants) -> None:
    qubits = inputs.logical_qubits
    if not _is_count(qubits) or not 1 <= qubits <= MAX_COUNT:
        raise InvalidInputError(
            f"Number of logical qubits must be an integer in [1, {MAX_COUNT}], "
            f"got {qubits!r}"
        )

    for name, count in inputs.gate_counts.items():
        if not _is_count(count) or not 0 <= count <= MAX_COUNT:
            raise InvalidInputError(
                f"Number of {name} gates must be an integer in [0, {MAX_COUNT}], "
                f"got {count!r}"
            )

    if all(count == 0 for count in inputs.gate_counts.values()):
        raise InvalidInputError("At least one gate count must be positive")

    effective_t_gates = inputs.t_gates + inputs.rotation_gates * rotation_t_count(
        constants
    )
    if effective_t_gates > MAX_COUNT:
        raise InvalidInputError(
            f"T gates including synthesized rotations must not exceed {MAX_COUNT}, "
            f"got {effective_t_gates!r}"
        )

    rate = inputs.target_error_rate
    if (
        isinstance(rate, bool)
        or not isinstance(rate, Real)
        or not math.isfinite(rate)
        or not 0 < rate < 1
    ):
        raise InvalidInputError(
            f"Target error rate must be a number in (0, 1), got {rate!r}"
        )


def _is_count(value) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Integral):
        return True
    return isinstance(value, float) and math.isfinite(value) and value.is_integer()
