# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import math
from dataclasses import FrozenInstanceError, replace

import pytest

from ftqc_estimator import (
    PRESETS,
    SCHEME_CATALOG,
    DominantGateType,
    EstimationInput,
    EstimatorConstants,
    FeasibilityTier,
    HardwarePlatform,
    InvalidInputError,
    UnknownHardwareError,
    code_distance,
    derive_insights,
    estimate,
    logical_error_rate,
    preset,
    rotation_t_count,
)


VQE_SMALL = EstimationInput(
    logical_qubits=20,
    t_gates=50000,
    clifford_gates=200000,
    rotation_gates=20000,
    measurements=10000,
    target_error_rate=0.01,
    hardware_platform="superconducting",
)

# One logical qubit, a single Clifford gate
SINGLE_CLIFFORD = EstimationInput(logical_qubits=1, clifford_gates=1)


# ---------------------------------------------------------------------------
# Model building blocks
# ---------------------------------------------------------------------------


class TestModelConstants:
    def test_rotation_t_count(self):
        # ceil(3 * log2(1e8)) = ceil(79.73)
        assert rotation_t_count() == 80

    def test_rotation_t_count_custom_precision(self):
        # ceil(3 * log2(1e4)) = ceil(39.86)
        assert rotation_t_count(EstimatorConstants(precision_target=1e-4)) == 40

    def test_logical_error_rate(self):
        assert logical_error_rate(3) == pytest.approx(1e-3)
        assert logical_error_rate(5) == pytest.approx(1e-4)

    def test_logical_error_rate_decreases_with_distance(self):
        errors = [logical_error_rate(d) for d in range(3, 52, 2)]
        for i in range(len(errors) - 1):
            assert errors[i] > errors[i + 1]

    def test_constants_are_keyword_only(self):
        with pytest.raises(TypeError):
            EstimatorConstants(0.001)  # type: ignore

    def test_constants_are_frozen(self):
        constants = EstimatorConstants()
        with pytest.raises(FrozenInstanceError):
            constants.threshold = 0.02  # type: ignore


class TestCodeDistance:
    def test_minimum_distance(self):
        assert code_distance(0.01, 1) == 3

    def test_budget_above_prefactor(self):
        # A budget of 0.5 is met by any distance
        assert code_distance(0.5, 1) == 3

    def test_odd_ceiling_is_kept(self):
        # budget = 10^-5.75, d = 2 * 5.75 - 3 = 8.5
        assert code_distance(1.778e-6, 1) == 9

    def test_even_ceiling_is_bumped(self):
        # budget = 10^-6.25, d = 2 * 6.25 - 3 = 9.5
        assert code_distance(5.623e-7, 1) == 11

    def test_clamped_to_maximum(self):
        assert code_distance(1e-300, 10**12) == 51

    def test_custom_maximum(self):
        assert code_distance(1e-300, 10**12, EstimatorConstants(max_distance=25)) == 25

    def test_no_operations(self):
        with pytest.raises(InvalidInputError):
            code_distance(0.01, 0)

    @pytest.mark.parametrize("ops", [1, 10, 10**3, 10**6, 10**9, 10**15])
    def test_distance_is_odd_and_bounded(self, ops):
        for target in [0.9, 0.1, 1e-3, 1e-6, 1e-12, 1e-30]:
            d = code_distance(target, ops)
            assert d % 2 == 1
            assert 3 <= d <= 51


# ---------------------------------------------------------------------------
# Estimation
# ---------------------------------------------------------------------------


class TestEstimate:
    def test_vqe_small_scenario(self):
        result = estimate(VQE_SMALL)

        assert len(result.per_scheme) == 4
        assert [r.scheme_name for r in result.per_scheme] == [
            s.name for s in SCHEME_CATALOG
        ]
        assert all(r.physical_qubits > 0 for r in result.per_scheme)
        assert {r.code_distance for r in result.per_scheme} == {13}
        assert result.code_distance == 13

    def test_vqe_small_matches_preset(self):
        assert PRESETS["vqe-small"] == VQE_SMALL

    def test_deterministic(self):
        assert estimate(VQE_SMALL) == estimate(VQE_SMALL)

    def test_single_clifford(self):
        result = estimate(SINGLE_CLIFFORD)

        assert result.code_distance == 3
        assert [r.data_qubits for r in result.per_scheme] == [18, 12, 22, 14]
        assert all(r.t_factory_qubits == 0 for r in result.per_scheme)
        assert result.best.scheme_name == "Cat Qubits"

        surface = result["Surface Code"]
        assert surface.total_code_cycles == pytest.approx(1.0)
        assert surface.runtime_seconds == pytest.approx(3 * 50e-9)
        assert surface.success_probability_percent == pytest.approx(99.9)

        cat = result["Cat Qubits"]
        assert cat.cycle_breakdown.clifford_cycles == pytest.approx(2.0)
        assert cat.runtime_seconds == pytest.approx(2 * 3 * 50e-9)
        assert cat.success_probability_percent == pytest.approx(99.8)

    def test_physical_qubits_is_sum(self):
        for report in estimate(VQE_SMALL):
            assert report.physical_qubits == report.data_qubits + report.t_factory_qubits

    def test_factory_qubits_follow_unit_size(self):
        result = estimate(VQE_SMALL)
        for descriptor, report in zip(SCHEME_CATALOG, result.per_scheme):
            assert report.factory_count >= 1
            assert report.t_factory_qubits == (
                report.factory_count
                * descriptor.t_factory_unit_size
                * descriptor.distillation_rounds
            )

    def test_factories_keep_up_with_consumption(self):
        # One T gate on one qubit at d = 3: the surface code consumes a T
        # state every 9 gate times, and a factory needs 135 gate times.
        result = estimate(EstimationInput(logical_qubits=1, t_gates=1))
        surface = result["Surface Code"]
        assert surface.factory_count in (15, 16)

    def test_cycle_breakdown_total(self):
        for report in estimate(VQE_SMALL):
            breakdown = report.cycle_breakdown
            assert report.total_code_cycles == pytest.approx(
                breakdown.t_cycles + breakdown.clifford_cycles + breakdown.measurement_cycles
            )
            assert breakdown.total == pytest.approx(report.total_code_cycles)

    def test_runtime_is_cycles_times_cycle_time(self):
        result = estimate(VQE_SMALL)
        for report in result:
            assert report.runtime_seconds == pytest.approx(
                report.total_code_cycles * report.code_distance * 50e-9
            )

    def test_runtime_scales_with_gate_time(self):
        fast = estimate(VQE_SMALL.replace(hardware_platform="photonic"))
        slow = estimate(VQE_SMALL.replace(hardware_platform="ion"))

        for f, s in zip(fast, slow):
            assert s.runtime_seconds == pytest.approx(f.runtime_seconds * 5000)
            # Factory counts only depend on ratios of times
            assert s.factory_count == f.factory_count

    def test_accepts_enum_platform(self):
        by_enum = estimate(VQE_SMALL.replace(hardware_platform=HardwarePlatform.SUPERCONDUCTING))
        assert by_enum == estimate(VQE_SMALL)

    def test_measurements_only(self):
        result = estimate(EstimationInput(logical_qubits=4, measurements=8))
        surface = result["Surface Code"]

        # ceil(8 / 4) rounds of d = 3 cycles each
        assert surface.cycle_breakdown.measurement_cycles == pytest.approx(6)
        assert surface.cycle_breakdown.t_cycles == 0
        assert surface.cycle_breakdown.clifford_cycles == 0

    def test_rotations_count_as_t_gates(self):
        rotations = estimate(EstimationInput(logical_qubits=1, rotation_gates=1))
        surface = rotations["Surface Code"]

        # 80 T gates on one qubit, 3 cycles each
        assert surface.cycle_breakdown.t_cycles == pytest.approx(240)
        assert surface.factory_count > 0


class TestEstimateProperties:
    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_presets_are_valid(self, name):
        result = estimate(preset(name))
        for report in result:
            assert report.code_distance % 2 == 1
            assert 3 <= report.code_distance <= 51
            assert 0.0 <= report.success_probability_percent <= 100.0

    @pytest.mark.parametrize("name", sorted(PRESETS))
    def test_best_is_minimum(self, name):
        result = estimate(preset(name))
        assert result.best.physical_qubits == min(r.physical_qubits for r in result)
        assert result.best in result.per_scheme

    def test_best_prefers_catalog_order_on_ties(self):
        result = estimate(VQE_SMALL)
        candidates = [
            r for r in result if r.physical_qubits == result.best.physical_qubits
        ]
        assert result.best is candidates[0]

    def test_distance_monotone_in_target_error(self):
        distances = [
            estimate(VQE_SMALL.replace(target_error_rate=rate)).code_distance
            for rate in [1e-12, 1e-9, 1e-6, 1e-4, 1e-3, 0.01, 0.1, 0.5, 0.99]
        ]
        for i in range(len(distances) - 1):
            assert distances[i] >= distances[i + 1]

    def test_data_qubits_monotone_in_logical_qubits(self):
        previous = None
        for qubits in [1, 2, 5, 20, 100, 1000, 10**5]:
            reports = estimate(VQE_SMALL.replace(logical_qubits=qubits)).per_scheme
            data = [r.data_qubits for r in reports]
            if previous is not None:
                assert all(d >= p for d, p in zip(data, previous))
            previous = data

    def test_zero_t_gates_needs_no_factories(self):
        inputs = VQE_SMALL.replace(t_gates=0, rotation_gates=0)
        for report in estimate(inputs):
            assert report.factory_count == 0
            assert report.t_factory_qubits == 0
            assert report.cycle_breakdown.t_cycles == 0

    def test_success_probability_is_clamped(self):
        # Many rotations at a loose error target keep d = 3 while the circuit
        # runs for hundreds of cycles
        inputs = EstimationInput(logical_qubits=1, rotation_gates=5, target_error_rate=0.9)
        result = estimate(inputs)

        assert result.code_distance == 3
        assert result["Surface Code"].success_probability_percent == 0.0
        assert result["Cat Qubits"].success_probability_percent == pytest.approx(40.0)

    def test_custom_constants(self):
        strict = EstimatorConstants(physical_error_rate=0.005)
        assert (
            estimate(VQE_SMALL, constants=strict).code_distance
            > estimate(VQE_SMALL).code_distance
        )


# ---------------------------------------------------------------------------
# Insights
# ---------------------------------------------------------------------------


class TestInsights:
    def test_clifford_dominated(self):
        insights = estimate(SINGLE_CLIFFORD).insights

        assert insights.dominant_gate_type == DominantGateType.CLIFFORD
        # A quarter of the 12 data qubits of the cat qubit scheme
        assert insights.t_reduction_savings == 3
        assert insights.feasibility_tier == FeasibilityTier.NEAR_TERM_REACHABLE
        assert not insights.low_success_warning

    def test_t_dominated(self):
        result = estimate(VQE_SMALL)
        insights = result.insights

        assert insights.dominant_gate_type == DominantGateType.T
        assert insights.t_reduction_savings == round(result.best.t_factory_qubits * 0.5)

    def test_beyond_current_hardware(self):
        result = estimate(preset("shor-2048"))
        assert result.best.physical_qubits >= 100_000
        assert result.insights.feasibility_tier == FeasibilityTier.BEYOND_CURRENT

    @pytest.mark.parametrize(
        "physical_qubits, tier",
        [
            (9_999, FeasibilityTier.NEAR_TERM_REACHABLE),
            (10_000, FeasibilityTier.CHALLENGING),
            (100_000, FeasibilityTier.CHALLENGING),
            (100_001, FeasibilityTier.BEYOND_CURRENT),
        ],
    )
    def test_tier_boundaries(self, physical_qubits, tier):
        best = replace(estimate(VQE_SMALL).best, physical_qubits=physical_qubits)
        assert derive_insights(best).feasibility_tier == tier

    def test_low_success_warning(self):
        inputs = EstimationInput(logical_qubits=1, rotation_gates=5, target_error_rate=0.9)
        result = estimate(inputs)

        assert result.best.scheme_name == "Cat Qubits"
        assert result.insights.low_success_warning
        assert result.insights.dominant_gate_type == DominantGateType.T


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------


class TestValidation:
    @pytest.mark.parametrize(
        "inputs",
        [
            VQE_SMALL.replace(logical_qubits=0),
            EstimationInput(logical_qubits=0, hardware_platform="topological"),
            EstimationInput(logical_qubits=0, target_error_rate=2.0),
        ],
    )
    def test_zero_logical_qubits(self, inputs):
        with pytest.raises(InvalidInputError):
            estimate(inputs)

    def test_no_gates(self):
        with pytest.raises(InvalidInputError, match="gate count"):
            estimate(EstimationInput(logical_qubits=10))

    @pytest.mark.parametrize(
        "field, value",
        [
            ("t_gates", -1),
            ("clifford_gates", math.inf),
            ("rotation_gates", math.nan),
            ("measurements", 2.5),
            ("t_gates", True),
            ("logical_qubits", 1.5),
            ("t_gates", 10**400),
            ("t_gates", 1e308),
            ("rotation_gates", 1e307),
            ("logical_qubits", 10**400),
            ("measurements", 2**53 + 1),
        ],
    )
    def test_invalid_counts(self, field, value):
        with pytest.raises(InvalidInputError):
            estimate(VQE_SMALL.replace(**{field: value}))

    def test_effective_t_count_too_large(self):
        # Each count is in range, but 2**50 rotations expand to 80 * 2**50 T gates
        inputs = VQE_SMALL.replace(rotation_gates=2**50)
        with pytest.raises(InvalidInputError, match="synthesized rotations"):
            estimate(inputs)

    def test_integral_floats_are_accepted(self):
        assert estimate(VQE_SMALL.replace(t_gates=50000.0)) == estimate(VQE_SMALL)

    @pytest.mark.parametrize("rate", [0.0, 1.0, -0.1, 1.5, math.nan, math.inf])
    def test_invalid_error_rate(self, rate):
        with pytest.raises(InvalidInputError):
            estimate(VQE_SMALL.replace(target_error_rate=rate))

    def test_unknown_hardware(self):
        with pytest.raises(UnknownHardwareError) as exc_info:
            estimate(VQE_SMALL.replace(hardware_platform="topological"))

        assert exc_info.value.platform == "topological"
        assert "superconducting" in str(exc_info.value)

    def test_errors_are_value_and_lookup_errors(self):
        with pytest.raises(ValueError):
            estimate(VQE_SMALL.replace(logical_qubits=0))
        with pytest.raises(LookupError):
            estimate(VQE_SMALL.replace(hardware_platform="topological"))
