# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

from ._hardware import display_name
from ._schemes import TIMELINES, FeasibilityClass
from ._types import DominantGateType, EstimationInput, EstimationResult, FeasibilityTier


_DOMINANT_LABELS = {
    DominantGateType.T: "T",
    DominantGateType.CLIFFORD: "Clifford",
    DominantGateType.MEASUREMENT: "Measurement",
}

_TIER_MESSAGES = {
    FeasibilityTier.NEAR_TERM_REACHABLE: (
        "Resource requirements are within reach of near-term systems"
    ),
    FeasibilityTier.CHALLENGING: (
        "Resource requirements are challenging but plausible for early "
        "fault-tolerant systems"
    ),
    FeasibilityTier.BEYOND_CURRENT: (
        "This exceeds current hardware capabilities - consider reducing "
        "T-gate count"
    ),
}


def format_time(seconds: float) -> str:
    """Formats a duration with the largest unit below its magnitude."""

    if seconds < 1e-6:
        return f"{seconds * 1e9:.1f} ns"
    if seconds < 1e-3:
        return f"{seconds * 1e6:.1f} μs"
    if seconds < 1:
        return f"{seconds * 1e3:.1f} ms"
    if seconds < 60:
        return f"{seconds:.1f} s"
    if seconds < 3600:
        return f"{seconds / 60:.1f} min"
    if seconds < 86400:
        return f"{seconds / 3600:.1f} hrs"
    return f"{seconds / 86400:.1f} days"


def format_number(value) -> str:
    return f"{round(value):,}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def timeline(feasibility: FeasibilityClass | str) -> str:
    return TIMELINES[FeasibilityClass(feasibility)]


def insight_messages(inputs: EstimationInput, result: EstimationResult) -> list[str]:
    """Sentences describing the estimation, best scheme first."""

    best = result.best
    insights = result.insights

    messages = [
        f"Best option: {best.scheme_name} requires "
        f"{format_number(best.physical_qubits)} physical qubits",
        f"Estimated runtime: {format_time(best.runtime_seconds)} on "
        f"{display_name(inputs.hardware_platform)} hardware",
        _TIER_MESSAGES[insights.feasibility_tier],
        f"{_DOMINANT_LABELS[insights.dominant_gate_type]} gates dominate the "
        "code-cycle count",
        "Reducing T-gates by 50% would save approximately "
        f"{format_number(insights.t_reduction_savings)} physical qubits",
    ]

    if insights.low_success_warning:
        messages.append(
            f"Success probability of {format_percent(best.success_probability_percent)}"
            " is below 50% - consider a stricter target error rate"
        )

    return messages


def format_summary(inputs: EstimationInput, result: EstimationResult) -> str:
    """Plain-text rendering of an estimation for terminals."""

    header = ("Scheme", "Physical", "Data", "Factory", "d", "Runtime", "Success", "Timeline")
    rows = [
        (
            ("* " if report is result.best else "  ") + report.scheme_name,
            format_number(report.physical_qubits),
            format_number(report.data_qubits),
            format_number(report.t_factory_qubits),
            str(report.code_distance),
            format_time(report.runtime_seconds),
            format_percent(report.success_probability_percent),
            timeline(report.feasibility),
        )
        for report in result.per_scheme
    ]

    widths = [
        max(len(row[column]) for row in [("  " + header[0], *header[1:]), *rows])
        for column in range(len(header))
    ]

    def line(cells):
        first = cells[0].ljust(widths[0])
        rest = [cell.rjust(width) for cell, width in zip(cells[1:], widths[1:])]
        return "  ".join([first, *rest]).rstrip()

    lines = [
        f"Logical qubits: {format_number(inputs.logical_qubits)}, "
        f"target error rate: {inputs.target_error_rate}, "
        f"hardware: {display_name(inputs.hardware_platform)}",
        "",
        line(("  " + header[0], *header[1:])),
        *(line(row) for row in rows),
        "",
        "Key insights:",
        *(f"  - {message}" for message in insight_messages(inputs, result)),
    ]

    return "\n".join(lines)
