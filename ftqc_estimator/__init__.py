# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Physical resource estimation of fault-tolerant quantum algorithms.

Turns logical resource counts (logical qubits, T, Clifford, rotation and
measurement counts), a target error rate and a hardware platform into
physical qubit counts, runtimes and success probabilities for several QEC
schemes.

Example:

.. code-block:: python
    from ftqc_estimator import estimate, preset

    result = estimate(preset("vqe-small"))
    print(result.best.scheme_name, result.best.physical_qubits)
"""

from ._errors import EstimatorError, InvalidInputError, UnknownHardwareError
from ._estimator import (
    DEFAULT_CONSTANTS,
    EstimatorConstants,
    code_distance,
    derive_insights,
    estimate,
    logical_error_rate,
    rotation_t_count,
)
from ._format import (
    format_number,
    format_summary,
    format_time,
    insight_messages,
    timeline,
)
from ._hardware import HARDWARE_GATE_TIMES, HardwarePlatform, gate_time
from ._presets import PRESETS, preset
from ._report import render_html_report, write_report
from ._schemes import SCHEME_CATALOG, FeasibilityClass, SchemeDescriptor, scheme
from ._share import from_query_string, share_url, to_query_string
from ._sweep import SweepEntry, SweepTable, enumerate_inputs, sweep
from ._types import (
    CycleBreakdown,
    DominantGateType,
    EstimationInput,
    EstimationResult,
    FeasibilityTier,
    Insights,
    SchemeReport,
)

__version__ = "0.1.0"

__all__ = [
    "code_distance",
    "derive_insights",
    "enumerate_inputs",
    "estimate",
    "format_number",
    "format_summary",
    "format_time",
    "from_query_string",
    "gate_time",
    "insight_messages",
    "logical_error_rate",
    "preset",
    "render_html_report",
    "rotation_t_count",
    "scheme",
    "share_url",
    "sweep",
    "timeline",
    "to_query_string",
    "write_report",
    "CycleBreakdown",
    "DEFAULT_CONSTANTS",
    "DominantGateType",
    "EstimationInput",
    "EstimationResult",
    "EstimatorConstants",
    "EstimatorError",
    "FeasibilityClass",
    "FeasibilityTier",
    "HARDWARE_GATE_TIMES",
    "HardwarePlatform",
    "Insights",
    "InvalidInputError",
    "PRESETS",
    "SCHEME_CATALOG",
    "SchemeDescriptor",
    "SchemeReport",
    "SweepEntry",
    "SweepTable",
    "UnknownHardwareError",
]
