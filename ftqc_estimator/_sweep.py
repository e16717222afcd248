# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from itertools import product
from typing import Generator

from ._estimator import DEFAULT_CONSTANTS, EstimatorConstants, estimate
from ._types import EstimationInput, EstimationResult


logger = logging.getLogger(__name__)


def enumerate_inputs(
    base: EstimationInput, **domains
) -> Generator[EstimationInput, None, None]:
    """
    Yields variants of an estimation input.

    Each keyword argument names a field of :class:`EstimationInput`.  A list
    or tuple value is a domain that is enumerated, an Enum class is
    enumerated with all its members, and any other value replaces the field
    in every variant.  Variants are produced in the Cartesian product of all
    domains, in the order in which the domains are given.

    Example:

    .. code-block:: python
        enumerate_inputs(
            preset("vqe-small"),
            hardware_platform=HardwarePlatform,
            target_error_rate=[0.01, 0.001],
        )

    Raises:
        ValueError: If a keyword does not name a field of EstimationInput.
    """

    field_names = {f.name for f in fields(EstimationInput)}
    unknown = [name for name in domains if name not in field_names]
    if unknown:
        raise ValueError(f"Cannot enumerate unknown fields {unknown}.")

    names = []
    values = []
    fixed = {}

    for name, value in domains.items():
        if isinstance(value, type) and issubclass(value, Enum):
            names.append(name)
            values.append([member.value for member in value])
        elif isinstance(value, (list, tuple)):
            names.append(name)
            values.append(list(value))
        else:
            fixed[name] = value

    base = base.replace(**fixed) if fixed else base

    for instance_values in product(*values):
        yield base.replace(**dict(zip(names, instance_values)))


@dataclass(frozen=True, slots=True)
class SweepEntry:
    inputs: EstimationInput
    result: EstimationResult


class SweepTable(list["SweepEntry"]):
    def best_by_platform(self) -> dict[str, SweepEntry]:
        """The entry with the fewest physical qubits for each platform."""

        best: dict[str, SweepEntry] = {}
        for entry in self:
            platform = str(entry.inputs.hardware_platform)
            current = best.get(platform)
            if (
                current is None
                or entry.result.best.physical_qubits
                < current.result.best.physical_qubits
            ):
                best[platform] = entry
        return best

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
                    **entry.inputs.to_dict(),
                    "scheme": report.scheme_name,
                    "physical_qubits": report.physical_qubits,
                    "code_distance": report.code_distance,
                    "runtime": pd.Timedelta(report.runtime_seconds, unit="s"),
                    "success_probability": report.success_probability_percent,
                    "best": report is entry.result.best,
                }
                for entry in self
                for report in entry.result.per_scheme
            ]
        )


def sweep(
    base: EstimationInput,
    *,
    constants: EstimatorConstants = DEFAULT_CONSTANTS,
    **domains,
) -> SweepTable:
    """
    Estimates every variant produced by :func:`enumerate_inputs` and
    collects the results in a table.
    """

    table = SweepTable()
    for inputs in enumerate_inputs(base, **domains):
        table.append(SweepEntry(inputs, estimate(inputs, constants=constants)))

    logger.debug(f"Estimated {len(table)} sweep variants")
    return table
