# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from ._errors import EstimatorError
from ._estimator import estimate
from ._format import format_number, format_summary, format_time
from ._hardware import HARDWARE_GATE_TIMES, HardwarePlatform, display_name
from ._presets import PRESETS
from ._report import write_report
from ._share import from_query_string, share_url
from ._sweep import sweep
from ._types import EstimationInput


logger = logging.getLogger(__name__)

# Command-line flag -> EstimationInput field
_FLAG_FIELDS = {
    "qubits": "logical_qubits",
    "t_gates": "t_gates",
    "clifford": "clifford_gates",
    "rotation": "rotation_gates",
    "measurements": "measurements",
    "error": "target_error_rate",
    "hardware": "hardware_platform",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ftqc-estimate",
        description="Estimate physical qubits and runtime of a fault-tolerant "
        "quantum algorithm under several QEC schemes.",
    )

    source = parser.add_argument_group("input")
    source.add_argument("--preset", choices=sorted(PRESETS), help="start from an algorithm preset")
    source.add_argument("--from-url", metavar="URL", help="start from a share link")
    source.add_argument("--qubits", type=int, help="number of logical qubits")
    source.add_argument("--t-gates", type=int, help="number of T gates")
    source.add_argument("--clifford", type=int, help="number of Clifford gates")
    source.add_argument("--rotation", type=int, help="number of arbitrary rotations")
    source.add_argument("--measurements", type=int, help="number of measurements")
    source.add_argument("--error", type=float, help="target error rate in (0, 1)")
    source.add_argument(
        "--hardware",
        help=f"hardware platform ({', '.join(HARDWARE_GATE_TIMES)})",
    )

    output = parser.add_argument_group("output")
    output.add_argument("--json", action="store_true", help="print JSON instead of a table")
    output.add_argument("--report", metavar="PATH", help="write an HTML report")
    output.add_argument("--share", metavar="BASE_URL", help="print a share link")
    output.add_argument(
        "--compare-hardware",
        action="store_true",
        help="estimate the input on every hardware platform",
    )
    output.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )

    return parser


def resolve_input(args: argparse.Namespace) -> Optional[EstimationInput]:
    """
    Layers the input sources: preset first, then the share link, then
    explicit flags.  Returns None if no source names the logical qubits.
    """

    values = {}
    if args.preset:
        values.update(PRESETS[args.preset].to_dict())
    if args.from_url:
        values.update(from_query_string(args.from_url).to_dict())
    for flag, field_name in _FLAG_FIELDS.items():
        value = getattr(args, flag)
        if value is not None:
            values[field_name] = value

    if "logical_qubits" not in values:
        return None
    return EstimationInput(**values)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        inputs = resolve_input(args)
        if inputs is None:
            parser.error("one of --preset, --from-url or --qubits is required")

        result = estimate(inputs)

        if args.json:
            print(
                json.dumps(
                    {"inputs": inputs.to_dict(), "result": result.to_dict()},
                    indent=2,
                )
            )
        else:
            print(format_summary(inputs, result))

        if args.compare_hardware:
            _print_hardware_comparison(inputs)

        if args.share:
            print(share_url(inputs, args.share))

        if args.report:
            try:
                path = write_report(args.report, inputs, result)
            except OSError as e:
                logger.debug("Writing report failed", exc_info=True)
                print(f"error: cannot write report: {e}", file=sys.stderr)
                return 1
            print(f"Report written to {path}", file=sys.stderr)
    except EstimatorError as e:
        logger.debug("Estimation failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    return 0


def _print_hardware_comparison(inputs: EstimationInput) -> None:
    table = sweep(inputs, hardware_platform=HardwarePlatform)

    print()
    print("Best scheme per hardware platform:")
    for platform, entry in table.best_by_platform().items():
        best = entry.result.best
        print(
            f"  {display_name(platform)}: {best.scheme_name}, "
            f"{format_number(best.physical_qubits)} physical qubits, "
            f"{format_time(best.runtime_seconds)}"
        )
