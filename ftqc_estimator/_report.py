# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

import logging
from datetime import datetime
from html import escape
from pathlib import Path
from typing import Optional, Union

from ._format import format_number, format_percent, format_time, insight_messages, timeline
from ._hardware import display_name
from ._schemes import scheme
from ._types import EstimationInput, EstimationResult


logger = logging.getLogger(__name__)

_STYLE = """
body { font-family: Arial, sans-serif; padding: 40px; color: #333; }
h1 { color: #1a1a1a; border-bottom: 3px solid #667eea; padding-bottom: 10px; }
h2 { color: #667eea; margin-top: 30px; }
.param-grid { display: grid; grid-template-columns: 200px 1fr; gap: 10px; margin: 20px 0; }
.param-label { font-weight: bold; }
table { width: 100%; border-collapse: collapse; margin: 20px 0; }
th, td { border: 1px solid #ddd; padding: 12px; text-align: left; }
th { background-color: #f5f5f5; }
tr.best { background-color: #f0f3ff; }
.highlight { background-color: #f0f3ff; padding: 15px; border-radius: 5px; margin: 20px 0; }
.footer { margin-top: 40px; padding-top: 20px; border-top: 1px solid #ddd; font-size: 12px; color: #666; }
"""


def render_html_report(
    inputs: EstimationInput,
    result: EstimationResult,
    *,
    generated_at: Optional[datetime] = None,
    title: str = "Quantum Resource Estimation Report",
) -> str:
    """
    Renders a standalone HTML report of an estimation, suitable for printing
    to PDF from a browser.

    :param inputs: The input the result was estimated from
    :param result: The estimation result
    :param generated_at: Timestamp shown in the footer (default: now)
    :param title: Document title
    """

    if generated_at is None:
        generated_at = datetime.now()

    best = result.best

    parameters = _grid(
        [
            ("Logical Qubits", format_number(inputs.logical_qubits)),
            ("T Gates", format_number(inputs.t_gates)),
            ("Clifford Gates", format_number(inputs.clifford_gates)),
            ("Rotation Gates", format_number(inputs.rotation_gates)),
            ("Measurements", format_number(inputs.measurements)),
            ("Target Error Rate", f"{inputs.target_error_rate * 100:.3f}%"),
            ("Hardware Platform", display_name(inputs.hardware_platform)),
        ]
    )

    recommended = _grid(
        [
            ("Best Scheme", best.scheme_name),
            ("Physical Qubits", format_number(best.physical_qubits)),
            ("Data Qubits", format_number(best.data_qubits)),
            ("T-Factory Qubits", format_number(best.t_factory_qubits)),
            ("Code Distance", str(best.code_distance)),
            ("Estimated Runtime", format_time(best.runtime_seconds)),
            ("Success Probability", format_percent(best.success_probability_percent)),
            ("Timeline", timeline(best.feasibility)),
        ],
        strong=True,
    )

    header = "".join(
        f"<th>{escape(name)}</th>"
        for name in (
            "Scheme",
            "Description",
            "Physical Qubits",
            "Factories",
            "Code Distance",
            "Code Cycles",
            "Runtime",
            "Success Rate",
            "Timeline",
        )
    )
    rows = "\n".join(
        ('<tr class="best">' if report is best else "<tr>")
        + f"<td><strong>{escape(report.scheme_name)}</strong></td>"
        + f"<td>{escape(scheme(report.scheme_name).description)}</td>"
        + f"<td>{format_number(report.physical_qubits)}</td>"
        + f"<td>{format_number(report.factory_count)}</td>"
        + f"<td>{report.code_distance}</td>"
        + f"<td>{format_number(report.total_code_cycles)}</td>"
        + f"<td>{escape(format_time(report.runtime_seconds))}</td>"
        + f"<td>{format_percent(report.success_probability_percent)}</td>"
        + f"<td>{escape(timeline(report.feasibility))}</td>"
        + "</tr>"
        for report in result.per_scheme
    )

    insights = "\n".join(
        f"<li>{escape(message)}</li>" for message in insight_messages(inputs, result)
    )

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>{escape(title)}</title>
<style>{_STYLE}</style>
</head>
<body>
<h1>{escape(title)}</h1>
<div class="section">
<h2>Algorithm Parameters</h2>
{parameters}
</div>
<div class="highlight">
<h2>Recommended Configuration</h2>
{recommended}
</div>
<div class="section">
<h2>All Error Correction Schemes Comparison</h2>
<table>
<thead><tr>{header}</tr></thead>
<tbody>
{rows}
</tbody>
</table>
</div>
<div class="section">
<h2>Key Insights</h2>
<ul>
{insights}
</ul>
</div>
<div class="footer">
<p>Report generated: {escape(generated_at.strftime("%Y-%m-%d %H:%M:%S"))}</p>
<p>Quantum Circuit Resource Estimator</p>
</div>
</body>
</html>
"""


def write_report(
    path: Union[str, Path],
    inputs: EstimationInput,
    result: EstimationResult,
    **kwargs,
) -> Path:
    """Writes the HTML report to ``path`` and returns the path."""

    path = Path(path)
    path.write_text(render_html_report(inputs, result, **kwargs), encoding="utf-8")
    logger.debug(f"Wrote estimation report to {path}")
    return path


def _grid(items: list[tuple[str, str]], *, strong: bool = False) -> str:
    cells = []
    for label, value in items:
        value = escape(value)
        if strong:
            value = f"<strong>{value}</strong>"
        cells.append(f'<div class="param-label">{escape(label)}:</div><div>{value}</div>')
    return '<div class="param-grid">\n' + "\n".join(cells) + "\n</div>"
