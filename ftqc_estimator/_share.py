# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from ._errors import InvalidInputError
from ._types import EstimationInput


# Query parameter -> EstimationInput field, in the order they are emitted
QUERY_FIELDS = {
    "qubits": "logical_qubits",
    "tgates": "t_gates",
    "clifford": "clifford_gates",
    "rotation": "rotation_gates",
    "measure": "measurements",
    "error": "target_error_rate",
    "hw": "hardware_platform",
}

# Links created before gate types other than T were tracked only carry these
REQUIRED_PARAMETERS = ("qubits", "tgates", "error", "hw")


def to_query_string(inputs: EstimationInput) -> str:
    """Encodes an estimation input as URL query parameters."""

    params = []
    for param, field_name in QUERY_FIELDS.items():
        value = getattr(inputs, field_name)
        if field_name == "target_error_rate":
            # repr() is the shortest string that parses back to the same float
            params.append((param, repr(float(value))))
        elif field_name == "hardware_platform":
            params.append((param, str(value)))
        else:
            params.append((param, str(int(value))))

    return urlencode(params)


def share_url(inputs: EstimationInput, base_url: str) -> str:
    """
    Builds a link that restores ``inputs`` when opened.  Any query string or
    fragment of ``base_url`` is replaced.
    """

    scheme, netloc, path, _, _ = urlsplit(base_url)
    return urlunsplit((scheme, netloc, path, to_query_string(inputs), ""))


def from_query_string(text: str) -> EstimationInput:
    """
    Decodes an estimation input from a query string, a query string with a
    leading ``?``, or a complete URL.

    Gate counts for Clifford gates, rotations and measurements default to 0
    when absent.  The returned input is not validated beyond parsing; pass
    it to :func:`estimate` for that.

    :raises InvalidInputError: If a required parameter is missing or a value
        cannot be parsed
    """

    query = urlsplit(text).query if "?" in text else text
    values = {key: items[0] for key, items in parse_qs(query).items()}

    missing = [param for param in REQUIRED_PARAMETERS if param not in values]
    if missing:
        raise InvalidInputError(
            f"Share link is missing parameters: {', '.join(missing)}"
        )

    kwargs = {}
    for param, field_name in QUERY_FIELDS.items():
        if param not in values:
            continue
        raw = values[param].strip()
        if field_name == "hardware_platform":
            kwargs[field_name] = raw
            continue
        try:
            kwargs[field_name] = (
                float(raw) if field_name == "target_error_rate" else int(raw)
            )
        except ValueError:
            raise InvalidInputError(
                f"Share link parameter {param!r} has invalid value {raw!r}"
            ) from None

    return EstimationInput(**kwargs)
