# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.


class EstimatorError(Exception):
    """Base class for all errors raised while estimating resources."""


class InvalidInputError(EstimatorError, ValueError):
    """
    Raised when the logical resource counts or the error target cannot be
    estimated, e.g., zero logical qubits, no gates at all, or an error rate
    outside of (0, 1).
    """


class UnknownHardwareError(EstimatorError, LookupError):
    """Raised when a hardware platform has no entry in the timing table."""

    def __init__(self, platform: object, known=()):
        self.platform = platform
        self.known = tuple(known)
        message = f"Unknown hardware platform {platform!r}"
        if self.known:
            message += f" (available: {', '.join(self.known)})"
        super().__init__(message)
