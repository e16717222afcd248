# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from ._hardware import HardwarePlatform
from ._types import EstimationInput


PRESETS: dict[str, EstimationInput] = {
    # Factoring a 2048-bit RSA modulus
    "shor-2048": EstimationInput(
        logical_qubits=4096,
        t_gates=2_000_000_000,
        clifford_gates=6_000_000_000,
        rotation_gates=0,
        measurements=20_000_000,
        target_error_rate=0.0001,
        hardware_platform=HardwarePlatform.SUPERCONDUCTING.value,
    ),
    # Grover search over a 256-bit key space
    "grover-256": EstimationInput(
        logical_qubits=256,
        t_gates=500_000_000,
        clifford_gates=1_000_000_000,
        rotation_gates=0,
        measurements=256,
        target_error_rate=0.001,
        hardware_platform=HardwarePlatform.SUPERCONDUCTING.value,
    ),
    # Trotterized Hamiltonian simulation of a 50-site model
    "quantum-sim": EstimationInput(
        logical_qubits=50,
        t_gates=10_000_000,
        clifford_gates=50_000_000,
        rotation_gates=1_000_000,
        measurements=50_000,
        target_error_rate=0.001,
        hardware_platform=HardwarePlatform.SUPERCONDUCTING.value,
    ),
    "vqe-small": EstimationInput(
        logical_qubits=20,
        t_gates=50_000,
        clifford_gates=200_000,
        rotation_gates=20_000,
        measurements=10_000,
        target_error_rate=0.01,
        hardware_platform=HardwarePlatform.SUPERCONDUCTING.value,
    ),
}


def preset(name: str, **overrides) -> EstimationInput:
    """
    Returns the input of a named algorithm preset.

    :param name: One of the keys of :data:`PRESETS`
    :param overrides: Fields of :class:`EstimationInput` to replace, e.g.,
        ``hardware_platform="ion"``
    """

    try:
        inputs = PRESETS[name]
    except KeyError:
        raise KeyError(
            f"Unknown preset {name!r} (available: {', '.join(PRESETS)})"
        ) from None

    return inputs.replace(**overrides) if overrides else inputs
