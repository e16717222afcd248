# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from enum import Enum

from ._errors import UnknownHardwareError


class HardwarePlatform(str, Enum):
    """Hardware platforms with a known elementary gate time."""

    SUPERCONDUCTING = "superconducting"
    ION = "ion"
    PHOTONIC = "photonic"
    NEUTRAL = "neutral"

    def __str__(self) -> str:
        return self.value


# Elementary gate time in seconds
HARDWARE_GATE_TIMES: dict[str, float] = {
    HardwarePlatform.SUPERCONDUCTING.value: 50e-9,
    HardwarePlatform.ION.value: 5e-6,
    HardwarePlatform.PHOTONIC.value: 1e-9,
    HardwarePlatform.NEUTRAL.value: 2e-6,
}

HARDWARE_DISPLAY_NAMES: dict[str, str] = {
    HardwarePlatform.SUPERCONDUCTING.value: "Superconducting",
    HardwarePlatform.ION.value: "Trapped ion",
    HardwarePlatform.PHOTONIC.value: "Photonic",
    HardwarePlatform.NEUTRAL.value: "Neutral atom",
}


def _key(platform) -> str:
    if isinstance(platform, HardwarePlatform):
        return platform.value
    return platform


def gate_time(platform) -> float:
    """
    Returns the elementary gate time in seconds for a hardware platform.

    :param platform: Platform identifier, either a string such as
        ``"superconducting"`` or a :class:`HardwarePlatform` member
    :raises UnknownHardwareError: If the platform is not in the timing table
    """

    try:
        return HARDWARE_GATE_TIMES[_key(platform)]
    except (KeyError, TypeError):
        raise UnknownHardwareError(platform, HARDWARE_GATE_TIMES) from None


def display_name(platform) -> str:
    key = _key(platform)
    return HARDWARE_DISPLAY_NAMES.get(key, str(key).capitalize())
