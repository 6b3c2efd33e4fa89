"""Hardware target descriptor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TargetInfo:
    """Identity of the MCU a project is built for.

    An empty string means "not determined yet". The six fields describe one
    hardware target and are always set together.
    """

    target: str = ""  # e.g. "arm-none-eabi"
    cpu: str = ""  # e.g. "cortex-m4"
    fpu: str = ""  # e.g. "fpv4-sp-d16"
    float_abi: str = ""  # "soft" | "softfp" | "hard"
    target_mcu: str = ""  # e.g. "STM32F407VG"
    ldscript: str = ""  # e.g. "STM32F407VGTx_FLASH.ld"
