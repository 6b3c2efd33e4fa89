"""Toolchain paths for a workspace."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


class Unresolved:
    """Marker for a tool path that no discovery or settings step has set yet."""

    _instance: Unresolved | None = None

    def __new__(cls) -> Unresolved:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED: Final = Unresolved()

ToolPath = str | Unresolved


def is_resolved(value: ToolPath) -> bool:
    """True when ``value`` is a path string (an empty string still counts)."""
    return isinstance(value, str)


@dataclass
class ToolChain:
    """Paths to the ARM GCC toolchain, the make binary and OpenOCD.

    Consumers must treat an unresolved path as "not configured"; see
    :mod:`stm32_makeinfo.preflight`.
    """

    openocd_path: ToolPath = UNRESOLVED
    make_path: ToolPath = UNRESOLVED
    arm_toolchain_path: ToolPath = UNRESOLVED
