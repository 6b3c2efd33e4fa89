"""Extension settings: where the tools live and which debug probe to use."""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stm32_makeinfo.models.toolchain import UNRESOLVED, ToolChain, ToolPath

_ENV_ARM_TOOLCHAIN_PATH = "STM32_ARM_TOOLCHAIN_PATH"
_ENV_OPENOCD_PATH = "STM32_OPENOCD_PATH"
_ENV_MAKE_PATH = "STM32_MAKE_PATH"
_ENV_OPENOCD_INTERFACE = "STM32_OPENOCD_INTERFACE"

DEFAULT_OPENOCD_INTERFACE = "stlink.cfg"


class Stm32Settings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    arm_toolchain_path: str = Field("", alias="armToolchainPath")
    openocd_path: str = Field("", alias="openOCDPath")
    make_path: str = Field("", alias="makePath")
    openocd_interface: str = Field(DEFAULT_OPENOCD_INTERFACE, alias="openOCDInterface")

    @field_validator(
        "arm_toolchain_path", "openocd_path", "make_path", "openocd_interface", mode="before"
    )
    @classmethod
    def _strip_whitespace(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v


def load_settings() -> Stm32Settings:
    """Read settings from the environment; unset variables keep their defaults."""
    values = {
        "arm_toolchain_path": os.environ.get(_ENV_ARM_TOOLCHAIN_PATH),
        "openocd_path": os.environ.get(_ENV_OPENOCD_PATH),
        "make_path": os.environ.get(_ENV_MAKE_PATH),
        "openocd_interface": os.environ.get(_ENV_OPENOCD_INTERFACE),
    }
    return Stm32Settings(**{k: v for k, v in values.items() if v is not None})


def _as_tool_path(value: str) -> ToolPath:
    return value if value else UNRESOLVED


def toolchain_from_settings(settings: Stm32Settings) -> ToolChain:
    """Build a ToolChain; a blank setting means the tool still has to be found."""
    return ToolChain(
        openocd_path=_as_tool_path(settings.openocd_path),
        make_path=_as_tool_path(settings.make_path),
        arm_toolchain_path=_as_tool_path(settings.arm_toolchain_path),
    )
