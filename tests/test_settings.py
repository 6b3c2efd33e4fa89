"""Tests for environment settings and the ToolChain built from them."""

from __future__ import annotations

import os
from unittest.mock import patch

from stm32_makeinfo.models.toolchain import UNRESOLVED
from stm32_makeinfo.settings import (
    DEFAULT_OPENOCD_INTERFACE,
    Stm32Settings,
    load_settings,
    toolchain_from_settings,
)

_ENV_KEYS = (
    "STM32_ARM_TOOLCHAIN_PATH",
    "STM32_OPENOCD_PATH",
    "STM32_MAKE_PATH",
    "STM32_OPENOCD_INTERFACE",
)


def _clear_env() -> None:
    for key in _ENV_KEYS:
        os.environ.pop(key, None)


class TestLoadSettings:
    def test_defaults_without_env(self):
        with patch.dict(os.environ, {}, clear=False):
            _clear_env()
            settings = load_settings()
        assert settings.arm_toolchain_path == ""
        assert settings.make_path == ""
        assert settings.openocd_path == ""
        assert settings.openocd_interface == DEFAULT_OPENOCD_INTERFACE

    def test_reads_env(self):
        env = {
            "STM32_ARM_TOOLCHAIN_PATH": "/opt/gcc-arm-none-eabi/bin",
            "STM32_OPENOCD_PATH": "/usr/bin/openocd",
            "STM32_MAKE_PATH": "/usr/bin/make",
            "STM32_OPENOCD_INTERFACE": "stlink-v2-1.cfg",
        }
        with patch.dict(os.environ, env):
            settings = load_settings()
        assert settings.arm_toolchain_path == "/opt/gcc-arm-none-eabi/bin"
        assert settings.openocd_path == "/usr/bin/openocd"
        assert settings.make_path == "/usr/bin/make"
        assert settings.openocd_interface == "stlink-v2-1.cfg"

    def test_strips_whitespace(self):
        with patch.dict(os.environ, {"STM32_MAKE_PATH": "  /usr/bin/make \n"}):
            assert load_settings().make_path == "/usr/bin/make"

    def test_accepts_extension_keys(self):
        settings = Stm32Settings.model_validate(
            {"armToolchainPath": "/opt/arm", "openOCDPath": "openocd", "openOCDInterface": "jlink.cfg"}
        )
        assert settings.arm_toolchain_path == "/opt/arm"
        assert settings.openocd_path == "openocd"
        assert settings.openocd_interface == "jlink.cfg"


class TestToolchainFromSettings:
    def test_blank_settings_unresolved(self):
        tools = toolchain_from_settings(Stm32Settings())
        assert tools.arm_toolchain_path is UNRESOLVED
        assert tools.make_path is UNRESOLVED
        assert tools.openocd_path is UNRESOLVED

    def test_set_paths_resolved(self):
        tools = toolchain_from_settings(Stm32Settings(make_path="/usr/bin/make", openocd_path="openocd"))
        assert tools.make_path == "/usr/bin/make"
        assert tools.openocd_path == "openocd"
        assert tools.arm_toolchain_path is UNRESOLVED
