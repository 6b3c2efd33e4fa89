"""Shared pytest fixtures for stm32-makeinfo tests."""

import pytest

from stm32_makeinfo.models.compile import Language
from stm32_makeinfo.models.extension import ExtensionConfiguration
from stm32_makeinfo.models.makefile import CustomMakefileRule, MakeInfo
from stm32_makeinfo.models.toolchain import ToolChain


@pytest.fixture
def f407_make_info() -> MakeInfo:
    """Makefile facts of a CubeMX-generated STM32F407VG project."""
    return MakeInfo(
        c_defs=["USE_HAL_DRIVER", "STM32F407xx"],
        cxx_defs=["USE_HAL_DRIVER"],
        as_defs=["DEBUG"],
        c_includes=["Core/Inc", "Drivers/STM32F4xx_HAL_Driver/Inc"],
        c_sources=["Core/Src/main.c", "Core/Src/stm32f4xx_it.c"],
        cxx_sources=["Core/Src/app.cpp"],
        asm_sources=["startup_stm32f407xx.s"],
        asmm_sources=["Core/Src/vectors.S"],
        libdir=["Drivers/CMSIS/Lib"],
        libs=["c", "m", "nosys"],
        tools=ToolChain(make_path="/usr/bin/make"),
        target="arm-none-eabi",
        cpu="cortex-m4",
        fpu="fpv4-sp-d16",
        float_abi="hard",
        ldscript="STM32F407VG.ld",
        target_mcu="STM32F407VG",
        language=Language.CXX,
        optimization="O2",
        c_flags=["-O2"],
        assembly_flags=["-x", "assembler-with-cpp"],
        ld_flags=["-specs=nano.specs", "-Wl,--gc-sections"],
        cxx_flags=["-std=c++17"],
        custom_makefile_rules=[CustomMakefileRule(command="flash", rule="openocd -f x.cfg")],
        make_flags=["-j8"],
    )


@pytest.fixture
def user_config() -> ExtensionConfiguration:
    """A configuration a user has already edited by hand."""
    config = ExtensionConfiguration()
    config.source_files = ["Examples/blink.c", "lib/extra.c"]
    config.include_directories = ["lib/include"]
    config.cxx_definitions_file = "defs/cxx.yaml"
    config.suppress_makefile_warning = True
    config.make_flags = ["-s"]
    config.excludes = ['"**/third_party/**"']
    config.custom_makefile_rules = [CustomMakefileRule(command="size", rule="arm-none-eabi-size", depends_on="all")]
    return config
