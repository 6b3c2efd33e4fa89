"""Data models shared by the Makefile parser, the writer and the reconciler."""

from stm32_makeinfo.models.build_files import BuildFiles, Libraries
from stm32_makeinfo.models.compile import CompileInfo, Language
from stm32_makeinfo.models.extension import ExtensionConfiguration
from stm32_makeinfo.models.makefile import CustomMakefileRule, MakeInfo
from stm32_makeinfo.models.target import TargetInfo
from stm32_makeinfo.models.toolchain import UNRESOLVED, ToolChain, Unresolved, is_resolved

__all__ = [
    "BuildFiles",
    "CompileInfo",
    "CustomMakefileRule",
    "ExtensionConfiguration",
    "Language",
    "Libraries",
    "MakeInfo",
    "TargetInfo",
    "ToolChain",
    "UNRESOLVED",
    "Unresolved",
    "is_resolved",
]
