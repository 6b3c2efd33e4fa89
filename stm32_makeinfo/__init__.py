"""stm32-makeinfo: reconcile a parsed STM32 Makefile with the IDE extension configuration."""

__version__ = "0.1.0"

from stm32_makeinfo.exceptions import (
    ConfigurationError,
    MakeInfoError,
    ToolchainNotConfiguredError,
)
from stm32_makeinfo.models import (
    UNRESOLVED,
    BuildFiles,
    CompileInfo,
    CustomMakefileRule,
    ExtensionConfiguration,
    Language,
    Libraries,
    MakeInfo,
    TargetInfo,
    ToolChain,
)
from stm32_makeinfo.reconcile import ImportPolicy, import_relevant, import_required, merge

__all__ = [
    "BuildFiles",
    "CompileInfo",
    "ConfigurationError",
    "CustomMakefileRule",
    "ExtensionConfiguration",
    "ImportPolicy",
    "Language",
    "Libraries",
    "MakeInfo",
    "MakeInfoError",
    "TargetInfo",
    "ToolChain",
    "ToolchainNotConfiguredError",
    "UNRESOLVED",
    "import_relevant",
    "import_required",
    "merge",
]
