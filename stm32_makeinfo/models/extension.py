"""User-facing configuration persisted by the IDE extension.

The defaults below are what a user sees before any Makefile exists, so any
change to them is a visible behaviour change and is pinned by tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stm32_makeinfo.models.compile import DEFAULT_OPTIMIZATION, DefinitionsFile, Language
from stm32_makeinfo.models.makefile import CustomMakefileRule, MakeInfo

# Quoted so they survive being written unescaped into the YAML config file.
DEFAULT_EXCLUDES: tuple[str, ...] = (
    '"**/Examples/**"',
    '"**/examples/**"',
    '"**/Example/**"',
    '"**/example/**"',
    '"**_template.*"',
)

# More flags live in the generated Makefile; these are the ones always wanted.
DEFAULT_C_FLAGS: tuple[str, ...] = ("-Wall", "-fdata-sections", "-ffunction-sections")
DEFAULT_ASSEMBLY_FLAGS: tuple[str, ...] = ("-Wall", "-fdata-sections", "-ffunction-sections")
# No RTTI or exceptions for smaller builds.
DEFAULT_CXX_FLAGS: tuple[str, ...] = ("-fno-rtti", "-fno-exceptions")
# Memory usage report after linking.
DEFAULT_LINKER_FLAGS: tuple[str, ...] = ("-Wl,--print-memory-usage",)
DEFAULT_LIBRARIES: tuple[str, ...] = ("c", "m")


@dataclass
class ExtensionConfiguration:
    excludes: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    c_definitions: list[str] = field(default_factory=list)
    cxx_definitions: list[str] = field(default_factory=list)
    as_definitions: list[str] = field(default_factory=list)
    c_definitions_file: DefinitionsFile = field(default_factory=list)
    cxx_definitions_file: DefinitionsFile = field(default_factory=list)
    as_definitions_file: DefinitionsFile = field(default_factory=list)
    include_directories: list[str] = field(default_factory=list)
    target: str = ""
    cpu: str = ""
    fpu: str = ""
    float_abi: str = ""
    ldscript: str = ""
    target_mcu: str = ""
    language: Language = Language.C
    optimization: str = DEFAULT_OPTIMIZATION
    linker_flags: list[str] = field(default_factory=lambda: list(DEFAULT_LINKER_FLAGS))
    c_flags: list[str] = field(default_factory=lambda: list(DEFAULT_C_FLAGS))
    assembly_flags: list[str] = field(default_factory=lambda: list(DEFAULT_ASSEMBLY_FLAGS))
    cxx_flags: list[str] = field(default_factory=lambda: list(DEFAULT_CXX_FLAGS))
    source_files: list[str] = field(default_factory=list)
    libraries: list[str] = field(default_factory=lambda: list(DEFAULT_LIBRARIES))
    library_directories: list[str] = field(default_factory=list)
    suppress_makefile_warning: bool = False
    custom_makefile_rules: list[CustomMakefileRule] | None = None
    make_flags: list[str] = field(default_factory=list)

    def import_relevant_info_from_makefile(self, make_info: MakeInfo) -> None:
        """Pull flags, definitions, target and file lists from a parsed Makefile."""
        from stm32_makeinfo.reconcile import import_relevant

        import_relevant(self, make_info)

    def import_required_info_from_makefile(self, make_info: MakeInfo) -> None:
        """Pull only the hardware target identity and optimization level."""
        from stm32_makeinfo.reconcile import import_required

        import_required(self, make_info)
