"""Data model of a parsed (or to-be-written) Makefile."""

from __future__ import annotations

from dataclasses import dataclass, field

from stm32_makeinfo.models.compile import DEFAULT_OPTIMIZATION, Language
from stm32_makeinfo.models.toolchain import ToolChain


@dataclass
class CustomMakefileRule:
    """A raw rule emitted verbatim by the Makefile writer. Never interpreted here."""

    command: str
    rule: str
    depends_on: str | None = None


@dataclass
class MakeInfo:
    """Facts derived from a generated Makefile.

    Definition and linker-flag names are shortened (``c_defs``, ``ld_flags``)
    to follow the Makefile variable names (``C_DEFS``, ``LDFLAGS``). Do not
    rename them to match :class:`ExtensionConfiguration`; the reconciler maps
    between the two.
    """

    # build files
    c_defs: list[str] = field(default_factory=list)
    cxx_defs: list[str] = field(default_factory=list)
    as_defs: list[str] = field(default_factory=list)
    c_includes: list[str] = field(default_factory=list)
    c_sources: list[str] = field(default_factory=list)
    cxx_sources: list[str] = field(default_factory=list)
    asm_sources: list[str] = field(default_factory=list)
    asmm_sources: list[str] = field(default_factory=list)  # preprocessed .S files
    libdir: list[str] = field(default_factory=list)
    libs: list[str] = field(default_factory=list)
    tools: ToolChain = field(default_factory=ToolChain)

    # target
    target: str = ""
    cpu: str = ""
    fpu: str = ""
    float_abi: str = ""
    ldscript: str = ""
    target_mcu: str = ""
    mcu: str = ""  # e.g. "STM32F407VGTx", carried for the writer only

    # compile
    language: Language = Language.C
    optimization: str = DEFAULT_OPTIMIZATION
    c_flags: list[str] = field(default_factory=list)
    assembly_flags: list[str] = field(default_factory=list)
    ld_flags: list[str] = field(default_factory=list)
    cxx_flags: list[str] = field(default_factory=list)

    custom_makefile_rules: list[CustomMakefileRule] | None = None
    make_flags: list[str] = field(default_factory=list)
