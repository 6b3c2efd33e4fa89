"""Compiler profile: language, optimization, flags and definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DefinitionsFile = str | list[str] | None


class Language(str, Enum):
    C = "C"
    CXX = "C++"


DEFAULT_OPTIMIZATION = "Og"


@dataclass
class CompileInfo:
    """Flags and preprocessor definitions for one project.

    Lists keep their order and duplicates; flag order changes compiler
    behaviour. A ``*_definitions_file`` reference takes precedence over the
    inline list for that language once the Makefile writer resolves it.
    """

    language: Language = Language.C
    optimization: str = DEFAULT_OPTIMIZATION
    c_flags: list[str] = field(default_factory=list)
    assembly_flags: list[str] = field(default_factory=list)
    cxx_flags: list[str] = field(default_factory=list)
    linker_flags: list[str] = field(default_factory=list)
    c_definitions: list[str] = field(default_factory=list)
    cxx_definitions: list[str] = field(default_factory=list)
    as_definitions: list[str] = field(default_factory=list)
    c_definitions_file: DefinitionsFile = None
    cxx_definitions_file: DefinitionsFile = None
    as_definitions_file: DefinitionsFile = None
