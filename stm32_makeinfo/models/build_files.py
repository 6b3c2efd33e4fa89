"""Compilable inputs and link inputs of a project."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BuildFiles:
    """Sources, include paths and link inputs as listed in a Makefile."""

    c_includes: list[str] = field(default_factory=list)
    c_sources: list[str] = field(default_factory=list)
    cxx_sources: list[str] = field(default_factory=list)
    asm_sources: list[str] = field(default_factory=list)
    libs: list[str] = field(default_factory=list)  # names without "-l", e.g. "m"
    libdir: list[str] = field(default_factory=list)


@dataclass
class Libraries:
    libraries: list[str] = field(default_factory=list)
    library_directories: list[str] = field(default_factory=list)
