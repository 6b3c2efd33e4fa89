"""Reconcile a parsed Makefile into the extension configuration.

Two import policies exist:

    RELEVANT  overwrite what the Makefile determines (definitions, flags,
              libraries, target identity) and append its source files and
              include directories to what the user already has.
    REQUIRED  overwrite only the hardware target identity and optimization.

Both mutate the configuration in place. ``merge`` is the copying variant.
Callers must serialize imports against other edits of the same
configuration; neither import is atomic across its fields.
"""

from __future__ import annotations

import copy
from enum import Enum

import structlog

from stm32_makeinfo.models.extension import ExtensionConfiguration
from stm32_makeinfo.models.makefile import MakeInfo

log = structlog.get_logger("stm32_makeinfo.reconcile")


class ImportPolicy(str, Enum):
    RELEVANT = "relevant"
    REQUIRED = "required"


def import_relevant(config: ExtensionConfiguration, make_info: MakeInfo) -> None:
    """Copy the Makefile's build surface into ``config``.

    Overwritten: definitions, libraries, library directories, all flag lists
    and the six target fields. Appended: ``source_files`` gets the assembly,
    C and C++ sources (in that order), ``include_directories`` gets
    ``c_includes``. Appending is not idempotent: importing the same Makefile
    twice lists its sources twice.
    """
    config.c_definitions = list(make_info.c_defs)
    config.cxx_definitions = list(make_info.cxx_defs)
    config.as_definitions = list(make_info.as_defs)
    config.libraries = list(make_info.libs)
    config.target = make_info.target
    config.cpu = make_info.cpu
    config.fpu = make_info.fpu
    config.float_abi = make_info.float_abi
    config.ldscript = make_info.ldscript
    config.linker_flags = list(make_info.ld_flags)
    config.target_mcu = make_info.target_mcu
    config.c_flags = list(make_info.c_flags)
    config.assembly_flags = list(make_info.assembly_flags)
    config.cxx_flags = list(make_info.cxx_flags)
    config.library_directories = list(make_info.libdir)

    added_sources = [*make_info.asm_sources, *make_info.c_sources, *make_info.cxx_sources]
    config.source_files = config.source_files + added_sources
    config.include_directories = config.include_directories + list(make_info.c_includes)

    log.debug(
        "reconcile.import_relevant",
        target_mcu=config.target_mcu,
        sources_appended=len(added_sources),
        includes_appended=len(make_info.c_includes),
        source_files_total=len(config.source_files),
    )


def import_required(config: ExtensionConfiguration, make_info: MakeInfo) -> None:
    """Overwrite only the target identity and optimization level of ``config``."""
    config.cpu = make_info.cpu
    config.float_abi = make_info.float_abi
    config.fpu = make_info.fpu
    config.optimization = make_info.optimization
    config.ldscript = make_info.ldscript
    config.target_mcu = make_info.target_mcu
    config.target = make_info.target

    log.debug(
        "reconcile.import_required",
        target_mcu=config.target_mcu,
        cpu=config.cpu,
        optimization=config.optimization,
    )


_IMPORTERS = {
    ImportPolicy.RELEVANT: import_relevant,
    ImportPolicy.REQUIRED: import_required,
}


def merge(
    existing: ExtensionConfiguration,
    incoming: MakeInfo,
    policy: ImportPolicy,
) -> ExtensionConfiguration:
    """Return a copy of ``existing`` with ``incoming`` imported under ``policy``.

    ``existing`` is left untouched.
    """
    merged = copy.deepcopy(existing)
    _IMPORTERS[ImportPolicy(policy)](merged, incoming)
    return merged
