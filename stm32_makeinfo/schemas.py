"""Persisted form of the models, using the IDE's camelCase keys.

The extension stores its configuration and hands over parsed Makefiles as
JSON-like documents. Keys missing from a document keep the dataclass
defaults. Tool paths use ``false`` for "unresolved".
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from stm32_makeinfo.exceptions import ConfigurationError
from stm32_makeinfo.models.compile import Language
from stm32_makeinfo.models.extension import ExtensionConfiguration
from stm32_makeinfo.models.makefile import CustomMakefileRule, MakeInfo
from stm32_makeinfo.models.toolchain import UNRESOLVED, ToolChain, ToolPath, is_resolved


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CustomMakefileRuleSchema(_CamelModel):
    command: str
    rule: str
    depends_on: str | None = None


class ToolChainSchema(_CamelModel):
    openocd_path: str | bool = Field(False, alias="openOCDPath")
    make_path: str | bool = False
    arm_toolchain_path: str | bool = False


class MakeInfoSchema(_CamelModel):
    c_defs: list[str] = []
    cxx_defs: list[str] = []
    as_defs: list[str] = []
    c_includes: list[str] = []
    c_sources: list[str] = []
    cxx_sources: list[str] = []
    asm_sources: list[str] = []
    asmm_sources: list[str] = []
    libdir: list[str] = []
    libs: list[str] = []
    tools: ToolChainSchema = ToolChainSchema()
    target: str = ""
    cpu: str = ""
    fpu: str = ""
    float_abi: str = ""
    ldscript: str = ""
    target_mcu: str = Field("", alias="targetMCU")
    mcu: str = ""
    language: Language = Language.C
    optimization: str = "Og"
    c_flags: list[str] = []
    assembly_flags: list[str] = []
    ld_flags: list[str] = []
    cxx_flags: list[str] = []
    custom_makefile_rules: list[CustomMakefileRuleSchema] | None = None
    make_flags: list[str] = []


class ExtensionConfigSchema(_CamelModel):
    excludes: list[str] = []
    c_definitions: list[str] = []
    cxx_definitions: list[str] = []
    as_definitions: list[str] = []
    c_definitions_file: str | list[str] | None = None
    cxx_definitions_file: str | list[str] | None = None
    as_definitions_file: str | list[str] | None = None
    include_directories: list[str] = []
    target: str = ""
    cpu: str = ""
    fpu: str = ""
    float_abi: str = ""
    ldscript: str = ""
    target_mcu: str = Field("", alias="targetMCU")
    language: Language = Language.C
    optimization: str = "Og"
    linker_flags: list[str] = []
    c_flags: list[str] = []
    assembly_flags: list[str] = []
    cxx_flags: list[str] = []
    source_files: list[str] = []
    libraries: list[str] = []
    library_directories: list[str] = []
    suppress_makefile_warning: bool = False
    custom_makefile_rules: list[CustomMakefileRuleSchema] | None = None
    make_flags: list[str] = []


def _validate(schema: type[BaseModel], data: Any, what: str) -> Any:
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid {what}: {e}") from e


def _explicit_fields(schema: BaseModel) -> dict[str, Any]:
    """Fields present in the source document, so absent ones keep dataclass defaults."""
    return {name: getattr(schema, name) for name in schema.model_fields_set}


def _rules_from_schema(
    rules: list[CustomMakefileRuleSchema] | None,
) -> list[CustomMakefileRule] | None:
    if rules is None:
        return None
    return [CustomMakefileRule(command=r.command, rule=r.rule, depends_on=r.depends_on) for r in rules]


def _tool_path(value: str | bool) -> ToolPath:
    # Anything but a string means "not configured".
    return value if isinstance(value, str) else UNRESOLVED


def _dump(schema: BaseModel) -> dict[str, Any]:
    data = schema.model_dump(by_alias=True, mode="json")
    # dependsOn is optional in the extension's format: leave it out rather than write null.
    for rule in data.get("customMakefileRules") or []:
        if rule.get("dependsOn") is None:
            del rule["dependsOn"]
    return data


def config_from_dict(data: dict[str, Any]) -> ExtensionConfiguration:
    """Build an ExtensionConfiguration from its persisted camelCase form."""
    schema = _validate(ExtensionConfigSchema, data, "extension configuration")
    values = _explicit_fields(schema)
    if "custom_makefile_rules" in values:
        values["custom_makefile_rules"] = _rules_from_schema(values["custom_makefile_rules"])
    return ExtensionConfiguration(**values)


def config_to_dict(config: ExtensionConfiguration) -> dict[str, Any]:
    return _dump(ExtensionConfigSchema(**dataclasses.asdict(config)))


def make_info_from_dict(data: dict[str, Any]) -> MakeInfo:
    """Build a MakeInfo from the document the Makefile parser produced."""
    schema = _validate(MakeInfoSchema, data, "Makefile info")
    values = _explicit_fields(schema)
    if "custom_makefile_rules" in values:
        values["custom_makefile_rules"] = _rules_from_schema(values["custom_makefile_rules"])
    if "tools" in values:
        tools: ToolChainSchema = values["tools"]
        values["tools"] = ToolChain(
            openocd_path=_tool_path(tools.openocd_path),
            make_path=_tool_path(tools.make_path),
            arm_toolchain_path=_tool_path(tools.arm_toolchain_path),
        )
    return MakeInfo(**values)


def make_info_to_dict(make_info: MakeInfo) -> dict[str, Any]:
    values = dataclasses.asdict(make_info)
    values["tools"] = {
        name: value if is_resolved(value) else False
        for name, value in values["tools"].items()
    }
    return _dump(MakeInfoSchema(**values))
