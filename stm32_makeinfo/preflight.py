"""Toolchain checks run by a build step before it invokes any tool."""

from __future__ import annotations

import structlog

from stm32_makeinfo.exceptions import ToolchainNotConfiguredError
from stm32_makeinfo.models.toolchain import ToolChain, is_resolved

log = structlog.get_logger("stm32_makeinfo.preflight")

# Order in which missing tools are reported.
TOOL_FIELDS: tuple[str, ...] = ("arm_toolchain_path", "make_path", "openocd_path")


def missing_tools(tools: ToolChain) -> list[str]:
    """Names of the ToolChain fields that are still unresolved."""
    return [name for name in TOOL_FIELDS if not is_resolved(getattr(tools, name))]


def require_tool(tools: ToolChain, name: str) -> str:
    """Return the configured path of ``name`` or raise if it is unresolved.

    An empty string is returned as is: it was set by someone, and whether it
    points anywhere is for the caller's process launch to find out.
    """
    if name not in TOOL_FIELDS:
        raise ValueError(f"Unknown tool {name!r}, expected one of {TOOL_FIELDS}")
    value = getattr(tools, name)
    if not is_resolved(value):
        log.warning("preflight.tool_unresolved", tool=name)
        raise ToolchainNotConfiguredError([name])
    return value


def require_toolchain(tools: ToolChain) -> ToolChain:
    """Raise ToolchainNotConfiguredError listing every unresolved tool."""
    missing = missing_tools(tools)
    if missing:
        log.warning("preflight.toolchain_incomplete", missing=missing)
        raise ToolchainNotConfiguredError(missing)
    return tools
