"""Custom exceptions for stm32-makeinfo."""

from __future__ import annotations


class MakeInfoError(Exception):
    """Base exception for all stm32-makeinfo errors."""


class ConfigurationError(MakeInfoError):
    """Raised when persisted configuration or Makefile data is malformed."""


class ToolchainNotConfiguredError(MakeInfoError):
    """Raised when a build step needs a tool whose path is still unresolved."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Toolchain not configured: {', '.join(missing)} "
            f"{'is' if len(missing) == 1 else 'are'} unresolved. "
            "Set the path in the extension settings or run tool discovery."
        )
