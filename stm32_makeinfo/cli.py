"""CLI entry point: stm32-makeinfo.

Subcommands:
    stm32-makeinfo defaults                                  # Default configuration as JSON
    stm32-makeinfo import config.json makeinfo.json          # Import under the "relevant" policy
    stm32-makeinfo import config.json makeinfo.json --policy required -o merged.json
    stm32-makeinfo check-tools                               # Report unresolved tool paths
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import click

from stm32_makeinfo.core.logging import setup_logging
from stm32_makeinfo.exceptions import ConfigurationError
from stm32_makeinfo.models.extension import ExtensionConfiguration
from stm32_makeinfo.preflight import TOOL_FIELDS, missing_tools
from stm32_makeinfo.reconcile import ImportPolicy, merge
from stm32_makeinfo.schemas import config_from_dict, config_to_dict, make_info_from_dict
from stm32_makeinfo.settings import load_settings, toolchain_from_settings


def _read_json(path: str) -> dict[str, Any]:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        click.echo(f"Error: {path} is not valid UTF-8: {e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"Error: Cannot read {path}: {e}", err=True)
        sys.exit(1)
    except json.JSONDecodeError as e:
        click.echo(f"Error: Invalid JSON in {path}: {e}", err=True)
        sys.exit(1)
    if not isinstance(data, dict):
        click.echo(f"Error: {path} must contain a JSON object", err=True)
        sys.exit(1)
    return data


def _emit(data: dict[str, Any], output: str | None) -> None:
    text = json.dumps(data, indent=2) + "\n"
    if output:
        Path(output).write_text(text)
        click.echo(f"Configuration written to {output}", err=True)
    else:
        click.echo(text, nl=False)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """stm32-makeinfo: merge Makefile facts into the extension configuration."""
    setup_logging("DEBUG" if verbose else None)


@main.command("defaults")
@click.option("-o", "--output", default=None, help="Output file path (default: stdout)")
def defaults(output: str | None) -> None:
    """Print the configuration a user gets before any Makefile import."""
    _emit(config_to_dict(ExtensionConfiguration()), output)


@main.command("import")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("makeinfo_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--policy",
    type=click.Choice([p.value for p in ImportPolicy]),
    default=ImportPolicy.RELEVANT.value,
    show_default=True,
    help="relevant: flags, definitions, target and files; required: target identity only",
)
@click.option("-o", "--output", default=None, help="Output file path (default: stdout)")
def import_cmd(config_file: str, makeinfo_file: str, policy: str, output: str | None) -> None:
    """Import a parsed Makefile (MAKEINFO_FILE) into a configuration (CONFIG_FILE)."""
    try:
        config = config_from_dict(_read_json(config_file))
        make_info = make_info_from_dict(_read_json(makeinfo_file))
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    merged = merge(config, make_info, ImportPolicy(policy))
    _emit(config_to_dict(merged), output)


@main.command("check-tools")
def check_tools() -> None:
    """Report which tool paths are still unresolved in the environment settings."""
    tools = toolchain_from_settings(load_settings())
    missing = missing_tools(tools)
    for name in TOOL_FIELDS:
        value = getattr(tools, name)
        click.echo(f"  {name}: {value if name not in missing else 'not configured'}")
    if missing:
        click.echo(f"Error: toolchain not configured ({', '.join(missing)})", err=True)
        sys.exit(1)
