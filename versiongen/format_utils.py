"""
Output format utilities for versiongen.

Provides functions to format the output map as GitHub Actions step
outputs, JSON, JSON Lines and YAML.
"""

import json
from typing import Dict, Iterator, Optional

import yaml
from rich import box
from rich.console import Console
from rich.table import Table


FORMATS = ('github', 'json', 'jsonl', 'yaml', 'table')


def format_output(outputs: Dict[str, str], format: str) -> Iterator[str]:
    """
    Format the output map according to the specified format.

    Args:
        outputs: Output name -> string value
        format: Output format (github, json, jsonl, yaml)

    Yields:
        Formatted strings for output
    """
    if format == "github":
        yield from format_github_lines(outputs)
    elif format == "jsonl":
        yield json.dumps(outputs, ensure_ascii=False)
    elif format == "json":
        yield json.dumps(outputs, ensure_ascii=False, indent=2)
    elif format == "yaml":
        yield yaml.safe_dump(outputs, default_flow_style=False, allow_unicode=True, sort_keys=False)
    else:
        raise ValueError(f"Unknown format: {format}")


def format_github_lines(outputs: Dict[str, str]) -> Iterator[str]:
    """``key=value`` lines, the $GITHUB_OUTPUT file syntax."""
    for key, value in outputs.items():
        yield f"{key}={value}"


def format_set_output(outputs: Dict[str, str]) -> Iterator[str]:
    """Legacy ``::set-output`` workflow commands, for runners without $GITHUB_OUTPUT."""
    for key, value in outputs.items():
        yield f"::set-output name={key}::{value}"


def format_annotation(level: str, message: str) -> str:
    """
    A workflow annotation command.

    ``message`` may already carry properties (``file=Cargo.toml::text``).
    """
    if '::' in message:
        return f"::{level} {message}"
    return f"::{level}::{message}"


def write_github_output(outputs: Dict[str, str], path: str) -> None:
    """Append ``key=value`` lines to the step output file."""
    with open(path, 'a', encoding='utf-8') as f:
        for line in format_github_lines(outputs):
            f.write(line + '\n')


def render_outputs_table(outputs: Dict[str, str], console: Optional[Console] = None) -> None:
    """Render the output map as a two-column rich table."""
    console = console or Console()
    table = Table(
        title="Version Outputs",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta"
    )
    table.add_column("Output", style="cyan")
    table.add_column("Value")
    for key, value in outputs.items():
        table.add_row(key, value if value else "[dim]-[/dim]")
    console.print(table)
