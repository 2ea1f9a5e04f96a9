"""Shared utility functions for the microfrontend toolkit.

Provides JSON I/O for package manifests and Rich-based console reporting.
Progress goes to stdout; usage text and errors go to stderr.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


async def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON object from *path*.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    file_path = Path(path)
    raw = await asyncio.to_thread(file_path.read_text, encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}")
    return data


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* the way npm writes ``package.json`` (2-space indent)."""
    return json.dumps(data, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, escape(str(value)))

    console.print(table)


def print_next_steps(steps: list[str], title: str = "Next steps:") -> None:
    """Print a numbered list of manual follow-up steps."""
    console.print()
    console.print(f"[bold]{title}[/bold]")
    for index, step in enumerate(steps, start=1):
        console.print(f"{index}. {step}", markup=False, highlight=False)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def print_warning(message: str) -> None:
    """Print a yellow warning message to stderr."""
    err_console.print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}", highlight=False)


def print_usage(usage: str, examples: list[str]) -> None:
    """Print usage text and examples to stderr."""
    err_console.print()
    err_console.print("Usage:")
    err_console.print(f"  {usage}", markup=False, highlight=False)
    err_console.print()
    err_console.print("Examples:")
    for example in examples:
        err_console.print(f"  {example}", markup=False, highlight=False)
