"""Shared utility functions for projsync.

Provides C-source text helpers used by the generators, and Rich-based
console reporting used by the save pipeline and the CLI.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# C source helpers
# ---------------------------------------------------------------------------


def c_identifier(name: str) -> str:
    """Convert an arbitrary file name to a valid C identifier.

    * Replaces every character that is not alphanumeric or ``_`` with ``_``.
    * Prefixes a leading digit with ``_``.

    Examples::

        c_identifier("icon.png")     -> "icon_png"
        c_identifier("2x logo.svg")  -> "_2x_logo_svg"
    """
    result = re.sub(r"[^A-Za-z0-9_]", "_", name)
    if not result or result[0].isdigit():
        result = "_" + result
    return result


_C_ESCAPES: dict[str, str] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_c_string(text: str) -> str:
    """Escape *text* for use inside a double-quoted C string literal.

    Non-ASCII and control characters are emitted as UTF-8 octal escapes so
    the result is plain 7-bit ASCII.
    """
    out: list[str] = []
    for char in text:
        if char in _C_ESCAPES:
            out.append(_C_ESCAPES[char])
        elif " " <= char <= "~":
            out.append(char)
        else:
            out.extend(f"\\{byte:03o}" for byte in char.encode("utf-8"))
    return "".join(out)


def create_include_statement(target: str | Path, relative_to: str | Path | None = None) -> str:
    """Return an ``#include "..."`` directive for *target*.

    When *relative_to* is a folder the path is expressed relative to it,
    always with forward slashes.
    """
    if relative_to is not None:
        path = os.path.relpath(Path(target), Path(relative_to))
    else:
        path = str(target)
    return f'#include "{Path(path).as_posix()}"'


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_stage_header(name: str) -> None:
    """Print a full-width rule announcing a save stage."""
    console.print(Rule(f"[bold bright_cyan] {name} [/bold bright_cyan]", style="bright_cyan"))


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
