# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

from flygen.kernel.exceptions import FlygenException

FLYGEN_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "flygen": "bold magenta",
    "dim": "dim",
})

console = Console(theme=FLYGEN_THEME)


def print_banner() -> None:
    """Print the flygen banner."""
    from flygen import __version__

    console.print("[flygen]flygen[/flygen] [dim]— bean & route metadata generator[/dim]")
    console.print(f"  [dim]:: flygen :: (v{__version__})[/dim]\n")


def print_error(exc: FlygenException) -> None:
    """Print a fatal error with the context that locates it."""
    console.print(f"[error]{escape(exc.message)}[/error]")
    for key, value in exc.context.items():
        if value is not None:
            console.print(f"  [dim]{key}:[/dim] {escape(str(value))}")


def build_routes_table(rows: list[tuple[str, str, str, str, dict[str, str]]]) -> Table:
    """Table of ``(controller, verb, path, handler, annotations)`` rows."""
    table = Table(title="[flygen]Routes[/flygen]", border_style="dim")
    table.add_column("Controller", style="bold")
    table.add_column("Verb", style="info")
    table.add_column("Path")
    table.add_column("Handler")
    table.add_column("Annotations", style="dim")

    for controller, verb, path, handler, annotations in rows:
        rendered = ", ".join(f"{k} -> {v}" if v else k for k, v in annotations.items())
        table.add_row(escape(controller), verb, escape(path), escape(handler), escape(rendered))
    return table
