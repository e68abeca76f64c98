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
"""'flygen generate' command: scan the project and write the generated artifacts."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from flygen.cli.console import console, print_error
from flygen.cli.options import load_properties, scan_options
from flygen.generator import Generator
from flygen.kernel.exceptions import FlygenException


@click.command()
@scan_options
@click.option("--dry-run", is_flag=True, help="Scan and report without writing any file.")
def generate_command(
    project_dir: Path,
    scan_pkg: str | None,
    scan_skip: str | None,
    context: str | None,
    profiles: tuple[str, ...],
    verbose: bool,
    dry_run: bool,
) -> None:
    """Generate the bean init module and the api definition."""
    try:
        properties = load_properties(project_dir, profiles, scan_pkg, scan_skip, context, verbose)
        result = Generator(properties, project_dir).generate(dry_run=dry_run)
    except FlygenException as exc:
        print_error(exc)
        raise SystemExit(1) from None
    except OSError as exc:
        console.print(f"[error]I/O failure: {escape(str(exc))}[/error]")
        raise SystemExit(1) from None

    snapshot = result.snapshot
    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_row("[info]Files scanned[/info]", str(result.files_scanned))
    summary.add_row("[info]Beans[/info]", str(len(snapshot.beans)))
    summary.add_row("[info]Controllers[/info]", str(len(snapshot.controllers)))
    summary.add_row("[info]Routes[/info]", str(sum(len(c.routes) for c in snapshot.controllers.values())))
    summary.add_row("[info]Context[/info]", properties.context)
    console.print(summary)

    if dry_run:
        console.print("\n  [warning]Dry run: nothing written.[/warning]")
    elif not result.written:
        console.print("\n  [dim]No beans or controllers found; nothing to generate.[/dim]")
    else:
        console.print()
        for path in result.written:
            console.print(f"  [success]✓[/success] {path}")
