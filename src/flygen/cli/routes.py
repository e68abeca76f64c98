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
"""'flygen routes' command: list discovered routes without writing artifacts."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape

from flygen.cli.console import build_routes_table, console, print_error
from flygen.cli.options import load_properties, scan_options
from flygen.emit.api_def import decode_api_def
from flygen.enums import API_DEF_ANNOTATIONS_KEY, API_DEF_CONTROLLERS_KEY, API_DEF_ROUTES_KEY
from flygen.generator import Generator
from flygen.kernel.exceptions import FlygenException


def _rows_from_api_def(data: dict) -> list[tuple[str, str, str, str, dict[str, str]]]:
    annotations = data.get(API_DEF_ANNOTATIONS_KEY) or {}
    rows = []
    for controller, info in (data.get(API_DEF_CONTROLLERS_KEY) or {}).items():
        for route in info.get(API_DEF_ROUTES_KEY) or []:
            path = route["APIPath"]
            rows.append((controller, route["Method"], path, route["Name"], annotations.get(path, {})))
    return rows


@click.command()
@scan_options
@click.option(
    "--from-def",
    "from_def",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read routes from an existing api definition instead of scanning.",
)
def routes_command(
    project_dir: Path,
    scan_pkg: str | None,
    scan_skip: str | None,
    context: str | None,
    profiles: tuple[str, ...],
    verbose: bool,
    from_def: Path | None,
) -> None:
    """Show every route the generator discovers."""
    try:
        if from_def is not None:
            rows = _rows_from_api_def(decode_api_def(from_def.read_text(encoding="utf-8")))
        else:
            properties = load_properties(project_dir, profiles, scan_pkg, scan_skip, context, verbose)
            snapshot, _files = Generator(properties, project_dir).scan()
            rows = [
                (name, route.http_verb, route.path, route.method_name, dict(snapshot.annotations.get(route.path, {})))
                for name, route in snapshot.iter_routes()
            ]
    except FlygenException as exc:
        print_error(exc)
        raise SystemExit(1) from None
    except (OSError, ValueError) as exc:
        console.print(f"[error]{escape(str(exc))}[/error]")
        raise SystemExit(1) from None

    if not rows:
        console.print("[dim]No routes found.[/dim]")
        return
    console.print(build_routes_table(rows))
