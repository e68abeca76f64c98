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
"""Options and configuration loading shared by the scanning commands."""

from __future__ import annotations

import functools
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from flygen.core.config import Config
from flygen.core.properties import GeneratorProperties
from flygen.logging import StructlogAdapter


def scan_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options that describe what to scan."""

    @click.option(
        "--project-dir",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=".",
        help="Project root: scan packages resolve against it and artifacts are written to it.",
    )
    @click.option(
        "--scan-pkg",
        "scan_pkg",
        default=None,
        help="Comma-separated packages to scan (default '.', the whole project).",
    )
    @click.option(
        "--scan-skip",
        "scan_skip",
        default=None,
        help="Comma-separated directory names to skip, with their subdirectories (e.g. dto,vo,po).",
    )
    @click.option(
        "--context",
        default=None,
        help="Application context path prefixed to every route (default '/').",
    )
    @click.option(
        "--profile",
        "profiles",
        multiple=True,
        help="Configuration profile overlay (flygen-<profile>.yaml); repeatable.",
    )
    @click.option("-v", "--verbose", is_flag=True, help="Log every registered declaration.")
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return func(*args, **kwargs)

    return wrapper


def load_properties(
    project_dir: Path,
    profiles: tuple[str, ...],
    scan_pkg: str | None,
    scan_skip: str | None,
    context: str | None,
    verbose: bool = False,
) -> GeneratorProperties:
    """Merge configuration sources, configure logging and apply CLI overrides."""
    config = Config.from_sources(project_dir, active_profiles=list(profiles))
    StructlogAdapter().configure(config, verbose=verbose)
    return config.bind(
        GeneratorProperties,
        scan_packages=scan_pkg,
        scan_skips=scan_skip,
        context=context,
    )
