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
"""One generator run: full source scan followed by one emission pass."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from flygen.core.properties import GeneratorProperties
from flygen.emit.writer import write_artifacts
from flygen.enums import API_DEF_FILE, BEAN_INIT_FILE
from flygen.scan.registry import Registry, RegistrySnapshot
from flygen.scan.source import scan_file
from flygen.scan.walker import iter_source_files, resolve_scan_roots

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Outcome of a generator run."""

    snapshot: RegistrySnapshot
    files_scanned: int
    written: list[Path] = field(default_factory=list)


class Generator:
    """Scans a project and writes its bean init module and api definition.

    Args:
        properties: Validated generator settings.
        project_dir: Project root; scan packages resolve against it, import
            paths are computed relative to it and artifacts are written to it.
    """

    def __init__(self, properties: GeneratorProperties, project_dir: str | Path = ".") -> None:
        self.properties = properties
        self.project_dir = Path(project_dir).resolve()

    def scan(self) -> tuple[RegistrySnapshot, int]:
        """Scan every source file once; returns the finalized snapshot and the file count."""
        registry = Registry(self.properties.context)
        roots = resolve_scan_roots(self.project_dir, self.properties.scan_packages)
        files = 0
        for path in iter_source_files(roots, self.properties.scan_skips, exclude=(BEAN_INIT_FILE, API_DEF_FILE)):
            scan_file(
                path,
                registry,
                root=self.project_dir,
                bean_module=self.properties.bean_module,
                mvc_module=self.properties.mvc_module,
            )
            files += 1
        snapshot = registry.finalize()
        logger.info(
            "Scanned %d files: %d beans, %d controllers",
            files,
            len(snapshot.beans),
            len(snapshot.controllers),
        )
        return snapshot, files

    def generate(self, dry_run: bool = False) -> GenerationResult:
        """Scan and, unless ``dry_run``, write the artifacts.

        Any fatal error raised while scanning aborts before anything is written.
        """
        snapshot, files = self.scan()
        result = GenerationResult(snapshot=snapshot, files_scanned=files)
        if not dry_run:
            result.written = write_artifacts(
                snapshot,
                self.project_dir,
                bean_module=self.properties.bean_module,
                mvc_module=self.properties.mvc_module,
            )
        return result
