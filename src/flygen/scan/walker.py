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
"""Source tree traversal."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from flygen.enums import BEAN_INIT_FILE
from flygen.kernel.exceptions import ScanRootNotFoundError

_ALWAYS_SKIPPED_DIRS = frozenset({"__pycache__"})


def is_test_module(name: str) -> bool:
    return name == "conftest.py" or name.startswith("test_") or name.endswith("_test.py")


def resolve_scan_roots(project_dir: Path, scan_packages: Iterable[str]) -> list[Path]:
    """Resolve scan package names against the project directory.

    Raises:
        ScanRootNotFoundError: A scan package does not exist.
    """
    roots: list[Path] = []
    for package in scan_packages:
        root = (project_dir / package).resolve()
        if not root.is_dir():
            raise ScanRootNotFoundError(root)
        if root not in roots:
            roots.append(root)
    return roots


def iter_source_files(
    roots: Iterable[Path],
    skips: Iterable[str] = (),
    *,
    exclude: Iterable[str] = (BEAN_INIT_FILE,),
) -> Iterator[Path]:
    """Yield the Python source files under each root in sorted order.

    Hidden directories, ``__pycache__`` and directories named in ``skips``
    are pruned with their subtrees. Test modules and the file names in
    ``exclude`` (the generated artifacts) are never yielded. A file reachable
    from several roots is yielded once.
    """
    skipped = frozenset(skips) | _ALWAYS_SKIPPED_DIRS
    excluded = frozenset(exclude)
    seen: set[Path] = set()

    for root in roots:
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not d.startswith(".") and d not in skipped)
            for filename in sorted(filenames):
                if not filename.endswith(".py") or filename in excluded or is_test_module(filename):
                    continue
                path = Path(dirpath) / filename
                if path in seen:
                    continue
                seen.add(path)
                yield path
