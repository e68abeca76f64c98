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
"""All-or-nothing writing of the generated artifacts."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from flygen.emit.api_def import encode_api_def
from flygen.emit.init_module import render_init_module
from flygen.enums import API_DEF_FILE, BEAN_IMPORT_PATH, BEAN_INIT_FILE, MVC_IMPORT_PATH
from flygen.scan.registry import RegistrySnapshot

logger = logging.getLogger(__name__)

_FILE_MODE = 0o644


def render_artifacts(
    snapshot: RegistrySnapshot,
    output_dir: Path,
    *,
    bean_module: str = BEAN_IMPORT_PATH,
    mvc_module: str = MVC_IMPORT_PATH,
) -> list[tuple[Path, str]]:
    """Render every artifact the snapshot calls for, without touching the disk.

    The init module needs at least one bean and the api definition at least
    one controller; an empty snapshot renders nothing.
    """
    rendered: list[tuple[Path, str]] = []
    if snapshot.beans:
        rendered.append((output_dir / BEAN_INIT_FILE, render_init_module(snapshot, bean_module, mvc_module)))
    if snapshot.controllers:
        rendered.append((output_dir / API_DEF_FILE, encode_api_def(snapshot)))
    return rendered


def write_artifacts(
    snapshot: RegistrySnapshot,
    output_dir: Path,
    *,
    bean_module: str = BEAN_IMPORT_PATH,
    mvc_module: str = MVC_IMPORT_PATH,
) -> list[Path]:
    """Render and write the artifacts, returning the written paths.

    Each artifact is staged in a temporary file beside its target and moved
    into place only after every artifact was written, so a failure leaves
    the previous artifacts untouched.
    """
    rendered = render_artifacts(snapshot, output_dir, bean_module=bean_module, mvc_module=mvc_module)
    staged: list[tuple[Path, Path]] = []
    try:
        for target, content in rendered:
            fd, tmp_name = tempfile.mkstemp(dir=output_dir, prefix=f".{target.name}.", suffix=".tmp")
            staged.append((Path(tmp_name), target))
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(content)
            os.chmod(tmp_name, _FILE_MODE)
        for tmp, target in staged:
            os.replace(tmp, target)
    except BaseException:
        for tmp, _target in staged:
            tmp.unlink(missing_ok=True)
        raise

    written = [target for target, _content in rendered]
    for target in written:
        logger.info("Wrote %s", target)
    return written
