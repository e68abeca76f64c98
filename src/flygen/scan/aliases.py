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
"""Per-file resolution of the local names bound to the marker modules."""

from __future__ import annotations

import ast
from dataclasses import dataclass

from flygen.enums import BEAN_IMPORT_PATH, MVC_IMPORT_PATH


@dataclass(frozen=True)
class ImportAliasSet:
    """Local qualifiers under which a file refers to the two marker modules.

    ``None`` means the file does not import that marker module.
    """

    bean_alias: str | None = None
    mvc_alias: str | None = None

    def __bool__(self) -> bool:
        return self.bean_alias is not None or self.mvc_alias is not None


def _bound_names(node: ast.stmt) -> list[tuple[str, str]]:
    """Return ``(imported module path, local qualifier)`` pairs for an import statement."""
    pairs: list[tuple[str, str]] = []
    if isinstance(node, ast.Import):
        for alias in node.names:
            # ``import a.b`` is referenced as ``a.b.Member``
            pairs.append((alias.name, alias.asname or alias.name))
    elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
        for alias in node.names:
            if alias.name == "*":
                continue
            pairs.append((f"{node.module}.{alias.name}", alias.asname or alias.name))
    return pairs


def resolve_aliases(
    module: ast.Module,
    bean_module: str = BEAN_IMPORT_PATH,
    mvc_module: str = MVC_IMPORT_PATH,
) -> ImportAliasSet:
    """Scan a module's top-level imports once and record the marker aliases.

    Only absolute imports at module level are considered. When a marker
    module is imported several times the last binding wins, matching
    Python's own name resolution.
    """
    bean_alias: str | None = None
    mvc_alias: str | None = None
    for node in module.body:
        for path, local in _bound_names(node):
            if path == bean_module:
                bean_alias = local
            elif path == mvc_module:
                mvc_alias = local
    return ImportAliasSet(bean_alias=bean_alias, mvc_alias=mvc_alias)
