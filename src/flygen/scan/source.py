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
"""Per-file scanning: parse a module and feed its declarations to the registry."""

from __future__ import annotations

import ast
import io
import keyword
import logging
import tokenize
from pathlib import Path

from flygen.enums import BEAN_IMPORT_PATH, MVC_IMPORT_PATH
from flygen.kernel.exceptions import ImportPathResolutionError, SourceParseError
from flygen.scan.aliases import resolve_aliases
from flygen.scan.classifier import classify
from flygen.scan.registry import Registry, StructMeta

logger = logging.getLogger(__name__)

_FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


def comment_lines_by_lineno(source: str) -> dict[int, str]:
    """Map line numbers to their text for lines holding nothing but a comment."""
    comments: dict[int, str] = {}
    for tok in tokenize.generate_tokens(io.StringIO(source).readline):
        if tok.type == tokenize.COMMENT and not tok.line[: tok.start[1]].strip():
            comments[tok.start[0]] = tok.string
    return comments


def leading_comments(node: ast.ClassDef | _FunctionNode, comments: dict[int, str]) -> list[str]:
    """Contiguous comment lines directly above a declaration or its decorators, top to bottom."""
    first = min([node.lineno, *(d.lineno for d in node.decorator_list)])
    lines: list[str] = []
    lineno = first - 1
    while lineno in comments:
        lines.append(comments[lineno])
        lineno -= 1
    lines.reverse()
    return lines


def module_import_path(source: Path, root: Path) -> tuple[str, str]:
    """Return ``(import path, package)`` of a source file relative to the project root.

    Raises:
        ImportPathResolutionError: The file is outside the root or a path
            component is not a valid Python identifier.
    """
    try:
        relative = source.resolve().relative_to(root.resolve())
    except ValueError:
        raise ImportPathResolutionError(source, root, "file is outside the project root") from None

    parts = list(relative.with_suffix("").parts)
    is_package = parts[-1] == "__init__"
    if is_package:
        parts.pop()
    if not parts:
        raise ImportPathResolutionError(source, root, "the project root itself is not importable")

    for part in parts:
        if not part.isidentifier() or keyword.iskeyword(part):
            raise ImportPathResolutionError(source, root, f"'{part}' is not a valid module name")

    import_path = ".".join(parts)
    package = import_path if is_package else ".".join(parts[:-1])
    return import_path, package


def scan_file(
    path: Path,
    registry: Registry,
    *,
    root: Path,
    bean_module: str = BEAN_IMPORT_PATH,
    mvc_module: str = MVC_IMPORT_PATH,
) -> int:
    """Scan one source file into the registry.

    Returns the number of classes registered. Files that import neither
    marker module are skipped without inspecting their declarations.

    Raises:
        SourceParseError: The file cannot be decoded or is not valid Python.
        OSError: The file cannot be read.
    """
    try:
        with tokenize.open(path) as f:
            source = f.read()
        module = ast.parse(source, filename=str(path))
    except SyntaxError as exc:
        raise SourceParseError(path, exc.msg, exc.lineno) from exc
    except UnicodeDecodeError as exc:
        raise SourceParseError(path, f"cannot decode source: {exc.reason}") from exc

    aliases = resolve_aliases(module, bean_module, mvc_module)
    if not aliases:
        logger.debug("Skipping %s: no marker import", path)
        return 0

    comments = comment_lines_by_lineno(source)
    registered = 0
    for node in module.body:
        if not isinstance(node, ast.ClassDef):
            continue
        classification = classify(node, aliases)
        if not classification.is_bean:
            continue

        import_path, package = module_import_path(path, root)
        meta = StructMeta(name=node.name, package=package, import_path=import_path, source=path)
        registry.register_struct(meta, classification, leading_comments(node, comments))
        registered += 1

        for member in node.body:
            if isinstance(member, (ast.FunctionDef, ast.AsyncFunctionDef)):
                lines = leading_comments(member, comments)
                if lines:
                    registry.register_method(node.name, member.name, lines, source=path)
    return registered
