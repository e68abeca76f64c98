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
"""Jinja2 rendering of the generated bean init module."""

from __future__ import annotations

from collections import defaultdict

from jinja2 import Environment, PackageLoader

from flygen.enums import BEAN_IMPORT_PATH, DEFAULT_BEAN_ALIAS, DEFAULT_MVC_ALIAS, MVC_IMPORT_PATH
from flygen.scan.registry import RegistrySnapshot

_TEMPLATE = "gp_bean_init.py.j2"


def _get_env() -> Environment:
    """Create the Jinja2 template environment."""
    env = Environment(
        loader=PackageLoader("flygen.emit", "templates"),
        keep_trailing_newline=True,
        lstrip_blocks=True,
        trim_blocks=True,
    )
    env.filters["pyrepr"] = repr
    return env


def marker_import(module: str, alias: str) -> str:
    """Import statement binding a marker module to ``alias``.

    >>> marker_import("flyweb.ioc", "ioc")
    'from flyweb import ioc'
    """
    parent, _, leaf = module.rpartition(".")
    rename = f" as {alias}" if leaf != alias else ""
    if parent:
        return f"from {parent} import {leaf}{rename}"
    return f"import {leaf}{rename}"


def _bean_imports(snapshot: RegistrySnapshot) -> list[tuple[str, list[str]]]:
    """One ``(module, sorted names)`` pair per import path, modules sorted."""
    by_module: dict[str, list[str]] = defaultdict(list)
    for meta in snapshot.beans.values():
        if meta.import_path:
            by_module[meta.import_path].append(meta.name)
    return [(module, sorted(names)) for module, names in sorted(by_module.items())]


def _build_context(snapshot: RegistrySnapshot, bean_module: str, mvc_module: str) -> dict[str, object]:
    from flygen import __version__

    has_controllers = bool(snapshot.controllers)
    marker_imports = [marker_import(bean_module, DEFAULT_BEAN_ALIAS)]
    if has_controllers:
        marker_imports.append(marker_import(mvc_module, DEFAULT_MVC_ALIAS))

    annotations = None
    if has_controllers:
        annotations = [(path, list(values.items())) for path, values in snapshot.annotations.items()]

    return {
        "version": __version__,
        "marker_imports": sorted(marker_imports),
        "bean_imports": _bean_imports(snapshot),
        "beans": list(snapshot.beans),
        "bean_alias": DEFAULT_BEAN_ALIAS,
        "mvc_alias": DEFAULT_MVC_ALIAS,
        "annotations": annotations,
    }


def render_init_module(
    snapshot: RegistrySnapshot,
    bean_module: str = BEAN_IMPORT_PATH,
    mvc_module: str = MVC_IMPORT_PATH,
) -> str:
    """Render the init module that registers every bean and the route annotations.

    The output depends only on the snapshot and the marker modules, so
    identical scans render identical bytes.
    """
    context = _build_context(snapshot, bean_module, mvc_module)
    return _get_env().get_template(_TEMPLATE).render(context)
