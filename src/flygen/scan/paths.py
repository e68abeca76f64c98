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
"""Route path composition with POSIX path-cleaning semantics."""

from __future__ import annotations

import posixpath


def clean_path(path: str) -> str:
    """Clean an absolute URL path.

    Collapses repeated separators, resolves ``.`` and ``..`` segments and drops
    any trailing slash. The result always starts with a single ``/``.
    """
    # normpath keeps a leading "//" as an implementation-defined root
    return posixpath.normpath("/" + path.lstrip("/"))


def join_paths(*parts: str) -> str:
    """Join path segments into one cleaned absolute path, ignoring empty parts."""
    return clean_path("/".join(part for part in parts if part))


def normalize_context(context: str | None) -> str:
    """Normalize the application context path; defaults to ``/``."""
    if not context:
        return "/"
    context = context.strip()
    if not context.startswith("/"):
        context = "/" + context
    return clean_path(context)


def controller_base_path(context: str, declared: str | None = None) -> str:
    """Base path of a controller: the context itself, or context joined with ``@BasePath``."""
    context = normalize_context(context)
    if declared is None:
        return context
    return join_paths(context, declared)


def compose(context: str, declared_base: str | None, method_path: str) -> str:
    """Compose the full route path of a handler method.

    ``compose("/api", "/users", "/all") == "/api/users/all"``
    """
    return join_paths(controller_base_path(context, declared_base), method_path)
