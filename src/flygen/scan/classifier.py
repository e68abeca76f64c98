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
"""Classify class declarations as beans or controllers from their base classes."""

from __future__ import annotations

import ast
import enum

from flygen.enums import BEAN_MEMBER, CONTROLLER_MEMBER
from flygen.scan.aliases import ImportAliasSet


class Classification(enum.Enum):
    """What a class declaration registers as. Every controller is also a bean."""

    NONE = "none"
    BEAN = "bean"
    CONTROLLER = "controller"

    @property
    def is_bean(self) -> bool:
        return self is not Classification.NONE

    @property
    def is_controller(self) -> bool:
        return self is Classification.CONTROLLER


def dotted_name(node: ast.expr) -> str | None:
    """Render ``a.b.c`` attribute chains; ``None`` for any other expression."""
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        prefix = dotted_name(node.value)
        return f"{prefix}.{node.attr}" if prefix is not None else None
    return None


def classify(node: ast.ClassDef, aliases: ImportAliasSet) -> Classification:
    """Inspect qualified base classes against the file's marker aliases.

    A ``<mvc alias>.Controller`` base wins immediately; a ``<ioc alias>.Bean``
    base marks a bean but scanning continues in case a controller base
    follows.
    """
    result = Classification.NONE
    if not aliases:
        return result

    for base in node.bases:
        if not isinstance(base, ast.Attribute):
            continue
        qualifier = dotted_name(base.value)
        if qualifier is None:
            continue
        if aliases.mvc_alias is not None and qualifier == aliases.mvc_alias and base.attr == CONTROLLER_MEMBER:
            return Classification.CONTROLLER
        if aliases.bean_alias is not None and qualifier == aliases.bean_alias and base.attr == BEAN_MEMBER:
            result = Classification.BEAN
    return result
