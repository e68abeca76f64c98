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
"""In-memory tables of discovered beans, controllers, routes and annotations."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from flygen.kernel.exceptions import (
    DuplicateDeclarationError,
    RegistryFinalizedError,
    UnexportedHandlerError,
)
from flygen.scan.annotations import BasePathAnnotation, GenericAnnotation, RouteAnnotation, parse_comment
from flygen.scan.classifier import Classification
from flygen.scan.paths import compose, controller_base_path, normalize_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructMeta:
    """A registrable class and where it can be imported from.

    An empty ``import_path`` means the class lives beside the generated
    module and is referenced without an import.
    """

    name: str
    package: str = ""
    import_path: str = ""
    source: Path | None = field(default=None, compare=False)


@dataclass(frozen=True)
class RouteInfo:
    """One HTTP verb + path + handler method association."""

    method_name: str
    http_verb: str
    path: str


@dataclass(frozen=True)
class ControllerInfo:
    """Base path and routes of one controller, routes in declaration order."""

    base_path: str
    routes: tuple[RouteInfo, ...] = ()


@dataclass(frozen=True)
class RegistrySnapshot:
    """Read-only view of a finalized registry, ordered by name and path."""

    controllers: Mapping[str, ControllerInfo]
    beans: Mapping[str, StructMeta]
    annotations: Mapping[str, Mapping[str, str]]

    @property
    def is_empty(self) -> bool:
        return not self.beans

    def iter_routes(self) -> Iterator[tuple[str, RouteInfo]]:
        """Yield ``(controller name, route)`` pairs in emission order."""
        for name, info in self.controllers.items():
            for route in info.routes:
                yield name, route


def is_exported(name: str) -> bool:
    """Whether a method name is publicly visible (no leading underscore)."""
    return bool(name) and not name.startswith("_")


class Registry:
    """Collects scan results for a single generator run.

    Mutated only by the scanning pass; :meth:`finalize` hands an immutable
    snapshot to the emitters and locks the registry.
    """

    def __init__(self, context: str = "/") -> None:
        self._context = normalize_context(context)
        self._controllers: dict[str, ControllerInfo] = {}
        self._beans: dict[str, StructMeta] = {}
        self._annotations: dict[str, dict[str, str]] = {}
        self._finalized = False

    def register_struct(
        self,
        meta: StructMeta,
        classification: Classification,
        comment_lines: Iterable[str] = (),
    ) -> None:
        """Record a classified class in the bean table and, for controllers, the controller table.

        Raises:
            DuplicateDeclarationError: A class with the same name is already registered.
        """
        self._check_open("register_struct")
        if not classification.is_bean:
            return

        previous = self._beans.get(meta.name)
        if previous is not None:
            raise DuplicateDeclarationError(meta.name, meta.source, previous.source)

        self._beans[meta.name] = meta
        if classification.is_controller:
            declared = _first_base_path(comment_lines)
            base_path = controller_base_path(self._context, declared)
            self._controllers[meta.name] = ControllerInfo(base_path=base_path)
            logger.debug("Registered controller %s (base path %s)", meta.name, base_path)
        else:
            logger.debug("Registered bean %s", meta.name)

    def register_method(
        self,
        owner: str,
        method_name: str,
        comment_lines: Iterable[str],
        *,
        source: Path | None = None,
    ) -> tuple[RouteInfo, ...]:
        """Extract the routes and annotations a controller method declares.

        Methods of classes that are not registered controllers are skipped
        silently. Annotations attach to the first route path of the method;
        methods without routes drop them.

        Raises:
            UnexportedHandlerError: The method declares a route but is not public.
        """
        self._check_open("register_method")
        controller = self._controllers.get(owner)
        if controller is None:
            return ()

        routes: list[RouteInfo] = []
        annotations: dict[str, str] = {}
        for line in comment_lines:
            token = parse_comment(line)
            if isinstance(token, RouteAnnotation):
                path = compose(controller.base_path, None, token.path)
                routes.append(RouteInfo(method_name=method_name, http_verb=token.verb, path=path))
            elif isinstance(token, GenericAnnotation):
                annotations[token.key] = token.value

        if not routes:
            return ()
        if not is_exported(method_name):
            raise UnexportedHandlerError(owner, method_name, source or self._beans[owner].source)

        self._controllers[owner] = dataclasses.replace(controller, routes=controller.routes + tuple(routes))
        if annotations:
            self._annotations[routes[0].path] = annotations
        for route in routes:
            logger.debug("Registered route %s %s -> %s.%s", route.http_verb, route.path, owner, method_name)
        return tuple(routes)

    def finalize(self) -> RegistrySnapshot:
        """Lock the registry and return its snapshot, tables sorted by key."""
        self._finalized = True
        return RegistrySnapshot(
            controllers=MappingProxyType(dict(sorted(self._controllers.items()))),
            beans=MappingProxyType(dict(sorted(self._beans.items()))),
            annotations=MappingProxyType(
                {path: MappingProxyType(dict(sorted(values.items()))) for path, values in sorted(self._annotations.items())}
            ),
        )

    def _check_open(self, operation: str) -> None:
        if self._finalized:
            raise RegistryFinalizedError(operation)


def _first_base_path(comment_lines: Iterable[str]) -> str | None:
    for line in comment_lines:
        token = parse_comment(line)
        if isinstance(token, BasePathAnnotation):
            return token.path
    return None
