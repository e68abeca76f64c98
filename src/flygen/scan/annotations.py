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
"""Comment-line annotation lexer.

Recognizes three annotation shapes, tried in this order::

    # @BasePath("/users")          -> BasePathAnnotation
    # @GET(path="/all")            -> RouteAnnotation
    # @Auth -> admin               -> GenericAnnotation

Anything else is inert and yields ``None``.
"""

from __future__ import annotations

import string
from dataclasses import dataclass

from flygen.enums import HTTP_VERBS

_BASE_PATH_OPEN = '@BasePath("'
_ROUTE_PATH_OPEN = '(path="'
_CLOSE = '")'
_ARROW = "->"
_KEY_CHARS = frozenset(string.ascii_letters)


@dataclass(frozen=True)
class BasePathAnnotation:
    """Controller-level path prefix."""

    path: str


@dataclass(frozen=True)
class RouteAnnotation:
    """HTTP verb and path declared on a handler method."""

    verb: str
    path: str


@dataclass(frozen=True)
class GenericAnnotation:
    """Free-form ``@Key -> value`` extension attached to a route."""

    key: str
    value: str = ""


Annotation = BasePathAnnotation | RouteAnnotation | GenericAnnotation


def comment_text(line: str) -> str:
    """Strip the ``#`` marker and surrounding whitespace from a comment line."""
    text = line.strip()
    if text.startswith("#"):
        text = text[1:].strip()
    return text


def parse_comment(line: str) -> Annotation | None:
    """Parse one comment line into an annotation token, or ``None``."""
    text = comment_text(line)
    if not text.startswith("@"):
        return None
    return _match_base_path(text) or _match_route(text) or _match_generic(text)


def _match_base_path(text: str) -> BasePathAnnotation | None:
    if not (text.startswith(_BASE_PATH_OPEN) and text.endswith(_CLOSE)):
        return None
    path = text[len(_BASE_PATH_OPEN):-len(_CLOSE)]
    if not path.startswith("/"):
        return None
    return BasePathAnnotation(path)


def _match_route(text: str) -> RouteAnnotation | None:
    for verb in HTTP_VERBS:
        opener = f"@{verb}{_ROUTE_PATH_OPEN}"
        if not text.startswith(opener):
            continue
        rest = text[len(opener):]
        end = rest.find(_CLOSE)
        if end < 0:
            return None
        path = rest[:end]
        if not path.startswith("/"):
            return None
        return RouteAnnotation(verb, path)
    return None


def _match_generic(text: str) -> GenericAnnotation | None:
    end = 1
    while end < len(text) and text[end] in _KEY_CHARS:
        end += 1
    if end == 1:
        return None
    key = text[:end]
    rest = text[end:].lstrip()
    if rest.startswith(_ARROW):
        return GenericAnnotation(key, rest[len(_ARROW):].strip())
    return GenericAnnotation(key)
