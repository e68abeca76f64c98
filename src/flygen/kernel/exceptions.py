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
"""Unified exception hierarchy for flygen.

Every fatal condition raised while scanning or generating inherits from
FlygenException and carries an error code plus a context dict that locates
the offending source (file path, declaration name).

Categories:
- GenerationException: scan and emission failures that abort the run
- ConfigurationException: invalid generator configuration
"""

from __future__ import annotations

from pathlib import Path


# =============================================================================
# Base Exception
# =============================================================================


class FlygenException(Exception):
    """Base exception for all flygen errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "DUPLICATE_DECLARATION").
        context: Key-value pairs locating the error (file, declaration, ...).
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(FlygenException):
    """Generator configuration could not be loaded or validated."""


# =============================================================================
# Generation Exceptions
# =============================================================================


class GenerationException(FlygenException):
    """Fatal error while scanning sources or emitting artifacts."""


class DuplicateDeclarationError(GenerationException):
    """Two registrable classes share the same name."""

    def __init__(self, name: str, source: Path | None, previous: Path | None) -> None:
        self.name = name
        super().__init__(
            f"Class '{name}' is declared more than once (first in {previous}, again in {source})",
            code="DUPLICATE_DECLARATION",
            context={"declaration": name, "file": str(source), "previous_file": str(previous)},
        )


class UnexportedHandlerError(GenerationException):
    """A route-annotated method is not publicly visible."""

    def __init__(self, owner: str, method: str, source: Path | None) -> None:
        self.owner = owner
        self.method = method
        super().__init__(
            f"Route handler '{owner}.{method}' must be a public method (no leading underscore)",
            code="UNEXPORTED_HANDLER",
            context={"declaration": f"{owner}.{method}", "file": str(source)},
        )


class ImportPathResolutionError(GenerationException):
    """A registrable class lives in a file that cannot be imported from the project root."""

    def __init__(self, source: Path, root: Path, reason: str) -> None:
        self.source = source
        super().__init__(
            f"Cannot resolve an import path for {source} relative to {root}: {reason}",
            code="IMPORT_PATH_UNRESOLVED",
            context={"file": str(source), "root": str(root)},
        )


class SourceParseError(GenerationException):
    """A source file is not valid Python."""

    def __init__(self, source: Path, reason: str, line: int | None = None) -> None:
        self.source = source
        self.line = line
        location = f"{source}:{line}" if line else str(source)
        super().__init__(
            f"Failed to parse {location}: {reason}",
            code="SOURCE_PARSE",
            context={"file": str(source), "line": line},
        )


class ScanRootNotFoundError(GenerationException):
    """A configured scan root does not exist."""

    def __init__(self, root: Path) -> None:
        super().__init__(
            f"Scan package does not exist or is not a directory: {root}",
            code="SCAN_ROOT_NOT_FOUND",
            context={"file": str(root)},
        )


class RegistryFinalizedError(GenerationException):
    """The registry was mutated after its snapshot was taken."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"Registry is finalized; '{operation}' is no longer allowed",
            code="REGISTRY_FINALIZED",
            context={"operation": operation},
        )
