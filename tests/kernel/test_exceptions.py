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
"""Tests for the exception hierarchy."""

from pathlib import Path

from flygen.kernel.exceptions import (
    ConfigurationException,
    DuplicateDeclarationError,
    FlygenException,
    GenerationException,
    ImportPathResolutionError,
    SourceParseError,
    UnexportedHandlerError,
)


class TestHierarchy:
    def test_generation_errors_are_flygen_exceptions(self):
        for exc_type in (DuplicateDeclarationError, UnexportedHandlerError, ImportPathResolutionError, SourceParseError):
            assert issubclass(exc_type, GenerationException)
            assert issubclass(exc_type, FlygenException)

    def test_configuration_is_not_generation(self):
        assert not issubclass(ConfigurationException, GenerationException)


class TestContext:
    def test_defaults(self):
        exc = FlygenException("boom")
        assert str(exc) == "boom"
        assert exc.code is None
        assert exc.context == {}

    def test_duplicate_declaration(self):
        exc = DuplicateDeclarationError("UserCtrl", Path("b.py"), Path("a.py"))
        assert exc.code == "DUPLICATE_DECLARATION"
        assert exc.context == {"declaration": "UserCtrl", "file": "b.py", "previous_file": "a.py"}
        assert "UserCtrl" in str(exc)

    def test_source_parse_location(self):
        exc = SourceParseError(Path("x.py"), "invalid syntax", 3)
        assert str(exc) == "Failed to parse x.py:3: invalid syntax"
