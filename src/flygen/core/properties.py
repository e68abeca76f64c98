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
"""Typed generator settings bound from configuration."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

from flygen.core.config import config_properties
from flygen.enums import BEAN_IMPORT_PATH, MVC_IMPORT_PATH
from flygen.scan.paths import normalize_context


def split_and_trim(value: Any) -> Any:
    """Split a comma-separated string; trim whitespace and slashes, drop empty items."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)):
        items = (str(item).strip().strip("/") for item in value)
        return [item for item in items if item]
    return value


@config_properties(prefix="flygen.generator")
class GeneratorProperties(BaseModel):
    """Settings of one generator run.

    ``scan_packages`` are directories relative to the project root; an empty
    list (or one that trims down to nothing) scans the whole project.
    """

    scan_packages: list[str] = ["."]
    scan_skips: list[str] = []
    context: str = "/"
    bean_module: str = BEAN_IMPORT_PATH
    mvc_module: str = MVC_IMPORT_PATH

    @field_validator("scan_packages", mode="before")
    @classmethod
    def split_packages(cls, value: Any) -> Any:
        # an empty list scans the project root
        packages = split_and_trim(value)
        return packages or ["."]

    @field_validator("scan_skips", mode="before")
    @classmethod
    def split_skips(cls, value: Any) -> Any:
        return split_and_trim(value)

    @field_validator("context")
    @classmethod
    def normalize_context_path(cls, value: str) -> str:
        return normalize_context(value)

    @field_validator("bean_module", "mvc_module")
    @classmethod
    def check_module(cls, value: str) -> str:
        value = value.strip()
        if not value or not all(part.isidentifier() for part in value.split(".")):
            raise ValueError(f"'{value}' is not a dotted module path")
        return value
