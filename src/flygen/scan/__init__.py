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
"""Source scanning: comment annotations, struct classification and the metadata registry."""

from flygen.scan.registry import ControllerInfo, Registry, RegistrySnapshot, RouteInfo, StructMeta
from flygen.scan.source import scan_file
from flygen.scan.walker import iter_source_files, resolve_scan_roots

__all__ = [
    "ControllerInfo",
    "Registry",
    "RegistrySnapshot",
    "RouteInfo",
    "StructMeta",
    "iter_source_files",
    "resolve_scan_roots",
    "scan_file",
]
