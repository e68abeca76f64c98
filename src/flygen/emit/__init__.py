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
"""Artifact emission: the bean init module and the api definition file."""

from flygen.emit.api_def import build_api_def, decode_api_def, encode_api_def
from flygen.emit.init_module import render_init_module
from flygen.emit.writer import write_artifacts

__all__ = [
    "build_api_def",
    "decode_api_def",
    "encode_api_def",
    "render_init_module",
    "write_artifacts",
]
