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
"""Wire-contract constants shared between annotated sources, flygen and the runtime.

Changing any of these values breaks every annotated source tree and every
runtime that reads the generated artifacts.
"""

from __future__ import annotations

# Generated artifacts, written to the project root
BEAN_INIT_FILE = "gp_bean_init.py"
API_DEF_FILE = "gp_api.def"

# Marker modules
BEAN_IMPORT_PATH = "flyweb.ioc"
MVC_IMPORT_PATH = "flyweb.mvc"

# Local names used when a marker module is imported without a rename
DEFAULT_BEAN_ALIAS = "ioc"
DEFAULT_MVC_ALIAS = "mvc"

# Marker members a class must inherit from
BEAN_MEMBER = "Bean"
CONTROLLER_MEMBER = "Controller"

HTTP_VERBS: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "PATCH")

# Keys of the serialized api definition
API_DEF_CONTROLLERS_KEY = "ctrl"
API_DEF_ANNOTATIONS_KEY = "annotation"
API_DEF_ROUTES_KEY = "api_cache"
