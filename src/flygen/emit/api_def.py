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
"""Serialized api definition consumed by the runtime router.

The file holds standard base64 of compact JSON::

    {"ctrl": {"UserCtrl": {"api_cache": [{"Method": "GET", "APIPath": "/api/users/all", "Name": "List"}]}},
     "annotation": {"/api/users/all": {"@Auth": "admin"}}}
"""

from __future__ import annotations

import base64
import json
from typing import Any

from flygen.enums import API_DEF_ANNOTATIONS_KEY, API_DEF_CONTROLLERS_KEY, API_DEF_ROUTES_KEY
from flygen.scan.registry import RegistrySnapshot


def build_api_def(snapshot: RegistrySnapshot) -> dict[str, Any]:
    """Plain-dict form of the api definition; controller base paths are not serialized."""
    controllers = {
        name: {
            API_DEF_ROUTES_KEY: [
                {"Method": route.http_verb, "APIPath": route.path, "Name": route.method_name}
                for route in info.routes
            ]
        }
        for name, info in snapshot.controllers.items()
    }
    annotations = {path: dict(values) for path, values in snapshot.annotations.items()}
    return {API_DEF_CONTROLLERS_KEY: controllers, API_DEF_ANNOTATIONS_KEY: annotations}


def encode_api_def(snapshot: RegistrySnapshot) -> str:
    payload = json.dumps(build_api_def(snapshot), ensure_ascii=False, separators=(",", ":"))
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_api_def(text: str) -> dict[str, Any]:
    """Decode the contents of an api definition file.

    Raises:
        ValueError: The text is not base64-encoded JSON.
    """
    try:
        raw = base64.b64decode(text.strip(), validate=True)
        return json.loads(raw.decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as exc:
        raise ValueError(f"Invalid api definition: {exc}") from exc
