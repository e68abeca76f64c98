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
"""Tests for the scan registry."""

from pathlib import Path

import pytest

from flygen.kernel.exceptions import DuplicateDeclarationError, RegistryFinalizedError, UnexportedHandlerError
from flygen.scan.classifier import Classification
from flygen.scan.registry import ControllerInfo, Registry, RouteInfo, StructMeta, is_exported


def _meta(name: str, module: str = "app.controllers") -> StructMeta:
    return StructMeta(name=name, package="app", import_path=module, source=Path(f"{module.replace('.', '/')}.py"))


class TestRegisterStruct:
    def test_controller_lands_in_both_tables(self):
        registry = Registry("/")
        registry.register_struct(_meta("UserCtrl"), Classification.CONTROLLER)
        snapshot = registry.finalize()
        assert list(snapshot.controllers) == ["UserCtrl"]
        assert list(snapshot.beans) == ["UserCtrl"]

    def test_bean_only_in_bean_table(self):
        registry = Registry("/")
        registry.register_struct(_meta("UserService"), Classification.BEAN)
        snapshot = registry.finalize()
        assert "UserService" in snapshot.beans
        assert snapshot.controllers == {}

    def test_unclassified_is_ignored(self):
        registry = Registry("/")
        registry.register_struct(_meta("Plain"), Classification.NONE)
        assert registry.finalize().is_empty

    def test_base_path_from_comment(self):
        registry = Registry("/api")
        registry.register_struct(_meta("UserCtrl"), Classification.CONTROLLER, ['# @BasePath("/users")'])
        assert registry.finalize().controllers["UserCtrl"].base_path == "/api/users"

    def test_first_base_path_wins(self):
        registry = Registry("/")
        registry.register_struct(
            _meta("UserCtrl"),
            Classification.CONTROLLER,
            ['# @BasePath("/first")', '# @BasePath("/second")'],
        )
        assert registry.finalize().controllers["UserCtrl"].base_path == "/first"

    def test_default_base_path_is_context(self):
        registry = Registry("api/")
        registry.register_struct(_meta("UserCtrl"), Classification.CONTROLLER, ["# users endpoint"])
        assert registry.finalize().controllers["UserCtrl"].base_path == "/api"

    def test_duplicate_name_is_fatal(self):
        registry = Registry("/")
        registry.register_struct(_meta("UserCtrl", "app.a"), Classification.CONTROLLER)
        with pytest.raises(DuplicateDeclarationError) as exc_info:
            registry.register_struct(_meta("UserCtrl", "app.b"), Classification.BEAN)
        assert exc_info.value.context["declaration"] == "UserCtrl"
        assert "app/b.py" in exc_info.value.context["file"]


class TestRegisterMethod:
    def _controller(self, context: str = "/api", base: str = '# @BasePath("/users")') -> Registry:
        registry = Registry(context)
        registry.register_struct(_meta("UserCtrl"), Classification.CONTROLLER, [base])
        return registry

    def test_route_is_composed(self):
        registry = self._controller()
        routes = registry.register_method("UserCtrl", "List", ['# @GET(path="/all")'])
        assert routes == (RouteInfo(method_name="List", http_verb="GET", path="/api/users/all"),)

    def test_routes_keep_declaration_order(self):
        registry = self._controller()
        for name, path in [("Zeta", "/z"), ("Alpha", "/a"), ("Mid", "/m")]:
            registry.register_method("UserCtrl", name, [f'# @GET(path="{path}")'])
        routes = registry.finalize().controllers["UserCtrl"].routes
        assert [r.method_name for r in routes] == ["Zeta", "Alpha", "Mid"]

    def test_multiple_routes_on_one_method(self):
        registry = self._controller()
        registry.register_method("UserCtrl", "Get", ['# @GET(path="/one")', '# @HEAD(path="/one")'])
        routes = registry.finalize().controllers["UserCtrl"].routes
        assert [(r.http_verb, r.path) for r in routes] == [("GET", "/api/users/one"), ("HEAD", "/api/users/one")]

    def test_annotations_attach_to_first_route(self):
        registry = self._controller()
        registry.register_method(
            "UserCtrl",
            "Get",
            ['# @GET(path="/x")', "# @Auth -> admin", '# @POST(path="/y")', "# @Audit"],
        )
        snapshot = registry.finalize()
        assert dict(snapshot.annotations) == {"/api/users/x": {"@Audit": "", "@Auth": "admin"}}

    def test_annotations_before_route_are_kept(self):
        registry = self._controller()
        registry.register_method("UserCtrl", "Get", ["# @Auth -> admin", '# @GET(path="/x")'])
        assert registry.finalize().annotations["/api/users/x"] == {"@Auth": "admin"}

    def test_annotations_without_route_are_dropped(self):
        registry = self._controller()
        assert registry.register_method("UserCtrl", "Helper", ["# @Auth -> admin"]) == ()
        assert registry.finalize().annotations == {}

    def test_base_path_line_on_method_is_inert(self):
        registry = self._controller()
        registry.register_method("UserCtrl", "Get", ['# @BasePath("/other")', '# @GET(path="/x")'])
        snapshot = registry.finalize()
        assert snapshot.controllers["UserCtrl"].routes[0].path == "/api/users/x"
        assert snapshot.annotations == {}

    def test_unknown_owner_is_skipped(self):
        registry = Registry("/")
        registry.register_struct(_meta("UserService"), Classification.BEAN)
        assert registry.register_method("UserService", "Get", ['# @GET(path="/x")']) == ()
        assert registry.register_method("Orphan", "Get", ['# @GET(path="/x")']) == ()
        assert registry.finalize().controllers == {}

    def test_private_handler_is_fatal(self):
        registry = self._controller()
        with pytest.raises(UnexportedHandlerError) as exc_info:
            registry.register_method("UserCtrl", "_list", ['# @GET(path="/all")'])
        assert exc_info.value.context["declaration"] == "UserCtrl._list"

    def test_private_method_without_route_is_fine(self):
        registry = self._controller()
        assert registry.register_method("UserCtrl", "_helper", ["# internal"]) == ()

    def test_later_annotations_replace_same_path(self):
        registry = self._controller()
        registry.register_method("UserCtrl", "A", ['# @GET(path="/x")', "# @Auth -> admin"])
        registry.register_method("UserCtrl", "B", ['# @POST(path="/x")', "# @Auth -> ops"])
        assert registry.finalize().annotations["/api/users/x"] == {"@Auth": "ops"}


class TestFinalize:
    def test_tables_are_sorted(self):
        registry = Registry("/")
        for name in ["Zed", "Alpha", "Mid"]:
            registry.register_struct(_meta(name), Classification.CONTROLLER)
        snapshot = registry.finalize()
        assert list(snapshot.controllers) == ["Alpha", "Mid", "Zed"]
        assert list(snapshot.beans) == ["Alpha", "Mid", "Zed"]

    def test_snapshot_is_read_only(self):
        registry = Registry("/")
        registry.register_struct(_meta("UserCtrl"), Classification.CONTROLLER)
        snapshot = registry.finalize()
        with pytest.raises(TypeError):
            snapshot.controllers["Other"] = ControllerInfo(base_path="/")  # type: ignore[index]

    def test_no_registration_after_finalize(self):
        registry = Registry("/")
        registry.finalize()
        with pytest.raises(RegistryFinalizedError):
            registry.register_struct(_meta("UserCtrl"), Classification.CONTROLLER)
        with pytest.raises(RegistryFinalizedError):
            registry.register_method("UserCtrl", "List", [])

    def test_iter_routes(self):
        registry = Registry("/")
        registry.register_struct(_meta("B"), Classification.CONTROLLER)
        registry.register_struct(_meta("A"), Classification.CONTROLLER)
        registry.register_method("B", "Get", ['# @GET(path="/b")'])
        registry.register_method("A", "Get", ['# @GET(path="/a")'])
        assert [(name, r.path) for name, r in registry.finalize().iter_routes()] == [("A", "/a"), ("B", "/b")]


class TestIsExported:
    def test_public(self):
        assert is_exported("List")
        assert is_exported("list_users")

    def test_private(self):
        assert not is_exported("_list")
        assert not is_exported("__call__")
        assert not is_exported("")
