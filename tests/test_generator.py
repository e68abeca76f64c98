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
"""End-to-end tests of a generator run."""

import ast
import textwrap
from pathlib import Path

import pytest

from flygen.core.properties import GeneratorProperties
from flygen.emit.api_def import decode_api_def
from flygen.generator import Generator
from flygen.kernel.exceptions import DuplicateDeclarationError, ScanRootNotFoundError


def _write(root: Path, relative: str, source: str) -> None:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(source))


@pytest.fixture
def project(tmp_path: Path) -> Path:
    _write(
        tmp_path,
        "app/controllers/user.py",
        """
        from flyweb import ioc, mvc


        # @BasePath("/users")
        class UserCtrl(mvc.Controller, ioc.Bean):
            # @GET(path="/all")
            def List(self):
                return []

            # @GET(path="/x")
            # @Auth -> admin
            def Detail(self):
                return {}
        """,
    )
    _write(
        tmp_path,
        "app/controllers/ping.py",
        """
        from flyweb import mvc


        class PingCtrl(mvc.Controller):
            # @GET(path="/ping")
            def Ping(self):
                return "pong"
        """,
    )
    _write(
        tmp_path,
        "app/services.py",
        """
        from flyweb import ioc


        class UserService(ioc.Bean):
            pass
        """,
    )
    _write(tmp_path, "app/dto/user_dto.py", "from flyweb import ioc\n\nclass UserCtrl(ioc.Bean):\n    pass\n")
    return tmp_path


class TestGenerator:
    def test_scenario_context_and_base_path(self, project: Path):
        properties = GeneratorProperties(context="/api", scan_skips=["dto"])
        result = Generator(properties, project).generate()
        routes = result.snapshot.controllers["UserCtrl"].routes
        assert (routes[0].http_verb, routes[0].path, routes[0].method_name) == ("GET", "/api/users/all", "List")

    def test_scenario_root_context(self, project: Path):
        result = Generator(GeneratorProperties(scan_skips=["dto"]), project).generate(dry_run=True)
        assert result.snapshot.controllers["PingCtrl"].base_path == "/"
        assert result.snapshot.controllers["PingCtrl"].routes[0].path == "/ping"

    def test_scenario_annotations(self, project: Path):
        result = Generator(GeneratorProperties(scan_skips=["dto"]), project).generate(dry_run=True)
        assert dict(result.snapshot.annotations) == {"/users/x": {"@Auth": "admin"}}

    def test_both_markers_registered_once(self, project: Path):
        result = Generator(GeneratorProperties(scan_skips=["dto"]), project).generate(dry_run=True)
        assert list(result.snapshot.beans) == ["PingCtrl", "UserCtrl", "UserService"]
        assert list(result.snapshot.controllers) == ["PingCtrl", "UserCtrl"]

    def test_writes_artifacts(self, project: Path):
        result = Generator(GeneratorProperties(scan_skips=["dto"]), project).generate()
        assert result.written == [project.resolve() / "gp_bean_init.py", project.resolve() / "gp_api.def"]
        assert result.files_scanned == 3

        init_source = (project / "gp_bean_init.py").read_text()
        ast.parse(init_source)
        assert "from app.controllers.ping import PingCtrl\n" in init_source
        assert "from app.controllers.user import UserCtrl\n" in init_source

        api_def = decode_api_def((project / "gp_api.def").read_text())
        assert [r["Name"] for r in api_def["ctrl"]["UserCtrl"]["api_cache"]] == ["List", "Detail"]

    def test_second_run_ignores_generated_module(self, project: Path):
        generator = Generator(GeneratorProperties(scan_skips=["dto"]), project)
        generator.generate()
        first = (project / "gp_bean_init.py").read_text()
        generator.generate()
        assert (project / "gp_bean_init.py").read_text() == first

    def test_duplicate_name_aborts_without_artifacts(self, project: Path):
        with pytest.raises(DuplicateDeclarationError):
            Generator(GeneratorProperties(), project).generate()
        assert not (project / "gp_bean_init.py").exists()
        assert not (project / "gp_api.def").exists()

    def test_scan_packages_limit_the_scan(self, project: Path):
        properties = GeneratorProperties(scan_packages=["app/services.py", "app"], scan_skips=["controllers", "dto"])
        with pytest.raises(ScanRootNotFoundError):
            Generator(properties, project).scan()

        properties = GeneratorProperties(scan_packages=["app"], scan_skips=["controllers", "dto"])
        snapshot, files = Generator(properties, project).scan()
        assert list(snapshot.beans) == ["UserService"]
        assert files == 1

    def test_nothing_to_generate(self, tmp_path: Path):
        _write(tmp_path, "plain.py", "x = 1\n")
        result = Generator(GeneratorProperties(), tmp_path).generate()
        assert result.written == []
        assert result.snapshot.is_empty
