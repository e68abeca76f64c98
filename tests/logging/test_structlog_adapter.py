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
"""Tests for StructlogAdapter."""

import logging

from flygen.core.config import Config
from flygen.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "WARNING"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"flygen": {"logging": {"level": {"root": "info"}}}}))
        assert adapter._root_level == "INFO"
        assert logging.getLogger().level == logging.INFO

    def test_verbose_forces_debug(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"flygen": {"logging": {"level": {"root": "ERROR"}}}}), verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"flygen": {"logging": {"format": "json"}}}))
        assert adapter._format == "json"

    def test_configure_reads_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"flygen": {"logging": {"level": {"root": "INFO", "flygen.scan": "DEBUG"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"flygen.scan": "DEBUG"}
        assert logging.getLogger("flygen.scan").level == logging.DEBUG

    def test_single_handler_after_reconfigure(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        adapter.configure(Config({}))
        assert len(logging.getLogger().handlers) == 1
