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
"""flygen CLI: bean and route metadata generation."""

from __future__ import annotations

import click

from flygen.cli.console import print_banner


class FlygenCLI(click.Group):
    """Custom Click group that shows the flygen banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=FlygenCLI)
@click.version_option(package_name="flygen")
def cli() -> None:
    """flygen: scan controllers and beans, generate their registration code."""


from flygen.cli.generate import generate_command
from flygen.cli.routes import routes_command

cli.add_command(generate_command, name="generate")
cli.add_command(routes_command, name="routes")
