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
"""edgelocale CLI — negotiate locales from the command line."""

from __future__ import annotations

import click

from edgelocale.cli.console import print_banner


class EdgeLocaleCLI(click.Group):
    """Custom Click group that shows the banner on help."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        print_banner()
        super().format_help(ctx, formatter)


@click.group(cls=EdgeLocaleCLI)
@click.version_option(package_name="edgelocale")
def cli() -> None:
    """edgelocale — cookie and Accept-Language locale negotiation."""


from edgelocale.cli.negotiate import negotiate_command  # noqa: E402

cli.add_command(negotiate_command, name="negotiate")
