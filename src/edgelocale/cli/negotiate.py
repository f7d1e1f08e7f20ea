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
"""'edgelocale negotiate' — resolve a locale from raw header values."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click
from rich.table import Table

from edgelocale.cli.console import console
from edgelocale.config.negotiation import NegotiationProperties
from edgelocale.core.config import Config
from edgelocale.i18n.catalog import LocaleCatalog
from edgelocale.i18n.negotiation import NegotiationEngine
from edgelocale.i18n.ranges import parse_language_ranges
from edgelocale.kernel.exceptions import ConfigurationFault


def _load_properties(config_path: Path | None) -> NegotiationProperties:
    if config_path is not None:
        config = Config.from_file(config_path)
    else:
        config = Config.from_sources(Path.cwd())
    return config.bind(NegotiationProperties)


@click.command()
@click.option("--accept-language", "-a", default=None, help="Raw Accept-Language header value.")
@click.option("--cookie", "-c", default=None, help="Raw Cookie header value.")
@click.option("--cookie-name", default=None, help="Name of the locale cookie.")
@click.option("--supported", default=None, help="Comma-separated supported locales (e.g. en,es).")
@click.option("--default", "default_locale", default=None, help="Fallback locale.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file (YAML or TOML).",
)
@click.option("--explain", is_flag=True, help="Show parsed ranges and the decision source.")
def negotiate_command(
    accept_language: str | None,
    cookie: str | None,
    cookie_name: str | None,
    supported: str | None,
    default_locale: str | None,
    config_path: Path | None,
    explain: bool,
) -> None:
    """Print the locale negotiated from a cookie and an Accept-Language value."""
    props = _load_properties(config_path)
    overrides: dict[str, object] = {}
    if cookie_name is not None:
        overrides["cookie_name"] = cookie_name
    if supported is not None:
        overrides["supported"] = [code.strip() for code in supported.split(",") if code.strip()]
    if default_locale is not None:
        overrides["default_locale"] = default_locale
    props = replace(props, **overrides)

    try:
        catalog = LocaleCatalog.from_properties(props)
    except ConfigurationFault as exc:
        raise click.ClickException(str(exc)) from exc

    engine = NegotiationEngine(catalog, props.cookie_name)
    result = engine.resolve(
        [cookie] if cookie else None,
        [accept_language] if accept_language else None,
    )

    if explain:
        _print_explanation(catalog, props, accept_language)
        console.print(f"Selected [success]{result.locale}[/success] [dim](source: {result.source})[/dim]")
        return

    click.echo(result.locale)


def _print_explanation(catalog: LocaleCatalog, props: NegotiationProperties, accept_language: str | None) -> None:
    settings = Table(title="Configuration", show_header=False, border_style="dim")
    settings.add_column("Key", style="info")
    settings.add_column("Value")
    settings.add_row("Cookie name", props.cookie_name)
    settings.add_row("Supported", ", ".join(sorted(catalog.supported)))
    settings.add_row("Default", catalog.default)
    console.print(settings)

    if not accept_language:
        return

    ranges = Table(title="Accept-Language ranges", border_style="dim")
    ranges.add_column("#", justify="right")
    ranges.add_column("Locale", style="info")
    ranges.add_column("Weight", justify="right")
    ranges.add_column("Supported")
    for index, lang_range in enumerate(parse_language_ranges(accept_language), start=1):
        status = "[success]yes[/success]" if catalog.is_supported(lang_range.locale) else "[dim]no[/dim]"
        ranges.add_row(str(index), lang_range.locale, f"{lang_range.weight:g}", status)
    console.print(ranges)
