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
"""CloudFront viewer-request adapter (Lambda@Edge).

Reads the ``Cookie`` and ``Accept-Language`` headers from the CloudFront
event, negotiates a locale, and forwards the request with the result in a
custom header (``X-Accept-Language`` by default).  Header entries may be in
CloudFront's ``{"key": ..., "value": ...}`` shape or plain strings; the
custom header is written back in the shape the request already uses.
"""

from __future__ import annotations

import functools
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any

import structlog

from edgelocale.config.negotiation import NegotiationProperties
from edgelocale.core.config import Config
from edgelocale.i18n.catalog import LocaleCatalog
from edgelocale.i18n.negotiation import NegotiationEngine
from edgelocale.kernel.exceptions import ConfigurationFault
from edgelocale.logging.port import LoggingPort
from edgelocale.logging.structlog_adapter import StructlogAdapter

DEFAULT_STAGE = "assigning default language"


def handle_viewer_request(
    event: dict[str, Any],
    properties: NegotiationProperties,
    logger: Any | None = None,
) -> Any:
    """Negotiate the locale for the request in *event* and return the request.

    The default locale is written first.  If that fails the request is
    returned without the custom header and negotiation is skipped.
    """
    log = logger if logger is not None else structlog.get_logger("edgelocale.edge")
    request = event["Records"][0]["cf"]["request"]
    headers = request.get("headers")

    try:
        catalog = LocaleCatalog(frozenset(properties.supported), properties.default_locale)
        structured = _uses_structured_entries(headers)
        _assign_default(headers, properties.header_name, catalog.default, structured)
    except ConfigurationFault as exc:
        log.error(f"Error {DEFAULT_STAGE}: {exc}", stage=DEFAULT_STAGE, error_type=type(exc).__name__)
        return request

    engine = NegotiationEngine(catalog, properties.cookie_name, logger=log)
    result = engine.resolve(
        _header_values(headers, "Cookie"),
        _header_values(headers, "Accept-Language"),
    )
    _write_header(headers, properties.header_name, result.locale, structured)
    log.debug("locale_negotiated", locale=result.locale, source=result.source)
    return request


def _assign_default(headers: Any, name: str, default: str, structured: bool) -> None:
    if not isinstance(headers, MutableMapping):
        raise ConfigurationFault(
            f"cannot assign {name!r} on headers of type {type(headers).__name__}",
            code="DEFAULT_ASSIGN",
        )
    try:
        _write_header(headers, name, default, structured)
    except TypeError as exc:
        raise ConfigurationFault(f"cannot assign {name!r}: {exc}", code="DEFAULT_ASSIGN") from exc


def _write_header(headers: MutableMapping[str, Any], name: str, value: str, structured: bool) -> None:
    if structured:
        headers[name.lower()] = [{"key": name, "value": value}]
    else:
        headers[name] = [value]


def _uses_structured_entries(headers: Any) -> bool:
    if not isinstance(headers, MutableMapping):
        return False
    return any(
        isinstance(entry, dict) and "key" in entry
        for entries in headers.values()
        if isinstance(entries, list)
        for entry in entries
    )


def _header_values(headers: MutableMapping[str, Any], name: str) -> list[Any] | None:
    """Return the raw values of header *name*, matching names case-insensitively."""
    wanted = name.lower()
    for key, entries in headers.items():
        if key.lower() != wanted:
            continue
        if not isinstance(entries, list):
            return [entries]
        return [_entry_value(entry) for entry in entries]
    return None


def _entry_value(entry: Any) -> Any:
    if isinstance(entry, dict) and "value" in entry:
        return entry["value"]
    return entry


@functools.lru_cache(maxsize=1)
def _load_runtime() -> tuple[NegotiationProperties, Any]:
    """Load configuration and set up logging once per runtime instance."""
    profiles = str(Config().get("edgelocale.profiles.active", "") or "")
    config = Config.from_sources(
        Path.cwd(),
        active_profiles=[p.strip() for p in profiles.split(",") if p.strip()],
    )
    logging_port: LoggingPort = StructlogAdapter()
    logging_port.configure(config)
    return config.bind(NegotiationProperties), logging_port.get_logger("edgelocale.edge")


def handler(event: dict[str, Any], context: Any) -> Any:  # noqa: ARG001
    """Lambda@Edge viewer-request entry point."""
    properties, logger = _load_runtime()
    return handle_viewer_request(event, properties, logger=logger)
