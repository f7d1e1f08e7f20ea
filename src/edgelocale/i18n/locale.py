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
"""Locale resolution — protocol and built-in resolvers."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from edgelocale.i18n.catalog import LocaleCatalog
from edgelocale.i18n.negotiation import NegotiationEngine


@runtime_checkable
class LocaleResolver(Protocol):
    """Port for determining the locale from an incoming request."""

    def resolve_locale(self, request: Any) -> str: ...


class NegotiatingLocaleResolver:
    """Resolves the locale from the locale cookie and ``Accept-Language``.

    The cookie wins when it names a supported locale; otherwise the
    highest-weighted supported header range is used, then the default.
    """

    def __init__(self, catalog: LocaleCatalog, cookie_name: str) -> None:
        self._engine = NegotiationEngine(catalog, cookie_name)

    def resolve_locale(self, request: Any) -> str:
        headers = getattr(request, "headers", None) or {}
        return self._engine.resolve(
            _header_values(headers, "cookie"),
            _header_values(headers, "accept-language"),
        ).locale


class AcceptHeaderLocaleResolver:
    """Resolves the locale from the ``Accept-Language`` header alone."""

    def __init__(self, catalog: LocaleCatalog) -> None:
        # No cookie values are ever passed, so the name is never matched.
        self._engine = NegotiationEngine(catalog, cookie_name="")

    def resolve_locale(self, request: Any) -> str:
        headers = getattr(request, "headers", None) or {}
        return self._engine.resolve(None, _header_values(headers, "accept-language")).locale


class FixedLocaleResolver:
    """Always returns a pre-configured locale, ignoring the request."""

    def __init__(self, locale: str = "en") -> None:
        self._locale = locale

    def resolve_locale(self, request: Any) -> str:  # noqa: ARG002
        return self._locale


def _header_values(headers: Any, name: str) -> list[str] | None:
    value = headers.get(name)
    return [value] if value else None
