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
"""Locale negotiation — combines the cookie and ``Accept-Language`` signals.

Priority (highest wins):
1. Supported locale named by the locale cookie
2. Highest-weighted supported range of ``Accept-Language``
3. The catalog default

Each signal is evaluated in isolation: a failure while reading one is
logged and treated as "no locale from this signal", so it can never keep
the other signal from being used.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

import structlog

from edgelocale.i18n.catalog import LocaleCatalog
from edgelocale.i18n.cookies import CookieLocaleExtractor
from edgelocale.i18n.ranges import WeightedRangeParser
from edgelocale.i18n.selection import select_locale

LocaleSource = Literal["default", "cookie", "header"]

COOKIE_STAGE = "performing cookie language negotiation"
HEADER_STAGE = "performing language negotiation"


@dataclass(frozen=True)
class NegotiationResult:
    """The selected locale and the signal it came from."""

    locale: str
    source: LocaleSource = "default"


class NegotiationEngine:
    """Resolves one locale per request from cookie and header values.

    The engine holds configuration only; every call to :meth:`resolve`
    works on its own inputs and leaves no state behind.
    """

    def __init__(
        self,
        catalog: LocaleCatalog,
        cookie_name: str,
        logger: Any | None = None,
    ) -> None:
        self._catalog = catalog
        self._cookies = CookieLocaleExtractor(cookie_name, catalog)
        self._parser = WeightedRangeParser(catalog)
        self._logger = logger if logger is not None else structlog.get_logger("edgelocale.negotiation")

    @property
    def catalog(self) -> LocaleCatalog:
        return self._catalog

    def resolve(
        self,
        cookie_values: Sequence[Any] | None,
        accept_language_values: Sequence[Any] | None,
    ) -> NegotiationResult:
        """Negotiate the locale for one request.

        Only the first element of each value sequence is considered.
        """
        result = NegotiationResult(self._catalog.default)

        cookie_locale = self._run_stage(COOKIE_STAGE, self._cookies.extract, cookie_values)
        header_locale = self._run_stage(HEADER_STAGE, self._header_locale, accept_language_values)

        if cookie_locale is not None:
            result = NegotiationResult(cookie_locale, "cookie")
        elif header_locale is not None:
            result = NegotiationResult(header_locale, "header")
        return result

    def _header_locale(self, value: Any) -> str | None:
        return select_locale(self._parser.candidates(value))

    def _run_stage(self, stage: str, step: Callable[[Any], str | None], values: Sequence[Any] | None) -> str | None:
        try:
            value = _first(values)
            if value is None or value == "":
                return None
            return step(value)
        except Exception as exc:
            self._logger.error(f"Error {stage}: {exc}", stage=stage, error_type=type(exc).__name__)
            return None


def negotiate(
    cookie_header_values: Sequence[Any] | None,
    accept_language_values: Sequence[Any] | None,
    cookie_name: str,
    supported: Iterable[str],
    default: str,
) -> str:
    """Return the selected locale for one request.

    The result is always a member of ``supported`` or ``default``.  Bad
    signal values never raise; an unusable catalog raises
    :class:`~edgelocale.kernel.exceptions.ConfigurationFault`.
    """
    catalog = LocaleCatalog(frozenset(supported), default)
    return NegotiationEngine(catalog, cookie_name).resolve(cookie_header_values, accept_language_values).locale


def _first(values: Sequence[Any] | None) -> Any:
    if isinstance(values, str):
        return values
    if not values:
        return None
    return values[0]
