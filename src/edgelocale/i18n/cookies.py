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
"""Locale extraction from a raw ``Cookie`` header."""

from __future__ import annotations

import re
from typing import Any

from edgelocale.i18n.catalog import LocaleCatalog, sanitize_locale
from edgelocale.kernel.exceptions import ExtractionError


def extract_cookie_value(cookie_name: str, cookie_header: Any) -> str:
    """Return the raw value of *cookie_name* in *cookie_header*.

    An absent cookie yields ``""``, not an error.  Raises
    :class:`ExtractionError` when *cookie_header* is not a string.
    """
    if not isinstance(cookie_header, str):
        raise ExtractionError(
            f"Cookie value must be a string, got {type(cookie_header).__name__}",
            code="NEGOTIATION_EXTRACT",
        )
    pattern = r"(?:^|;)\s*" + re.escape(cookie_name) + r"\s*=\s*([^;]*)"
    match = re.search(pattern, cookie_header)
    return match.group(1).strip() if match else ""


class CookieLocaleExtractor:
    """Reads a supported locale out of the configured cookie."""

    def __init__(self, cookie_name: str, catalog: LocaleCatalog) -> None:
        self._cookie_name = cookie_name
        self._catalog = catalog

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def extract(self, cookie_header: Any) -> str | None:
        """Return the cookie's locale when it names a supported one, else ``None``."""
        raw = extract_cookie_value(self._cookie_name, cookie_header)
        if not raw:
            return None
        locale = sanitize_locale(raw)
        return locale if self._catalog.is_supported(locale) else None
