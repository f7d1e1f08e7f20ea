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
"""Weighted language-range parsing for ``Accept-Language`` values.

A value such as ``de,en;q=0.8,es;q=0.2`` is split on commas, keeping the
order of the input, into :class:`LanguageRange` entries.  Weights are
always coerced: a missing weight is ``1.0``, an unreadable one is ``0.0``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from edgelocale.i18n.catalog import LocaleCatalog, sanitize_locale
from edgelocale.kernel.exceptions import ParseError

# Leading decimal number, the way a lenient float reader accepts "0.8abc".
_LEADING_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class LanguageRange:
    """One entry of a language-preference header."""

    locale: str
    weight: float = 1.0


def parse_language_ranges(value: Any) -> list[LanguageRange]:
    """Parse a raw ``Accept-Language`` value into ranges, in input order.

    Raises :class:`ParseError` when *value* is not a string.
    """
    if not isinstance(value, str):
        raise ParseError(
            f"Accept-Language value must be a string, got {type(value).__name__}",
            code="NEGOTIATION_PARSE",
        )

    ranges: list[LanguageRange] = []
    for token in value.split(","):
        locale_part, _, weight_part = token.partition(";")
        if not locale_part:
            continue
        # "es;" carries no weight at all, same as "es".
        weight = _parse_weight(weight_part) if weight_part else 1.0
        ranges.append(LanguageRange(sanitize_locale(locale_part), weight))
    return ranges


def _parse_weight(raw: str) -> float:
    """Read the number after the two-character ``q=`` prefix.

    The prefix is dropped by position, so "es; q=0.5" reads "=0.5" and
    coerces to 0.0.  Unreadable values give 0.0; readable ones are clamped
    into [0, 1], which makes ``q=2`` tie with an unweighted range rather
    than beat it.
    """
    match = _LEADING_NUMBER_RE.match(raw[2:].lstrip())
    if match is None:
        return 0.0
    return min(max(float(match.group()), 0.0), 1.0)


class WeightedRangeParser:
    """Parses ``Accept-Language`` values into a catalog-filtered candidate set."""

    def __init__(self, catalog: LocaleCatalog) -> None:
        self._catalog = catalog

    def candidates(self, value: Any) -> list[LanguageRange]:
        return self._catalog.filter(parse_language_ranges(value))
