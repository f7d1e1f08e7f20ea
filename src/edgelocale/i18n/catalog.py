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
"""Locale catalog — the supported locale codes and the fallback default."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from edgelocale.kernel.exceptions import ConfigurationFault

if TYPE_CHECKING:
    from edgelocale.config.negotiation import NegotiationProperties
    from edgelocale.i18n.ranges import LanguageRange


def sanitize_locale(raw: str) -> str:
    """Reduce a raw locale token to its lowercase 2-character code.

    ``en-US`` -> ``en``, ``ES_419`` -> ``es``.  Whitespace is not trimmed, so
    " en" gives " e".  Raises ``ValueError`` for an empty token.
    """
    if not raw:
        raise ValueError("cannot sanitize an empty locale token")
    return raw[:2].lower()


@dataclass(frozen=True)
class LocaleCatalog:
    """Immutable set of supported locale codes plus the default locale."""

    supported: frozenset[str]
    default: str

    def __post_init__(self) -> None:
        if isinstance(self.supported, str):
            raise ConfigurationFault("supported locales must be a collection, not a string", code="CATALOG_INVALID")
        codes = frozenset(_sanitize_config_entry(entry, "supported locale") for entry in self.supported)
        if not codes:
            raise ConfigurationFault("supported locale set must not be empty", code="CATALOG_EMPTY")
        object.__setattr__(self, "supported", codes)
        object.__setattr__(self, "default", _sanitize_config_entry(self.default, "default locale"))

    @classmethod
    def from_properties(cls, props: NegotiationProperties) -> LocaleCatalog:
        return cls(frozenset(props.supported), props.default_locale)

    def is_supported(self, code: str) -> bool:
        return code in self.supported

    def filter(self, ranges: Iterable[LanguageRange]) -> list[LanguageRange]:
        """Keep, in input order, only the ranges whose locale is supported."""
        return [r for r in ranges if r.locale in self.supported]


def _sanitize_config_entry(value: object, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationFault(
            f"{what} must be a non-empty string, got {value!r}",
            code="CATALOG_INVALID",
            context={"value": value},
        )
    return sanitize_locale(value.strip())
