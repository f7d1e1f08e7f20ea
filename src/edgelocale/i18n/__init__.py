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
"""edgelocale i18n — locale negotiation from cookie and Accept-Language signals.

Most callers only need the module-level entry point::

    from edgelocale.i18n import negotiate

    negotiate(["locale=es"], ["en;q=0.8"], "locale", {"en", "es"}, "en")
"""

from edgelocale.i18n.catalog import LocaleCatalog, sanitize_locale
from edgelocale.i18n.cookies import CookieLocaleExtractor, extract_cookie_value
from edgelocale.i18n.locale import (
    AcceptHeaderLocaleResolver,
    FixedLocaleResolver,
    LocaleResolver,
    NegotiatingLocaleResolver,
)
from edgelocale.i18n.negotiation import NegotiationEngine, NegotiationResult, negotiate
from edgelocale.i18n.ranges import LanguageRange, WeightedRangeParser, parse_language_ranges
from edgelocale.i18n.selection import select_locale

__all__ = [
    "AcceptHeaderLocaleResolver",
    "CookieLocaleExtractor",
    "FixedLocaleResolver",
    "LanguageRange",
    "LocaleCatalog",
    "LocaleResolver",
    "NegotiatingLocaleResolver",
    "NegotiationEngine",
    "NegotiationResult",
    "WeightedRangeParser",
    "extract_cookie_value",
    "negotiate",
    "parse_language_ranges",
    "sanitize_locale",
    "select_locale",
]
