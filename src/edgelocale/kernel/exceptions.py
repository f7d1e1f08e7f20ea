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
"""Exception hierarchy for edgelocale.

All library exceptions inherit from EdgeLocaleException, so callers can
catch the base class or a specific subclass.

Categories:
- ConfigurationFault: the default locale cannot be established
- NegotiationException: a cookie or header signal has the wrong shape
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class EdgeLocaleException(Exception):
    """Base exception for all edgelocale errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "NEGOTIATION_PARSE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationFault(EdgeLocaleException):
    """The catalog is unusable or the default locale could not be assigned.

    Fatal to header-setting for the current request only.
    """


# =============================================================================
# Negotiation signals
# =============================================================================


class NegotiationException(EdgeLocaleException):
    """A negotiation signal could not be interpreted."""


class ExtractionError(NegotiationException):
    """The cookie header value is not string-shaped."""


class ParseError(NegotiationException):
    """The Accept-Language value is not string-shaped."""
