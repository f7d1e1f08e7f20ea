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
"""Negotiation configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from edgelocale.core.config import config_properties


@config_properties(prefix="edgelocale.negotiation")
@dataclass
class NegotiationProperties:
    """Configuration for locale negotiation (edgelocale.negotiation.*)."""

    cookie_name: str = "locale"
    supported: list[str] = field(default_factory=lambda: ["en", "es"])
    default_locale: str = "en"
    header_name: str = "X-Accept-Language"
