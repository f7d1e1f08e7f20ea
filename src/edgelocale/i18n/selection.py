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
"""Candidate selection by weight."""

from __future__ import annotations

from collections.abc import Sequence

from edgelocale.i18n.ranges import LanguageRange


def select_locale(candidates: Sequence[LanguageRange]) -> str | None:
    """Return the locale with the highest weight, or ``None`` if there is none.

    Among equal weights the candidate listed last wins: ``sorted`` is stable,
    so equal-weight entries keep their input order and the later one ends
    up at the tail.
    """
    if not candidates:
        return None
    return sorted(candidates, key=lambda r: r.weight)[-1].locale
