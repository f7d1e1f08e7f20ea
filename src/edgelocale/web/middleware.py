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
"""LocaleNegotiationMiddleware — pure ASGI middleware that negotiates the request locale."""

from __future__ import annotations

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from edgelocale.config.negotiation import NegotiationProperties
from edgelocale.i18n.catalog import LocaleCatalog
from edgelocale.i18n.locale import LocaleResolver, NegotiatingLocaleResolver


class LocaleNegotiationMiddleware:
    """Negotiates a locale for every HTTP request.

    Downstream handlers see the locale as ``request.state.locale`` and as the
    configured custom request header; the response carries it in
    ``Content-Language`` unless the handler set one.
    """

    def __init__(
        self,
        app: ASGIApp,
        properties: NegotiationProperties | None = None,
        resolver: LocaleResolver | None = None,
    ) -> None:
        self.app = app
        props = properties or NegotiationProperties()
        self._header = props.header_name.lower().encode("latin-1")
        self._resolver = resolver or NegotiatingLocaleResolver(
            LocaleCatalog.from_properties(props), props.cookie_name
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        locale = self._resolver.resolve_locale(Request(scope))

        scope = dict(scope)
        scope["headers"] = [(k, v) for k, v in scope.get("headers", []) if k != self._header]
        scope["headers"].append((self._header, locale.encode("latin-1")))
        state = dict(scope.get("state") or {})
        state["locale"] = locale
        scope["state"] = state

        async def _send(message: Message) -> None:
            if message["type"] == "http.response.start":
                MutableHeaders(scope=message).setdefault("content-language", locale)
            await send(message)

        await self.app(scope, receive, _send)
