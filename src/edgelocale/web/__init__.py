"""edgelocale web — ASGI integration."""

from edgelocale.web.middleware import LocaleNegotiationMiddleware

__all__ = ["LocaleNegotiationMiddleware"]
