"""Typed configuration property classes."""

from edgelocale.config.logging import LoggingProperties
from edgelocale.config.negotiation import NegotiationProperties

__all__ = ["LoggingProperties", "NegotiationProperties"]
