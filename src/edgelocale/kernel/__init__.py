"""edgelocale kernel — shared exception types."""

from edgelocale.kernel.exceptions import (
    ConfigurationFault,
    EdgeLocaleException,
    ExtractionError,
    NegotiationException,
    ParseError,
)

__all__ = [
    "ConfigurationFault",
    "EdgeLocaleException",
    "ExtractionError",
    "NegotiationException",
    "ParseError",
]
