"""edgelocale logging — logging port and structlog adapter."""

from edgelocale.logging.port import LoggingPort
from edgelocale.logging.structlog_adapter import StructlogAdapter

__all__ = ["LoggingPort", "StructlogAdapter"]
