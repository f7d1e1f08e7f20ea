"""edgelocale core — configuration."""

from edgelocale.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]
