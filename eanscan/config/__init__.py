"""
Configuration management for the EAN-13 scanline decoder.
"""

from eanscan.config.logging import configure_logging
from eanscan.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
