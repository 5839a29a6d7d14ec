"""
Storage Layer.

This package handles the persistence of the user configuration file.
"""

from .config_manager import ConfigManager

__all__ = ["ConfigManager"]
