"""
API Layer.

This package handles all communication with the remote JSON API.
"""

from .client import PokeAPIClient

__all__ = ["PokeAPIClient"]
