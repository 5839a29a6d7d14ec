"""
Data Models Layer.

This package contains Pydantic models that define the core data structures
used throughout the application: the decoded API resource, configuration
and per-run statistics.
"""

from .config import FetchConfig
from .pokemon import Pokemon, Sprites, Stat, StatInfo, parse_pokemon
from .session import FetchStats, SpriteResult

__all__ = [
    "FetchConfig",
    "FetchStats",
    "Pokemon",
    "SpriteResult",
    "Sprites",
    "Stat",
    "StatInfo",
    "parse_pokemon",
]
