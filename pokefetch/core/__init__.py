"""
Core application engine.

The `FetchSession` coordinates one run: fetch the resource, decode it, print
it, then download and save its sprites.
"""

from .fetch_session import FetchSession

__all__ = ["FetchSession"]
