"""
Media Layer.

This package is responsible for downloading sprite images and writing them to disk.
"""

from .downloader import SpriteDownloader, close_connection_pool

__all__ = ["SpriteDownloader", "close_connection_pool"]
