"""Album persistence."""

from .repository import AlbumRepository

__all__ = ["AlbumRepository"]
