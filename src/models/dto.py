#!/usr/bin/env python
"""
Pydantic DTOs for album records passed between the gateway and the views.

`AlbumFields` is the mutable part of a record (everything the edit form can
overwrite); `AlbumRecord` adds the store-assigned id.
"""

from __future__ import annotations

from pydantic import BaseModel


class AlbumFields(BaseModel):
    """Fields supplied by the create and save forms."""

    title: str
    artist: str
    price: float
    local_fg: bool = False


class AlbumRecord(AlbumFields):
    """A persisted album row."""

    id: int

    def fields(self) -> AlbumFields:
        return AlbumFields(
            title=self.title,
            artist=self.artist,
            price=self.price,
            local_fg=self.local_fg,
        )


__all__ = ["AlbumFields", "AlbumRecord"]
