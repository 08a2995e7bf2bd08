"""Error taxonomy shared by the album gateway and the HTTP layer."""

from __future__ import annotations


class AlbumError(Exception):
    """Base class for every failure surfaced to an HTTP client."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AlbumError):
    """Bad id, bad price or a form that could not be decoded."""

    status_code = 400


class NotFoundError(AlbumError):
    # Reported as 500, same as any other failed fetch
    status_code = 500


class StorageError(AlbumError):
    """Connection or query failure reported by the database driver."""

    status_code = 500


__all__ = ["AlbumError", "ValidationError", "NotFoundError", "StorageError"]
