from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from src.database.db_manager import Album, check_connection, db
from src.errors import NotFoundError, StorageError
from src.models.dto import AlbumFields, AlbumRecord
from src.observability.metrics import record_album_operation


logger = logging.getLogger(__name__)

# Search keys that mean "no filter"
_MATCH_ALL_KEYS = {"", "null"}


class AlbumRepository:
    """
    Gateway over the `album` table.

    Every method is a single statement committed on its own; failures roll the
    session back and surface as StorageError carrying the driver message.
    """

    def ping(self) -> None:
        check_connection()

    def list_albums(self, artist_filter: Optional[str] = None) -> List[AlbumRecord]:
        """All albums, or those whose artist contains `artist_filter` (case-insensitive)."""
        key = artist_filter or ""
        try:
            query = Album.query
            if key not in _MATCH_ALL_KEYS:
                query = query.filter(Album.artist.ilike(f"%{key}%"))
            albums = [row.to_record() for row in query.all()]
        except SQLAlchemyError as e:
            raise self._failure("list", f"list_albums {key!r}", e) from e
        record_album_operation("list")
        return albums

    def get_album(self, album_id: int) -> AlbumRecord:
        try:
            row = db.session.get(Album, album_id)
        except SQLAlchemyError as e:
            raise self._failure("get", f"get_album {album_id}", e) from e
        if row is None:
            record_album_operation("get", "not_found")
            raise NotFoundError(f"get_album {album_id}: no such album")
        record_album_operation("get")
        return row.to_record()

    def create_album(self, fields: AlbumFields) -> int:
        """Insert a row and return the id the store assigned to it."""
        row = Album(
            title=fields.title,
            artist=fields.artist,
            price=fields.price,
            local_fg=fields.local_fg,
        )
        try:
            db.session.add(row)
            db.session.commit()
        except SQLAlchemyError as e:
            raise self._failure("create", "create_album", e) from e
        record_album_operation("create")
        logger.info("Created album %s (%s - %s)", row.id, fields.artist, fields.title)
        return row.id

    def update_album(self, album_id: int, fields: AlbumFields) -> int:
        """Overwrite every mutable field; a missing id updates nothing and is not an error."""
        try:
            affected = Album.query.filter_by(id=album_id).update(
                {
                    Album.title: fields.title,
                    Album.artist: fields.artist,
                    Album.price: fields.price,
                    Album.local_fg: fields.local_fg,
                }
            )
            db.session.commit()
        except SQLAlchemyError as e:
            raise self._failure("update", f"update_album {album_id}", e) from e
        record_album_operation("update")
        if affected == 0:
            logger.debug("update_album %s matched no rows", album_id)
        else:
            logger.info("Updated album %s", album_id)
        return album_id

    def delete_album(self, album_id: int) -> int:
        """Remove the row; deleting an id that does not exist is a no-op."""
        try:
            affected = Album.query.filter_by(id=album_id).delete()
            db.session.commit()
        except SQLAlchemyError as e:
            raise self._failure("delete", f"delete_album {album_id}", e) from e
        record_album_operation("delete")
        if affected:
            logger.info("Deleted album %s", album_id)
        return album_id

    @staticmethod
    def _failure(operation: str, context: str, exc: SQLAlchemyError) -> StorageError:
        db.session.rollback()
        record_album_operation(operation, "error")
        logger.error("%s failed: %s", context, exc)
        return StorageError(f"{context}: {exc}")


__all__ = ["AlbumRepository"]
