"""Map album errors to plain-text HTTP responses."""

from __future__ import annotations

import logging

from flask import Flask, Response, request

from src.errors import AlbumError

logger = logging.getLogger(__name__)


def _text_response(message: str, status: int) -> Response:
    return Response(f"{message}\n", status=status, mimetype="text/plain")


def register_error_handlers(app: Flask) -> None:
    """Every AlbumError ends the request with its status and message."""

    @app.errorhandler(AlbumError)
    def _album_error(exc: AlbumError):
        status = exc.status_code
        if status >= 500:
            logger.error("%s %s failed: %s", request.method, request.path, exc.message)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.path, exc.message)
        return _text_response(exc.message, status)


__all__ = ["register_error_handlers"]
