"""HTML rendering for the album pages."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from flask import render_template, send_from_directory
from jinja2 import Environment

from src.models.dto import AlbumRecord

logger = logging.getLogger(__name__)


class AlbumViews:
    """
    Holds the list and edit templates, loaded once when the app is built.

    A missing template raises `jinja2.TemplateNotFound` at construction so the
    process refuses to start rather than failing on the first request.
    """

    LIST_TEMPLATE = "page.html"
    EDIT_TEMPLATE = "edit.html"
    CREATE_PAGE = "create.html"

    def __init__(self, jinja_env: Environment, static_root: str):
        self._list_template = jinja_env.get_template(self.LIST_TEMPLATE)
        self._edit_template = jinja_env.get_template(self.EDIT_TEMPLATE)
        self.static_root = static_root
        create_path = os.path.join(static_root, self.CREATE_PAGE)
        if not os.path.isfile(create_path):
            raise FileNotFoundError(create_path)
        logger.info("Album templates loaded (static root %s)", static_root)

    def render_list(self, albums: Iterable[AlbumRecord], search_key: str = "") -> str:
        return render_template(self._list_template, albums=list(albums), search_key=search_key)

    def render_edit(self, album: AlbumRecord) -> str:
        return render_template(self._edit_template, album=album)

    def create_page(self):
        """The create form is plain markup, sent as-is."""
        return send_from_directory(self.static_root, self.CREATE_PAGE)

    def static_file(self, path: str):
        return send_from_directory(self.static_root, path)


__all__ = ["AlbumViews"]
