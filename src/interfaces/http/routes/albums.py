"""List, search, create, edit and delete album pages."""

from __future__ import annotations

import logging
import math
import re

from flask import Blueprint, current_app, redirect, request

from src.domain.albums import AlbumRepository
from src.errors import ValidationError
from src.interfaces.http.views import AlbumViews
from src.models.dto import AlbumFields

logger = logging.getLogger(__name__)

album_bp = Blueprint('album_bp', __name__)

VIEW_URL = '/view/'

_ID_PATTERN = re.compile(r'[+-]?[0-9]+')
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1


def get_album_repository() -> AlbumRepository:
    return current_app.extensions['album_repository']


def get_album_views() -> AlbumViews:
    return current_app.extensions['album_views']


def parse_album_id(raw: str) -> int:
    """Base-10 signed 64-bit integer, nothing else."""
    if not _ID_PATTERN.fullmatch(raw or ''):
        raise ValidationError("Invalid album ID")
    album_id = int(raw, 10)
    if not _INT64_MIN <= album_id <= _INT64_MAX:
        raise ValidationError("Invalid album ID")
    return album_id


def parse_price(raw: str) -> float:
    try:
        price = float(raw)
    except (TypeError, ValueError):
        raise ValidationError("Invalid price")
    if not math.isfinite(price):
        raise ValidationError("Invalid price")
    return price


def parse_album_form(form) -> AlbumFields:
    # Unchecked checkboxes are omitted from the submission
    return AlbumFields(
        title=form.get('title', ''),
        artist=form.get('artist', ''),
        price=parse_price(form.get('price')),
        local_fg=form.get('local_fg') == 'on',
    )


def _redirect_to_list():
    # 303 so a browser refresh repeats the GET, not the form submission
    return redirect(VIEW_URL, code=303)


@album_bp.route('/view', methods=['GET'])
@album_bp.route('/view/', methods=['GET'])
def view_albums():
    albums = get_album_repository().list_albums("")
    return get_album_views().render_list(albums)


@album_bp.route('/view/<path:key>', methods=['GET'])
def search_albums(key: str):
    """Albums whose artist contains `key`; Werkzeug has already percent-decoded it."""
    albums = get_album_repository().list_albums(key)
    return get_album_views().render_list(albums, search_key=key)


@album_bp.route('/create', methods=['GET'])
@album_bp.route('/create/', methods=['GET'])
def create_form():
    return get_album_views().create_page()


@album_bp.route('/create', methods=['POST'])
@album_bp.route('/create/', methods=['POST'])
def create_album():
    fields = parse_album_form(request.form)
    album_id = get_album_repository().create_album(fields)
    logger.debug("create form stored album %s", album_id)
    return _redirect_to_list()


@album_bp.route('/edit/<raw_id>', methods=['GET'])
def edit_form(raw_id: str):
    album_id = parse_album_id(raw_id)
    album = get_album_repository().get_album(album_id)
    return get_album_views().render_edit(album)


@album_bp.route('/save/<raw_id>', methods=['POST'])
def save_album(raw_id: str):
    fields = parse_album_form(request.form)
    album_id = parse_album_id(raw_id)
    get_album_repository().update_album(album_id, fields)
    return _redirect_to_list()


@album_bp.route('/delete/<raw_id>', methods=['GET'])
def delete_album(raw_id: str):
    album_id = parse_album_id(raw_id)
    get_album_repository().delete_album(album_id)
    return _redirect_to_list()


__all__ = ['album_bp', 'parse_album_id', 'parse_price', 'parse_album_form']
