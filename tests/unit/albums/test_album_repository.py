import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from src.errors import NotFoundError, StorageError
from src.models.dto import AlbumFields


def _fields(**overrides):
    data = {"title": "OK Computer", "artist": "Radiohead", "price": 19.99, "local_fg": False}
    data.update(overrides)
    return AlbumFields(**data)


@pytest.mark.unit
def test_create_then_get_returns_same_fields(repository, db_session):
    album_id = repository.create_album(_fields())

    album = repository.get_album(album_id)
    assert album.id == album_id
    assert album.title == "OK Computer"
    assert album.artist == "Radiohead"
    assert album.price == pytest.approx(19.99)
    assert album.local_fg is False


@pytest.mark.unit
def test_create_assigns_distinct_ids(repository, db_session):
    first = repository.create_album(_fields(title="Kid A"))
    second = repository.create_album(_fields(title="Amnesiac"))
    assert first != second


@pytest.mark.unit
def test_update_overwrites_all_mutable_fields(repository, db_session):
    album_id = repository.create_album(_fields())

    returned = repository.update_album(
        album_id, _fields(title="OK Computer OKNOTOK", artist="RADIOHEAD", price=24.99, local_fg=True)
    )

    assert returned == album_id
    album = repository.get_album(album_id)
    assert album.title == "OK Computer OKNOTOK"
    assert album.artist == "RADIOHEAD"
    assert album.price == pytest.approx(24.99)
    assert album.local_fg is True


@pytest.mark.unit
def test_update_missing_id_is_a_noop(repository, db_session, factories):
    existing = factories.AlbumFactory(title="Untouched")

    assert repository.update_album(424242, _fields(title="Ghost")) == 424242

    titles = [album.title for album in repository.list_albums("")]
    assert titles == ["Untouched"]
    assert repository.get_album(existing.id).title == "Untouched"


@pytest.mark.unit
def test_delete_then_get_raises_not_found(repository, db_session):
    album_id = repository.create_album(_fields())

    assert repository.delete_album(album_id) == album_id

    with pytest.raises(NotFoundError) as excinfo:
        repository.get_album(album_id)
    assert "no such album" in str(excinfo.value)


@pytest.mark.unit
def test_delete_twice_is_silent(repository, db_session, factories):
    album = factories.AlbumFactory()
    repository.delete_album(album.id)
    repository.delete_album(album.id)
    assert repository.list_albums(None) == []


@pytest.mark.unit
@pytest.mark.parametrize("artist_filter", [None, "", "null"])
def test_list_without_filter_returns_every_row(repository, factories, artist_filter):
    factories.AlbumFactory(artist="Radiohead")
    factories.AlbumFactory(artist="Portishead")
    factories.AlbumFactory(artist="Massive Attack")

    albums = repository.list_albums(artist_filter)
    assert sorted(a.artist for a in albums) == ["Massive Attack", "Portishead", "Radiohead"]


@pytest.mark.unit
def test_list_filter_is_case_insensitive_substring(repository, factories):
    factories.AlbumFactory(artist="Radiohead")
    factories.AlbumFactory(artist="Portishead")
    factories.AlbumFactory(artist="Massive Attack")

    assert sorted(a.artist for a in repository.list_albums("HEAD")) == ["Portishead", "Radiohead"]
    assert [a.artist for a in repository.list_albums("radio")] == ["Radiohead"]
    assert repository.list_albums("Björk") == []


@pytest.mark.unit
@settings(max_examples=25, deadline=None, suppress_health_check=[HealthCheck.function_scoped_fixture])
@given(key=st.text(alphabet="abcdeXYZ ", min_size=1, max_size=4))
def test_list_filter_matches_substring_rule(repository, factories, key):
    from src.database.db_manager import Album, db

    db.session.query(Album).delete()
    db.session.commit()
    artists = ["abc", "ABCDE", "xyz band", "Zed", "a b c"]
    for artist in artists:
        factories.AlbumFactory(artist=artist)

    expected = sorted(a for a in artists if key.lower() in a.lower())
    assert sorted(a.artist for a in repository.list_albums(key)) == expected


@pytest.mark.unit
def test_get_missing_id_raises_not_found(repository, db_session):
    with pytest.raises(NotFoundError):
        repository.get_album(999999)


@pytest.mark.unit
def test_query_failure_surfaces_storage_error(repository, db_session):
    from src.database.db_manager import db

    db.drop_all()

    with pytest.raises(StorageError) as excinfo:
        repository.list_albums("")
    assert "list_albums" in excinfo.value.message

    with pytest.raises(StorageError):
        repository.create_album(_fields())


@pytest.mark.unit
def test_ping_succeeds_against_reachable_store(repository):
    repository.ping()


@pytest.mark.unit
def test_operations_are_counted(repository, db_session):
    from src.observability.metrics import album_operation_count

    before_create = album_operation_count("create")
    before_missing = album_operation_count("get", "not_found")

    repository.create_album(_fields())
    with pytest.raises(NotFoundError):
        repository.get_album(31337)

    assert album_operation_count("create") == before_create + 1
    assert album_operation_count("get", "not_found") == before_missing + 1
