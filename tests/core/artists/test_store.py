from __future__ import annotations

import json

import pytest

from groupie.tracker.contracts.artist import Artist
from groupie.tracker.core.artists.store import ArtistNotFound, ArtistStore


@pytest.fixture
def store() -> ArtistStore:
    return ArtistStore(
        [
            Artist(id=1, name="Queen", members=["Freddie Mercury"]),
            Artist(id=4, name="Queens of the Stone Age"),
        ]
    )


def test_list_filters_by_name(store):
    assert [a.id for a in store.list()] == [1, 4]
    assert [a.id for a in store.list("QUEENS")] == [4]
    assert store.list("abba") == []


def test_create_assigns_next_id(store):
    created = store.create(Artist(id=99, name="ABBA"))

    assert created.id == 5
    assert store.get(5).name == "ABBA"
    assert len(store) == 3


def test_update_keeps_id(store):
    updated = store.update(1, Artist(id=7, name="Queen + Adam Lambert"))

    assert updated.id == 1
    assert store.get(1).name == "Queen + Adam Lambert"


def test_delete(store):
    store.delete(1)

    with pytest.raises(ArtistNotFound):
        store.get(1)
    with pytest.raises(ArtistNotFound):
        store.delete(1)
    with pytest.raises(ArtistNotFound):
        store.update(1, Artist(name="x"))


def test_payload_uses_camel_case():
    payload = Artist(id=1, name="Queen", creation_date=1970, first_album="Queen").to_payload()

    assert payload["creationDate"] == 1970
    assert payload["firstAlbum"] == "Queen"
    assert "concertDates" in payload


def test_from_file(tmp_path):
    path = tmp_path / "artists.json"
    path.write_text(json.dumps([{"id": 3, "name": "ABBA", "firstAlbum": "Ring Ring"}]), encoding="utf-8")

    store = ArtistStore.from_file(path)

    assert store.get(3).first_album == "Ring Ring"
    assert store.create(Artist(name="Blur")).id == 4


@pytest.mark.parametrize("content", [None, "[]", "{not json", '[{"id": "x"}]'])
def test_from_file_falls_back_to_samples(tmp_path, content):
    path = tmp_path / "artists.json"
    if content is not None:
        path.write_text(content, encoding="utf-8")

    store = ArtistStore.from_file(path)

    assert [a.name for a in store.list()] == ["Queen", "Linkin Park"]
