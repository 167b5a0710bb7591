# groupie/tracker/core/artists/store.py
"""
In-memory artists store backing the local artists API.
"""
from __future__ import annotations

import logging
import threading
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from groupie.tracker.contracts.artist import Artist

logger = logging.getLogger(__name__)

_artist_list = TypeAdapter(list[Artist])


class ArtistNotFound(KeyError):
    """Raised when no artist has the requested id."""

    def __init__(self, artist_id: object):
        self.artist_id = artist_id
        super().__init__(f"Artist '{artist_id}' not found")


def sample_artists() -> list[Artist]:
    return [
        Artist(
            id=1,
            name="Queen",
            members=["Freddie Mercury", "Brian May", "John Deacon", "Roger Taylor"],
            creation_date=1970,
            first_album="Queen",
            locations="London, UK",
            concert_dates="1973-07-13",
            relations="none",
        ),
        Artist(
            id=2,
            name="Linkin Park",
            members=[
                "Chester Bennington",
                "Mike Shinoda",
                "Brad Delson",
                "Dave Farrell",
                "Rob Bourdon",
                "Joe Hahn",
            ],
            creation_date=1996,
            first_album="Hybrid Theory",
            locations="Agoura Hills, California, USA",
            concert_dates="2000-10-24",
            relations="nu metal",
        ),
    ]


class ArtistStore:
    """Lock-protected list of artists with a monotonically increasing id counter."""

    def __init__(self, artists: list[Artist] | None = None) -> None:
        self._lock = threading.Lock()
        self._items: list[Artist] = list(artists or [])
        self._next = max((a.id for a in self._items), default=0) + 1

    @classmethod
    def from_file(cls, path: str | Path) -> ArtistStore:
        """Seed from a JSON array; fall back to the built-in samples on any problem."""
        path = Path(path)
        try:
            artists = _artist_list.validate_json(path.read_bytes())
        except FileNotFoundError:
            logger.info("No artists file at '%s', using sample data", path)
            artists = []
        except (OSError, ValidationError) as exc:
            logger.warning("Cannot load artists from '%s' (%s), using sample data", path, exc)
            artists = []

        if not artists:
            return cls(sample_artists())
        logger.info("Loaded %d artist(s) from '%s'", len(artists), path)
        return cls(artists)

    def list(self, name: str | None = None) -> list[Artist]:
        needle = (name or "").lower()
        with self._lock:
            return [a for a in self._items if not needle or needle in a.name.lower()]

    def get(self, artist_id: int) -> Artist:
        with self._lock:
            for a in self._items:
                if a.id == artist_id:
                    return a
        raise ArtistNotFound(artist_id)

    def create(self, artist: Artist) -> Artist:
        with self._lock:
            created = artist.model_copy(update={"id": self._next})
            self._next += 1
            self._items.append(created)
        logger.info("Created artist %d (%s)", created.id, created.name)
        return created

    def update(self, artist_id: int, artist: Artist) -> Artist:
        with self._lock:
            for i, a in enumerate(self._items):
                if a.id == artist_id:
                    updated = artist.model_copy(update={"id": artist_id})
                    self._items[i] = updated
                    return updated
        raise ArtistNotFound(artist_id)

    def delete(self, artist_id: int) -> None:
        with self._lock:
            for i, a in enumerate(self._items):
                if a.id == artist_id:
                    del self._items[i]
                    logger.info("Deleted artist %d", artist_id)
                    return
        raise ArtistNotFound(artist_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

