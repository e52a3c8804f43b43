from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock

from places_api.models.schemas import Place
from places_api.observability.metrics import get_metrics
from places_api.services.errors import RecordNotFoundError

logger = logging.getLogger(__name__)

SAMPLE_PLACES: tuple[Place, ...] = (
    Place(id="1", name="Central Park", location="New York"),
    Place(id="2", name="Eiffel Tower", location="Paris"),
)


class PlaceStore:
    """In-memory place records keyed by id, kept in insertion order.

    ``upsert_place`` replaces a record in its existing position; new ids
    are appended.
    """

    def __init__(self, initial: Iterable[Place] = ()) -> None:
        self._lock = Lock()
        self._places: list[Place] = []
        for place in initial:
            self._store(Place(id=place.id, name=place.name, location=place.location))

    def __len__(self) -> int:
        with self._lock:
            return len(self._places)

    def list_places(self) -> list[Place]:
        with self._lock:
            return list(self._places)

    def get_place(self, place_id: str) -> Place | None:
        with self._lock:
            index = self._index_of(place_id)
            return None if index is None else self._places[index]

    def upsert_place(self, place_id: str, name: str, location: str) -> tuple[Place, bool]:
        """Store ``place_id`` and return ``(record, created)``."""

        record = Place(id=place_id, name=name, location=location)
        created = self._store(record)

        kind = "place_created" if created else "place_updated"
        get_metrics().observe_store_mutation(kind)
        logger.info(kind, extra={"place_id": place_id})
        return record, created

    def delete_place(self, place_id: str) -> Place:
        with self._lock:
            index = self._index_of(place_id)
            if index is None:
                raise RecordNotFoundError("Place not found")
            removed = self._places.pop(index)

        get_metrics().observe_store_mutation("place_deleted")
        logger.info("place_deleted", extra={"place_id": place_id})
        return removed

    def _store(self, record: Place) -> bool:
        with self._lock:
            index = self._index_of(record.id)
            if index is None:
                self._places.append(record)
                return True
            self._places[index] = record
            return False

    def _index_of(self, place_id: str) -> int | None:
        for index, place in enumerate(self._places):
            if place.id == place_id:
                return index
        return None
