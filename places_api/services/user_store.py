from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import Lock

from places_api.models.schemas import User
from places_api.observability.metrics import get_metrics
from places_api.services.errors import DuplicateRecordError

logger = logging.getLogger(__name__)

SAMPLE_USERS: tuple[User, ...] = (
    User(id="1", Firstname="Jyri", Surname="Kemppainen"),
    User(id="2", Firstname="Petri", Surname="Laitinen"),
)


class UserStore:
    """In-memory user records, kept in insertion order."""

    def __init__(self, initial: Iterable[User] = ()) -> None:
        self._lock = Lock()
        self._users: list[User] = []
        for user in initial:
            self._append(user)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_users(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def get_user(self, user_id: str) -> User | None:
        with self._lock:
            return self._find(user_id)

    def add_user(self, user: User) -> User:
        record = self._append(user)
        get_metrics().observe_store_mutation("user_created")
        logger.info("user_created", extra={"user_id": record.id})
        return record

    def _append(self, user: User) -> User:
        record = User(id=user.id, Firstname=user.Firstname, Surname=user.Surname)
        with self._lock:
            if self._find(record.id) is not None:
                raise DuplicateRecordError("User with this ID already exists")
            self._users.append(record)
        return record

    def _find(self, user_id: str) -> User | None:
        for user in self._users:
            if user.id == user_id:
                return user
        return None
