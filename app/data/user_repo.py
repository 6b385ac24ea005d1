from __future__ import annotations

import threading
from typing import Dict, List, Optional, Tuple
from uuid import UUID

from app.models.user import User

class UserRepo:
    """In-memory user store, keyed by UUID.

    Route functions run on a threadpool, so every access goes through one lock.
    Nothing survives a restart.
    """

    def __init__(self) -> None:
        self._users: Dict[UUID, User] = {}
        self._lock = threading.Lock()

    def get(self, user_id: UUID) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def exists(self, user_id: UUID) -> bool:
        with self._lock:
            return user_id in self._users

    def put(self, user_id: UUID, user: User) -> None:
        with self._lock:
            self._users[user_id] = user

    def replace(self, user_id: UUID, user: User) -> bool:
        """Store ``user`` under ``user_id`` and report whether the id was already there."""
        with self._lock:
            existed = user_id in self._users
            self._users[user_id] = user
        return existed

    def delete(self, user_id: UUID) -> bool:
        with self._lock:
            return self._users.pop(user_id, None) is not None

    def list(self) -> List[Tuple[UUID, User]]:
        with self._lock:
            return list(self._users.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
