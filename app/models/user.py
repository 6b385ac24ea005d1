from __future__ import annotations
from dataclasses import dataclass
from uuid import UUID

@dataclass(frozen=True)
class User:
    first_name: str
    last_name: str
    bio: str

    def to_dict(self) -> dict[str, str]:
        return {"first_name": self.first_name, "last_name": self.last_name, "bio": self.bio}


@dataclass(frozen=True)
class UserRecord:
    """A stored user together with the id it is keyed by.

    The wire form is flat: ``{"id": ..., "first_name": ..., "last_name": ..., "bio": ...}``.
    """
    id: UUID
    user: User

    def to_dict(self) -> dict[str, str]:
        return {"id": str(self.id), **self.user.to_dict()}
