from __future__ import annotations

"""Service layer for the user resource.

Routers hand over raw path ids and raw bodies; this layer parses them,
applies the validation rules and talks to the store. Failures are raised
as exceptions and mapped to HTTP responses by the web layer.
"""

import logging
import re
import uuid
from typing import List

from app.data.user_repo import UserRepo
from app.models.user import User, UserRecord
from app.service.validation import RequestBodyError, parse_user_body

logger = logging.getLogger(__name__)


class InvalidUserIdError(ValueError):
    pass


class UserNotFoundError(LookupError):
    def __init__(self, user_id: uuid.UUID):
        super().__init__(f"user {user_id} not found")
        self.user_id = user_id


class UpsertedUnknownUserError(UserNotFoundError):
    """Raised by ``update_user`` after it stored a user under an id that was not known before.

    The write is not rolled back; ``record`` holds what was stored.
    """

    def __init__(self, record: UserRecord):
        super().__init__(record.id)
        self.record = record


_HEX36 = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"

# Hyphenated, optionally urn:uuid: prefixed; braced; or 32 bare hex digits.
_USER_ID_RE = re.compile(
    r"(?:[uU][rR][nN]:[uU][uU][iI][dD]:)?" + _HEX36
    + r"|\{" + _HEX36 + r"\}"
    + r"|[0-9a-fA-F]{32}"
)


def parse_user_id(raw_id: str) -> uuid.UUID:
    if not isinstance(raw_id, str) or _USER_ID_RE.fullmatch(raw_id) is None:
        raise InvalidUserIdError(f"invalid user id {raw_id!r}")
    if len(raw_id) == 45:
        raw_id = raw_id[9:]
    return uuid.UUID(raw_id)


class UserService:
    def __init__(self, user_repo: UserRepo):
        self.user_repo = user_repo

    def list_users(self) -> List[UserRecord]:
        return [UserRecord(id=user_id, user=user) for user_id, user in self.user_repo.list()]

    def get_user(self, raw_id: str) -> UserRecord:
        user_id = parse_user_id(raw_id)
        user = self.user_repo.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserRecord(id=user_id, user=user)

    def create_user(self, body: bytes) -> UserRecord:
        user = self._parse_body(body)
        user_id = uuid.uuid4()
        self.user_repo.put(user_id, user)
        return UserRecord(id=user_id, user=user)

    def update_user(self, raw_id: str, body: bytes) -> UserRecord:
        """Replace the user stored under ``raw_id``.

        The write happens whether or not the id existed; an unknown id is
        still reported with ``UpsertedUnknownUserError``.
        """
        user_id = parse_user_id(raw_id)
        user = self._parse_body(body)
        record = UserRecord(id=user_id, user=user)
        if not self.user_repo.replace(user_id, user):
            raise UpsertedUnknownUserError(record)
        return record

    def delete_user(self, raw_id: str) -> None:
        user_id = parse_user_id(raw_id)
        if not self.user_repo.delete(user_id):
            raise UserNotFoundError(user_id)

    @staticmethod
    def _parse_body(body: bytes) -> User:
        try:
            return parse_user_body(body)
        except RequestBodyError as e:
            logger.error("Request body validation error: %s", e)
            raise
