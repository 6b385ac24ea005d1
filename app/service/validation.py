from __future__ import annotations

"""Decoding and validation of user request bodies.

The body must be a JSON object that only uses the known user fields.
Required fields are checked for *presence*: a key with a non-null value
passes, even when the value is an empty string.
"""

import json
from typing import Iterable

from app.models.user import User

USER_FIELDS = ("first_name", "last_name", "bio")
REQUIRED_FIELDS = USER_FIELDS

MISSING_FIELDS_MESSAGE = "please provide FirstName LastName and bio for the user"


class RequestBodyError(ValueError):
    pass


class BodyDecodeError(RequestBodyError):
    """The body is not JSON, not an object, or has unknown/mistyped fields."""


class MissingFieldsError(RequestBodyError):
    def __init__(self, missing: list[str]):
        super().__init__(MISSING_FIELDS_MESSAGE)
        self.missing = missing


def decode_user_body(raw: bytes) -> dict:
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BodyDecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise BodyDecodeError("request body must be a JSON object")

    for key, value in data.items():
        if key not in USER_FIELDS:
            raise BodyDecodeError(f"unknown field {key!r}")
        if value is not None and not isinstance(value, str):
            raise BodyDecodeError(f"field {key!r} must be a string")
    return data


def parse_user_body(raw: bytes, required: Iterable[str] = REQUIRED_FIELDS) -> User:
    data = decode_user_body(raw)

    missing = [name for name in required if data.get(name) is None]
    if missing:
        raise MissingFieldsError(missing)

    # Optional fields that were left out or sent as null fall back to "".
    return User(**{name: data.get(name) or "" for name in USER_FIELDS})
