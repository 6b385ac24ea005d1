import json
import logging
import uuid

import pytest

from app.models.user import User
from app.service.user_service import (
    InvalidUserIdError,
    UpsertedUnknownUserError,
    UserNotFoundError,
    parse_user_id,
)
from app.service.validation import BodyDecodeError, MissingFieldsError


def _raw(payload) -> bytes:
    return json.dumps(payload).encode("utf-8")


_CANONICAL = "123e4567-e89b-12d3-a456-426614174000"


def test_parse_user_id_accepts_canonical_form():
    assert parse_user_id(_CANONICAL) == uuid.UUID(_CANONICAL)


@pytest.mark.parametrize(
    "raw",
    [
        _CANONICAL.upper(),
        "{" + _CANONICAL + "}",
        "urn:uuid:" + _CANONICAL,
        "URN:UUID:" + _CANONICAL,
        _CANONICAL.replace("-", ""),
    ],
)
def test_parse_user_id_accepts_other_standard_forms(raw):
    assert parse_user_id(raw) == uuid.UUID(_CANONICAL)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "123",
        "not-a-uuid",
        "123e4567-e89b-12d3-a456-42661417400z",
        "+" + "0" * 31,
        " " + "0" * 31,
        "0" * 16 + "_" + "0" * 15,
        "12-3e4567e89b12d3a456426614174000",
        "uuid:123e4567e89b12d3a456426614174000",
        "urn:123e4567e89b12d3a456426614174000",
        "{{" + _CANONICAL + "}}",
        "{" + _CANONICAL,
        "urn:uuid:{" + _CANONICAL + "}",
        _CANONICAL + "\n",
    ],
)
def test_parse_user_id_rejects_garbage(raw):
    with pytest.raises(InvalidUserIdError):
        parse_user_id(raw)


def test_create_mints_fresh_ids(user_service, user_body):
    ids = {user_service.create_user(_raw(user_body)).id for _ in range(50)}
    assert len(ids) == 50
    assert len(user_service.user_repo) == 50


def test_create_logs_and_reraises_validation_errors(user_service, caplog):
    with caplog.at_level(logging.ERROR, logger="app.service.user_service"):
        with pytest.raises(MissingFieldsError):
            user_service.create_user(_raw({"first_name": "A"}))
    assert "Request body validation error" in caplog.text
    assert len(user_service.user_repo) == 0


def test_get_user(user_service, user_body):
    created = user_service.create_user(_raw(user_body))
    assert user_service.get_user(str(created.id)) == created


def test_get_unknown_user(user_service):
    with pytest.raises(UserNotFoundError):
        user_service.get_user(str(uuid.uuid4()))


def test_update_existing_user(user_service, user_body):
    created = user_service.create_user(_raw(user_body))
    user_body["first_name"] = "Augusta"
    updated = user_service.update_user(str(created.id), _raw(user_body))
    assert updated.id == created.id
    assert user_service.get_user(str(created.id)).user.first_name == "Augusta"


def test_update_unknown_user_still_writes(user_service, user_body):
    user_id = uuid.uuid4()
    with pytest.raises(UpsertedUnknownUserError) as exc_info:
        user_service.update_user(str(user_id), _raw(user_body))
    assert exc_info.value.record.id == user_id
    assert user_service.user_repo.get(user_id) == User(**user_body)


def test_update_with_bad_body_does_not_write(user_service, user_body):
    created = user_service.create_user(_raw(user_body))
    with pytest.raises(BodyDecodeError):
        user_service.update_user(str(created.id), _raw({**user_body, "extra": "x"}))
    assert user_service.get_user(str(created.id)).user == User(**user_body)


def test_update_checks_id_before_body(user_service):
    with pytest.raises(InvalidUserIdError):
        user_service.update_user("nope", b"garbage")


def test_delete_user(user_service, user_body):
    created = user_service.create_user(_raw(user_body))
    user_service.delete_user(str(created.id))
    with pytest.raises(UserNotFoundError):
        user_service.delete_user(str(created.id))


def test_list_users(user_service, user_body):
    assert user_service.list_users() == []
    created = [user_service.create_user(_raw(user_body)) for _ in range(3)]
    assert sorted(r.id for r in user_service.list_users()) == sorted(r.id for r in created)


def test_update_with_malformed_id_does_not_write(user_service, user_body):
    with pytest.raises(InvalidUserIdError):
        user_service.update_user("+" + "0" * 31, _raw(user_body))
    assert len(user_service.user_repo) == 0
    assert not user_service.user_repo.exists(uuid.UUID(int=0))
