"""Shared fixtures: a fresh store per test and a client bound to it."""

import pytest
from fastapi.testclient import TestClient

from app.data.user_repo import UserRepo
from app.main import create_app
from app.service.user_service import UserService


@pytest.fixture
def user_repo():
    return UserRepo()


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def client(user_repo):
    with TestClient(create_app(user_repo)) as c:
        yield c


@pytest.fixture
def user_body():
    return {"first_name": "Ada", "last_name": "Lovelace", "bio": "first programmer"}
