"""Shared fixtures: an app per test on a throwaway SQLite file."""
from __future__ import annotations

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from dayscore.core.config import Settings
from dayscore.core.errors import AuthError
from dayscore.main import create_app

FIXED_TODAY = "2024-03-15"


class FakeIdentityResolver:
    """Maps known tokens to user ids; anything else is rejected."""

    def __init__(self, tokens: Dict[str, str]) -> None:
        self.tokens = tokens
        self.calls: list[str] = []

    def resolve(self, token: str) -> str:
        self.calls.append(token)
        try:
            return self.tokens[token]
        except KeyError:
            raise AuthError("Invalid token") from None


@pytest.fixture
def db_url(tmp_path) -> str:
    return f"sqlite:///{tmp_path / 'days.db'}"


@pytest.fixture
def client(db_url):
    settings = Settings(DAYSCORE_DB_URL=db_url, DAYSCORE_AUTH_MODE="none")
    app = create_app(settings, clock=lambda: FIXED_TODAY)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def identity() -> FakeIdentityResolver:
    return FakeIdentityResolver({"token-a": "user-a", "token-b": "user-b"})


@pytest.fixture
def auth_client(db_url, identity):
    settings = Settings(DAYSCORE_DB_URL=db_url, DAYSCORE_AUTH_MODE="required")
    app = create_app(settings, identity_resolver=identity, clock=lambda: FIXED_TODAY)
    with TestClient(app) as c:
        yield c


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
