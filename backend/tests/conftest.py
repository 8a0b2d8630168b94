from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from ledger.config import Settings
from ledger.database import Database
from ledger.main import create_app
from ledger.models import TransactionType
from ledger.services import TransactionService, UserService


@pytest.fixture
def database():
    database = Database("sqlite://")
    database.create_all()
    yield database
    database.dispose()


@pytest.fixture
def db(database):
    session = database.session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def user(db):
    return UserService(db).register("alice", "Alice", "alice@example.com", "s3cret")


@pytest.fixture
def other_user(db):
    return UserService(db).register("bob", "Bob", "bob@example.com", "hunter2")


@pytest.fixture
def add_tx(db):
    """Insert a transaction with an explicit date."""
    service = TransactionService(db)

    def _add(user_id: int, kind: TransactionType, amount, posted: date, category=None, description="entry"):
        return service.create_transaction(
            user_id=user_id,
            kind=kind,
            amount=amount,
            description=description,
            category=category,
            date_value=posted.isoformat(),
        )

    return _add


@pytest.fixture
def client():
    app = create_app(Settings(database_url="sqlite://", log_level="WARNING"))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    response = client.post(
        "/api/users/register",
        json={"username": "carol", "name": "Carol", "email": "carol@example.com", "password": "pw"},
    )
    assert response.status_code == 201
    return {"X-User-Id": str(response.json()["id"])}
