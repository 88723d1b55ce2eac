from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import app


def _matches(doc, query):
    for field, cond in query.items():
        if isinstance(cond, dict) and "$in" in cond:
            if doc.get(field) not in cond["$in"]:
                return False
        elif doc.get(field) != cond:
            return False
    return True


def _make_mock_db(store):
    """Mock MongoDB whose users collection reads and writes the `store` list.

    Supports the calls the users service makes: insert_one, delete_many
    (with $in) and find_one (equality).
    """

    async def insert_one(doc):
        stored = {**doc, "_id": ObjectId()}
        store.append(stored)
        return MagicMock(inserted_id=stored["_id"])

    async def delete_many(query):
        removed = [d for d in store if _matches(d, query)]
        for d in removed:
            store.remove(d)
        return MagicMock(deleted_count=len(removed))

    async def find_one(query):
        return next((d for d in store if _matches(d, query)), None)

    mock_users = MagicMock()
    mock_users.insert_one = AsyncMock(side_effect=insert_one)
    mock_users.delete_many = AsyncMock(side_effect=delete_many)
    mock_users.find_one = AsyncMock(side_effect=find_one)

    mock_db = MagicMock()
    mock_db.users = mock_users
    return mock_db


@pytest.fixture
def user_store():
    return []


@pytest.fixture
def mock_db(user_store):
    mock_db = _make_mock_db(user_store)
    with patch("app.users.service.get_database", return_value=mock_db):
        yield mock_db


@pytest.fixture
def make_settings():
    """Build Settings without reading .env files; kwargs win over the environment."""

    def _make(**overrides):
        values = {
            "MONGODB_URI": "mongodb://localhost:27017/lead_management_test",
            "DATABASE_NAME": "lead_management",
            "ADMIN_NAME": None,
            "ADMIN_EMAIL": None,
            "ADMIN_PASSWORD": None,
            "TEAM_LEADER_NAME": None,
            "TEAM_LEADER_EMAIL": None,
            "TEAM_LEADER_PASSWORD": None,
            "HR_NAME": None,
            "HR_EMAIL": None,
            "HR_PASSWORD": None,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
async def client(mock_db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
