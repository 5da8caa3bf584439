"""API test fixtures — sessions that fail at the persistence layer."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from dashboard.infrastructure.database import get_db
from dashboard.main import app


@pytest.fixture
def broken_db(client):
    """Route the next requests to a session whose every statement fails."""
    db = AsyncMock()
    db.execute = AsyncMock(side_effect=OperationalError(
        "INSERT INTO invoices ...", {}, Exception("connection refused"),
    ))

    async def override():
        yield db

    app.dependency_overrides[get_db] = override
    return db
