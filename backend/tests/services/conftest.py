"""Service test fixtures — fakes for the collaborators of invoice actions.

Invariants:
    - RecordingCache and RecordingMutations append to one shared event log so
      tests can assert call ORDER (persist before revalidate)
    - failing_db simulates a persistence-layer exception on execute

Design Decisions:
    - Fakes over MagicMock for cache/mutations: assertions read as plain lists
    - AsyncMock for the session: only execute/commit/rollback are touched
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from dashboard.core.errors import InvoiceMutationError


class RecordingCache:
    def __init__(self, log: list):
        self.log = log
        self.revalidated: list[str] = []

    def revalidate(self, path: str) -> None:
        self.revalidated.append(path)
        self.log.append(("revalidate", path))


class RecordingMutations:
    def __init__(self, log: list, error: InvoiceMutationError | None = None):
        self.log = log
        self.error = error
        self.calls: list[tuple] = []

    async def _record(self, *call):
        self.calls.append(call)
        self.log.append(("persist", call[0]))
        if self.error:
            raise self.error

    async def create(self, payload):
        await self._record("create", payload)

    async def update(self, invoice_id, payload):
        await self._record("update", invoice_id, payload)

    async def delete(self, invoice_id):
        await self._record("delete", invoice_id)


@pytest.fixture
def event_log():
    return []


@pytest.fixture
def recording_cache(event_log):
    return RecordingCache(event_log)


@pytest.fixture
def recording_mutations(event_log):
    return RecordingMutations(event_log)


@pytest.fixture
def failing_db():
    db = AsyncMock()
    db.execute = AsyncMock(side_effect=OperationalError(
        "UPDATE invoices SET ...", {}, Exception("connection refused"),
    ))
    db.commit = AsyncMock()
    db.rollback = AsyncMock()
    return db
