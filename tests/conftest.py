import os

# Settings are read at import time; keep tests off the database
os.environ.setdefault("WAITLIST_STORE", "memory")
os.environ.setdefault("STORE_TIMEOUT_SECONDS", "1")

import pytest

from src.db.store import InMemoryMembershipStore


@pytest.fixture
def store():
    return InMemoryMembershipStore()
