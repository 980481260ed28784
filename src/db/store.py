from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, ContextManager, Dict, Optional
import threading

import psycopg2

from src.config.settings import settings
from src.core.exceptions import StoreError
from src.core.waitlist.results import AlreadyExists, Inserted, InsertOutcome, WaitlistEntry
from src.db.base import get_db
from src.db.queries import waitlist as queries
from src.utils.logger import get_logger
from src.utils.metrics import STORE_OPERATION_DURATION, track_time

logger = get_logger(__name__)


class MembershipStore(ABC):
    """Durable set of normalized waitlist emails"""

    @abstractmethod
    def insert_if_absent(self, email: str) -> InsertOutcome:
        """
        Atomically register `email` unless it is already present.

        Under concurrent calls with the same email exactly one caller
        receives Inserted, every other caller receives AlreadyExists.
        """

    @abstractmethod
    def count(self) -> int:
        ...

    @abstractmethod
    def ping(self) -> None:
        ...

    def initialize(self) -> None:
        """Prepare backing storage, called once at startup"""


class PostgresMembershipStore(MembershipStore):
    """
    Store backed by the waitlist_users table.

    Uniqueness is enforced by the primary key; INSERT ... ON CONFLICT DO
    NOTHING makes check-and-insert a single atomic statement.
    """

    def __init__(self, connection_factory: Callable[[], ContextManager] = get_db):
        self._connect = connection_factory

    def initialize(self) -> None:
        try:
            with self._connect() as conn:
                queries.create_waitlist_table(conn)
        except psycopg2.Error as e:
            raise StoreError(f"Failed to create waitlist table: {e}") from e

    @track_time(STORE_OPERATION_DURATION.labels(backend="postgres", operation="insert"))
    def insert_if_absent(self, email: str) -> InsertOutcome:
        try:
            with self._connect() as conn:
                row = queries.insert_waitlist_entry_if_absent(conn, email)
        except psycopg2.Error as e:
            raise StoreError(f"Failed to insert waitlist entry: {e}") from e

        if row is None:
            return AlreadyExists(email=email)
        return Inserted(entry=WaitlistEntry(email=row["email"], joined_at=row["joined_at"]))

    @track_time(STORE_OPERATION_DURATION.labels(backend="postgres", operation="count"))
    def count(self) -> int:
        try:
            with self._connect() as conn:
                return queries.count_waitlist_entries(conn)
        except psycopg2.Error as e:
            raise StoreError(f"Failed to count waitlist entries: {e}") from e

    @track_time(STORE_OPERATION_DURATION.labels(backend="postgres", operation="ping"))
    def ping(self) -> None:
        try:
            with self._connect() as conn:
                queries.ping(conn)
        except psycopg2.Error as e:
            raise StoreError(f"Database unreachable: {e}") from e


class InMemoryMembershipStore(MembershipStore):
    """
    Process-local store for development and tests.

    Inserts go through a mutex acquired with a bounded timeout. count()
    reads without the lock and may lag a concurrent insert.
    """

    def __init__(self, timeout: Optional[float] = None):
        self._entries: Dict[str, WaitlistEntry] = {}
        self._lock = threading.Lock()
        self._timeout = settings.STORE_TIMEOUT_SECONDS if timeout is None else timeout

    @track_time(STORE_OPERATION_DURATION.labels(backend="memory", operation="insert"))
    def insert_if_absent(self, email: str) -> InsertOutcome:
        if not self._lock.acquire(timeout=self._timeout):
            raise StoreError("Timed out waiting for the membership store")
        try:
            if email in self._entries:
                return AlreadyExists(email=email)
            entry = WaitlistEntry(email=email, joined_at=datetime.now(timezone.utc))
            self._entries[email] = entry
            return Inserted(entry=entry)
        finally:
            self._lock.release()

    @track_time(STORE_OPERATION_DURATION.labels(backend="memory", operation="count"))
    def count(self) -> int:
        return len(self._entries)

    @track_time(STORE_OPERATION_DURATION.labels(backend="memory", operation="ping"))
    def ping(self) -> None:
        return None


def create_membership_store(backend: str = None) -> MembershipStore:
    """Build the store selected by WAITLIST_STORE"""
    backend = (backend or settings.WAITLIST_STORE).lower()
    if backend == "postgres":
        return PostgresMembershipStore()
    if backend == "memory":
        logger.warning("Using in-memory waitlist store, entries will not survive a restart")
        return InMemoryMembershipStore()
    raise ValueError(f"Unknown waitlist store backend: {backend}")
