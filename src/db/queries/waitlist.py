from typing import Optional, Dict
from src.db.base import execute_query_single, execute_query

def create_waitlist_table(conn) -> None:
    """Create the waitlist table if it does not exist yet"""
    execute_query(
        conn,
        """
        CREATE TABLE IF NOT EXISTS waitlist_users (
            email TEXT PRIMARY KEY CHECK (email = lower(email)),
            joined_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
        """,
        ()
    )
    conn.commit()

def insert_waitlist_entry_if_absent(conn, email: str) -> Optional[Dict]:
    """
    Insert a waitlist entry unless the email is already registered.
    Returns the new row, or None when the email already exists.
    """
    result = execute_query_single(
        conn,
        """
        INSERT INTO waitlist_users (email)
        VALUES (%s)
        ON CONFLICT (email) DO NOTHING
        RETURNING email, joined_at
        """,
        (email,)
    )
    conn.commit()
    return result

def count_waitlist_entries(conn) -> int:
    """Count registered waitlist entries"""
    result = execute_query_single(
        conn,
        """
        SELECT COUNT(*) AS count FROM waitlist_users
        """,
        ()
    )
    return result["count"] if result else 0

def ping(conn) -> None:
    execute_query_single(conn, "SELECT 1", ())
