from functools import lru_cache

from src.db.store import MembershipStore, create_membership_store

@lru_cache()
def get_membership_store() -> MembershipStore:
    """Process-wide membership store, overridable in tests"""
    return create_membership_store()
