from src.core.exceptions import EmailValidationError, StoreError
from src.core.waitlist.normalizer import normalize_email
from src.core.waitlist.results import (
    AlreadyExists,
    AlreadyMember,
    CountResult,
    Invalid,
    Joined,
    JoinResult,
    StoreFailure,
)
from src.db.store import MembershipStore
from src.utils.logger import get_logger
from src.utils.metrics import WAITLIST_JOIN_COUNT, WAITLIST_MEMBER_COUNT

logger = get_logger(__name__)

STORE_FAILURE_MESSAGE = "The waitlist is temporarily unavailable. Please try again later."


def join_waitlist(store: MembershipStore, raw_email) -> JoinResult:
    """
    Register an email on the waitlist.

    Every outcome, including infrastructure failures, is returned as a
    result value. No retries happen here.
    """
    try:
        email = normalize_email(raw_email)
    except EmailValidationError as e:
        logger.info(f"Rejected waitlist join: {e.message}")
        WAITLIST_JOIN_COUNT.labels(outcome="invalid").inc()
        return Invalid(field=e.field, message=e.message)

    try:
        outcome = store.insert_if_absent(email)
    except StoreError as e:
        logger.error(f"Waitlist insert failed: {str(e)}")
        WAITLIST_JOIN_COUNT.labels(outcome="store_failure").inc()
        return StoreFailure(message=STORE_FAILURE_MESSAGE)

    if isinstance(outcome, AlreadyExists):
        logger.info("Waitlist join for an existing member")
        WAITLIST_JOIN_COUNT.labels(outcome="already_member").inc()
        return AlreadyMember(email=email)

    WAITLIST_JOIN_COUNT.labels(outcome="joined").inc()
    count = get_member_count(store)
    if isinstance(count, StoreFailure):
        # The entry is committed at this point; report the join without a count
        logger.warning("Joined waitlist but the member count could not be read")
        return Joined(entry=outcome.entry, count=None)

    logger.info(f"New waitlist member, total {count}")
    return Joined(entry=outcome.entry, count=count)


def get_member_count(store: MembershipStore) -> CountResult:
    """Read the current number of waitlist members"""
    try:
        count = store.count()
    except StoreError as e:
        logger.error(f"Waitlist count failed: {str(e)}")
        return StoreFailure(message=STORE_FAILURE_MESSAGE)

    WAITLIST_MEMBER_COUNT.set(count)
    return count
