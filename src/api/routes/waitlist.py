from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from typing import Dict, Any, Optional

from src.api.dependencies import get_membership_store
from src.config.settings import settings
from src.core.waitlist.normalizer import MISSING
from src.core.waitlist.operations import get_member_count, join_waitlist
from src.core.waitlist.results import AlreadyMember, Invalid, Joined, StoreFailure
from src.db.store import MembershipStore
from src.schemas.waitlist import (
    CountResponse,
    DetailResponse,
    FieldErrorResponse,
    JoinRequest,
    JoinResponse,
)

# Existing clients match on this exact text to detect duplicates
ALREADY_EXISTS_MESSAGE = "waitlist entry with this email already exists."

router = APIRouter(
    prefix="/waitlist",
    tags=["waitlist"],
)

def field_error(field: str, message: str, reason: str) -> Dict[str, Any]:
    body: Dict[str, Any] = {field: [message]}
    if settings.WAITLIST_ERROR_REASONS:
        body["reason"] = reason
    return body

@router.post(
    "/join/",
    status_code=status.HTTP_201_CREATED,
    response_model=JoinResponse,
    responses={
        400: {"model": FieldErrorResponse, "description": "Invalid email or already registered"},
        503: {"model": DetailResponse, "description": "Membership store unavailable"},
    }
)
def join(
    join_request: Optional[JoinRequest] = None,
    store: MembershipStore = Depends(get_membership_store)
):
    """
    Add an email to the waitlist.

    Duplicates and malformed emails both answer 400 with `{"email": [message]}`;
    a duplicate is signalled by the exact message
    "waitlist entry with this email already exists.".
    """
    if join_request is None or "email" not in join_request.model_fields_set:
        raw_email = MISSING
    else:
        raw_email = join_request.email
    result = join_waitlist(store, raw_email)

    if isinstance(result, Joined):
        return JoinResponse(
            email=result.entry.email,
            joined_at=result.entry.joined_at,
            count=result.count
        )
    if isinstance(result, AlreadyMember):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=field_error("email", ALREADY_EXISTS_MESSAGE, "duplicate")
        )
    if isinstance(result, Invalid):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=field_error(result.field, result.message, "invalid")
        )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": result.message}
    )

@router.get(
    "/count",
    response_model=CountResponse,
    responses={500: {"model": DetailResponse, "description": "Membership store unavailable"}}
)
def count(store: MembershipStore = Depends(get_membership_store)):
    """Number of registered waitlist members"""
    result = get_member_count(store)
    if isinstance(result, StoreFailure):
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": result.message}
        )
    return CountResponse(count=result)
