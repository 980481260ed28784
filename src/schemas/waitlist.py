from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime

class JoinRequest(BaseModel):
    # Left untyped so malformed values reach the normalizer and share its error shape
    email: Any = Field(
        None,
        description="Email address to register",
        example="yourname@example.com"
    )

class JoinResponse(BaseModel):
    email: str = Field(
        ...,
        description="Normalized email that was registered",
        example="yourname@example.com"
    )
    joined_at: datetime = Field(
        ...,
        description="When the entry was created"
    )
    count: Optional[int] = Field(
        None,
        description="Number of waitlist members after this join",
        example=42
    )

class CountResponse(BaseModel):
    count: int = Field(
        ...,
        description="Number of registered waitlist members",
        example=42
    )

class FieldErrorResponse(BaseModel):
    email: List[str] = Field(
        ...,
        example=["waitlist entry with this email already exists."]
    )
    reason: Optional[str] = Field(
        None,
        description="Present only when WAITLIST_ERROR_REASONS is enabled",
        example="duplicate"
    )

class DetailResponse(BaseModel):
    detail: str
