from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union


@dataclass(frozen=True)
class WaitlistEntry:
    email: str
    joined_at: datetime


# Store outcomes

@dataclass(frozen=True)
class Inserted:
    entry: WaitlistEntry


@dataclass(frozen=True)
class AlreadyExists:
    email: str


InsertOutcome = Union[Inserted, AlreadyExists]


# Operation results

@dataclass(frozen=True)
class Joined:
    entry: WaitlistEntry
    # None when the post-insert count could not be read; the entry is still committed
    count: Optional[int]


@dataclass(frozen=True)
class AlreadyMember:
    email: str


@dataclass(frozen=True)
class Invalid:
    message: str
    field: str = "email"


@dataclass(frozen=True)
class StoreFailure:
    message: str


JoinResult = Union[Joined, AlreadyMember, Invalid, StoreFailure]
CountResult = Union[int, StoreFailure]
