"""Domain records consumed by the query pipeline.

Records are supplied, already joined, by the storage layer. They are frozen:
nothing in this library creates, mutates or deletes them.
"""
from __future__ import annotations

import dataclasses
import uuid
from datetime import UTC, datetime

from am_query.domain.enums import AssetState, AssignmentState, Location, ReturnRequestState, UserType


def _now() -> datetime:
    return datetime.now(UTC)


@dataclasses.dataclass(frozen=True, slots=True)
class Category:
    name: str
    slug: str = ""
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)


@dataclasses.dataclass(frozen=True, slots=True)
class User:
    staff_code: str
    first_name: str
    last_name: str
    username: str
    joined_date: datetime
    type: UserType = UserType.Staff
    location: Location = Location.HCM
    date_of_birth: datetime | None = None
    is_active: bool = True
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    created_date: datetime = dataclasses.field(default_factory=_now)
    last_modified_date: datetime = dataclasses.field(default_factory=_now)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def reversed_name(self) -> str:
        return f"{self.last_name} {self.first_name}"

    @property
    def display_name(self) -> str:
        """Name shown in assignment and return-request lists."""
        return self.username


@dataclasses.dataclass(frozen=True, slots=True)
class Asset:
    code: str
    name: str
    state: AssetState = AssetState.Available
    location: Location = Location.HCM
    category: Category | None = None
    installed_date: datetime | None = None
    specification: str = ""
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    created_date: datetime = dataclasses.field(default_factory=_now)
    last_modified_date: datetime = dataclasses.field(default_factory=_now)

    @property
    def category_name(self) -> str:
        """Category name, or ``""`` when the category join was not loaded."""
        return self.category.name if self.category is not None else ""


@dataclasses.dataclass(frozen=True, slots=True)
class Assignment:
    asset: Asset
    assignor: User
    assignee: User
    assigned_date: datetime
    state: AssignmentState = AssignmentState.WaitingForAcceptance
    note: str | None = None
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    created_date: datetime = dataclasses.field(default_factory=_now)
    last_modified_date: datetime = dataclasses.field(default_factory=_now)


@dataclasses.dataclass(frozen=True, slots=True)
class ReturnRequest:
    assignment: Assignment
    requester: User
    state: ReturnRequestState = ReturnRequestState.WaitingForReturning
    returned_date: datetime | None = None
    acceptor: User | None = None
    id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    created_date: datetime = dataclasses.field(default_factory=_now)
    last_modified_date: datetime = dataclasses.field(default_factory=_now)

    @property
    def asset(self) -> Asset:
        return self.assignment.asset


Record = Asset | User | Assignment | ReturnRequest

__all__ = ["Asset", "Assignment", "Category", "Record", "ReturnRequest", "User"]
