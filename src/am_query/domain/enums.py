"""Domain enumerations.

Member order is significant: sorting by a state or type field orders records
by declaration order, not alphabetically.
"""
from __future__ import annotations

from enum import Enum, IntEnum
from typing import TypeVar

from am_query.kernel.errors import UnknownEntityKindError

E = TypeVar("E", bound="LabelledEnum")


class LabelledEnum(IntEnum):
    """IntEnum with a human display name and lenient text lookup."""

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES.get((type(self).__name__, self.name), self.name)

    @classmethod
    def lookup(cls: type[E], text: str | None) -> E | None:
        """Match *text* against member names, display names or numeric values.

        Matching ignores case and surrounding whitespace. Returns ``None`` for
        anything unrecognised.
        """
        if text is None:
            return None
        needle = text.strip().casefold()
        if not needle:
            return None
        for member in cls:
            if needle in (member.name.casefold(), member.display_name.casefold()):
                return member
        if needle.isdigit():
            try:
                return cls(int(needle))
            except ValueError:
                return None
        return None


class AssetState(LabelledEnum):
    Assigned = 0
    Available = 1
    NotAvailable = 2
    WaitingForRecycling = 3
    Recycled = 4


class AssignmentState(LabelledEnum):
    Accepted = 0
    Declined = 1
    Returned = 2
    WaitingForAcceptance = 3


class ReturnRequestState(LabelledEnum):
    Completed = 0
    WaitingForReturning = 1


class UserType(LabelledEnum):
    Staff = 0
    Admin = 1


class Location(LabelledEnum):
    HCM = 1
    DN = 2
    HN = 3


_DISPLAY_NAMES: dict[tuple[str, str], str] = {
    ("AssetState", "NotAvailable"): "Not available",
    ("AssetState", "WaitingForRecycling"): "Waiting for recycling",
    ("AssignmentState", "WaitingForAcceptance"): "Waiting for acceptance",
    ("ReturnRequestState", "WaitingForReturning"): "Waiting for returning",
    ("Location", "HCM"): "Ho Chi Minh City",
    ("Location", "DN"): "Da Nang",
    ("Location", "HN"): "Hanoi",
}


class EntityKind(str, Enum):
    """The four record shapes the query pipeline understands."""

    ASSET = "asset"
    USER = "user"
    ASSIGNMENT = "assignment"
    RETURN_REQUEST = "returnrequest"

    @classmethod
    def parse(cls, value: "EntityKind | str") -> "EntityKind":
        """Coerce *value* to an :class:`EntityKind`.

        Accepts members or strings such as ``"Asset"`` and ``"return_request"``.

        Raises:
            UnknownEntityKindError: when no kind matches.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "").replace("-", "")
        for member in cls:
            if member.value == normalized:
                return member
        raise UnknownEntityKindError(value)


__all__ = [
    "AssetState",
    "AssignmentState",
    "EntityKind",
    "LabelledEnum",
    "Location",
    "ReturnRequestState",
    "UserType",
]
