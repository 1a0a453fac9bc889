"""Domain – records and enumerations of the asset tracking application."""

from am_query.domain.enums import (
    AssetState,
    AssignmentState,
    EntityKind,
    LabelledEnum,
    Location,
    ReturnRequestState,
    UserType,
)
from am_query.domain.records import Asset, Assignment, Category, Record, ReturnRequest, User

__all__ = [
    "Asset",
    "AssetState",
    "Assignment",
    "AssignmentState",
    "Category",
    "EntityKind",
    "LabelledEnum",
    "Location",
    "Record",
    "ReturnRequest",
    "ReturnRequestState",
    "User",
    "UserType",
]
