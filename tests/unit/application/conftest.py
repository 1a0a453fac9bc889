"""Shared record fixtures for the query pipeline tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from am_query.domain import (
    Asset,
    AssetState,
    Assignment,
    AssignmentState,
    Category,
    Location,
    ReturnRequest,
    ReturnRequestState,
    User,
    UserType,
)
from am_query.testing import EPOCH, AssetBuilder, AssignmentBuilder, ReturnRequestBuilder, UserBuilder

LAPTOP = Category("Laptop", slug="LA")
MONITOR = Category("Monitor", slug="MO")


@pytest.fixture
def assets() -> list[Asset]:
    build = AssetBuilder()
    return [
        build(code="EL001", name="Laptop Dell", category=LAPTOP, state=AssetState.Available),
        build(code="EL002", name="Monitor", category=MONITOR, state=AssetState.Assigned),
        build(
            code="EL003",
            name="Laptop HP",
            category=LAPTOP,
            state=AssetState.NotAvailable,
            location=Location.HN,
            installed_date=datetime(2025, 3, 4, 23, 30, tzinfo=timezone.utc),
        ),
        build(code="EL004", name="Old monitor", category=None, state=AssetState.Recycled),
    ]


@pytest.fixture
def users() -> list[User]:
    build = UserBuilder()
    return [
        build(first_name="John", last_name="Doe", staff_code="SD0001", username="johnd"),
        build(first_name="Jane", last_name="Smith", staff_code="SD0002", username="janes", type=UserType.Admin),
        build(first_name="Bob", last_name="Doe", staff_code="SD0003", username="bobd", location=Location.DN),
    ]


@pytest.fixture
def assignments() -> list[Assignment]:
    build = AssignmentBuilder()
    alice = UserBuilder()(username="alice")
    bob = UserBuilder()(username="bob")
    return [
        build(
            asset=AssetBuilder()(code="LA000001", name="Laptop 1"),
            assignee=alice,
            state=AssignmentState.Accepted,
            assigned_date=EPOCH + timedelta(days=3),
        ),
        build(
            asset=AssetBuilder()(code="LA000003", name="Laptop 3"),
            assignee=bob,
            state=AssignmentState.WaitingForAcceptance,
            assigned_date=EPOCH + timedelta(days=1),
        ),
        build(
            asset=AssetBuilder()(code="LA000002", name="Laptop 2"),
            assignee=bob,
            state=AssignmentState.Accepted,
            assigned_date=EPOCH + timedelta(days=2, hours=5),
        ),
    ]


@pytest.fixture
def return_requests(assignments: list[Assignment]) -> list[ReturnRequest]:
    build = ReturnRequestBuilder()
    admin = UserBuilder()(username="zadmin", type=UserType.Admin)
    return [
        build(
            assignment=assignments[0],
            state=ReturnRequestState.Completed,
            returned_date=EPOCH + timedelta(days=10, hours=8),
            acceptor=admin,
        ),
        build(assignment=assignments[1]),
        build(
            assignment=assignments[2],
            state=ReturnRequestState.Completed,
            returned_date=EPOCH + timedelta(days=5),
            acceptor=UserBuilder()(username="aadmin", type=UserType.Admin),
        ),
    ]
