"""Unit tests for the filter predicate builder."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from am_query.application.query import FilterCriteria, build_filter_predicate
from am_query.application.query.filters import as_calendar_day, selected_values
from am_query.domain import Asset, Assignment, EntityKind, Location, ReturnRequest, User
from am_query.kernel.predicates import ALWAYS
from am_query.testing import EPOCH, UserBuilder

HCM = FilterCriteria(location=Location.HCM)


def _codes(records: list[Asset], criteria: FilterCriteria, on: date | None = None) -> list[str]:
    keep = build_filter_predicate(EntityKind.ASSET, criteria, on)
    return [a.code for a in records if keep(a)]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestSelectedValues:
    @pytest.mark.parametrize("values", [None, (), ("",), ("  ", "\t")])
    def test_blank_selection_is_off(self, values: tuple[str, ...] | None) -> None:
        assert selected_values(values, "All") is None

    def test_sentinel_anywhere_is_off(self) -> None:
        assert selected_values(("Assigned", "All"), "All") is None

    def test_sentinel_is_exact_case(self) -> None:
        assert selected_values(("all",), "All") == ["all"]

    def test_blank_entries_are_dropped(self) -> None:
        assert selected_values(("Assigned", " "), "All") == ["Assigned"]


class TestCalendarDay:
    def test_datetime_keeps_its_own_date(self) -> None:
        late = datetime(2025, 3, 4, 23, 30, tzinfo=timezone.utc)
        assert as_calendar_day(late) == date(2025, 3, 4)

    def test_date_and_none_pass_through(self) -> None:
        assert as_calendar_day(date(2025, 1, 1)) == date(2025, 1, 1)
        assert as_calendar_day(None) is None


# ---------------------------------------------------------------------------
# Location scope
# ---------------------------------------------------------------------------


class TestLocationScope:
    @pytest.mark.parametrize("criteria", [None, FilterCriteria(), FilterCriteria(states=("All",))])
    def test_missing_location_selects_nothing(self, assets: list[Asset], criteria: FilterCriteria | None) -> None:
        keep = build_filter_predicate(EntityKind.ASSET, criteria)
        assert keep is not ALWAYS
        assert [a for a in assets if keep(a)] == []

    def test_other_sites_never_leak(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(location=Location.HCM)) == ["EL001", "EL002", "EL004"]
        assert _codes(assets, FilterCriteria(location=Location.HN)) == ["EL003"]
        assert _codes(assets, FilterCriteria(location=Location.DN)) == []

    def test_applies_to_every_kind(
        self,
        users: list[User],
        assignments: list[Assignment],
        return_requests: list[ReturnRequest],
    ) -> None:
        for kind, records in (
            (EntityKind.USER, users),
            (EntityKind.ASSIGNMENT, assignments),
            (EntityKind.RETURN_REQUEST, return_requests),
        ):
            keep = build_filter_predicate(kind, FilterCriteria())
            assert [r for r in records if keep(r)] == []


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------


class TestAssetFilters:
    def test_single_state(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(states=("Available",), location=Location.HCM)) == ["EL001"]

    def test_states_or_within_dimension(self, assets: list[Asset]) -> None:
        criteria = FilterCriteria(states=("Available", "Recycled"), location=Location.HCM)
        assert _codes(assets, criteria) == ["EL001", "EL004"]

    def test_state_display_name_is_accepted(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(states=("Not available",), location=Location.HN)) == ["EL003"]

    @pytest.mark.parametrize("states", [None, (), ("All",), ("Assigned", "All"), ("",)])
    def test_disabled_state_dimension(self, assets: list[Asset], states: tuple[str, ...] | None) -> None:
        criteria = FilterCriteria(states=states, location=Location.HCM)
        assert _codes(assets, criteria) == ["EL001", "EL002", "EL004"]

    def test_unknown_state_matches_nothing(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(states=("Lost",), location=Location.HCM)) == []

    def test_category_is_case_insensitive(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(categories=("laptop",), location=Location.HCM)) == ["EL001"]
        assert _codes(assets, FilterCriteria(categories=("LAPTOP",), location=Location.HN)) == ["EL003"]

    def test_missing_category_never_matches(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(categories=("Monitor",), location=Location.HCM)) == ["EL002"]

    def test_installed_date_matches_calendar_day(self, assets: list[Asset]) -> None:
        assert _codes(assets, FilterCriteria(location=Location.HN), date(2025, 3, 4)) == ["EL003"]
        assert _codes(assets, HCM, date(2025, 3, 4)) == []
        assert _codes(assets, HCM, EPOCH.date()) == ["EL001", "EL002", "EL004"]

    def test_user_type_is_ignored_for_assets(self, assets: list[Asset]) -> None:
        assert len(_codes(assets, FilterCriteria(user_type="Admin", location=Location.HCM))) == 3


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class TestUserFilters:
    def _names(self, users: list[User], criteria: FilterCriteria, on: date | None = None) -> list[str]:
        keep = build_filter_predicate(EntityKind.USER, criteria, on)
        return [u.username for u in users if keep(u)]

    def test_user_type(self, users: list[User]) -> None:
        assert self._names(users, FilterCriteria(user_type="Admin", location=Location.HCM)) == ["janes"]
        assert self._names(users, FilterCriteria(user_type="staff", location=Location.HCM)) == ["johnd"]
        assert self._names(users, FilterCriteria(user_type="staff", location=Location.DN)) == ["bobd"]

    @pytest.mark.parametrize("user_type", [None, "", "all", "ALL", " All "])
    def test_user_type_sentinel(self, users: list[User], user_type: str | None) -> None:
        criteria = FilterCriteria(user_type=user_type, location=Location.HCM)
        assert self._names(users, criteria) == ["johnd", "janes"]

    def test_unknown_user_type_matches_nothing(self, users: list[User]) -> None:
        assert self._names(users, FilterCriteria(user_type="Manager", location=Location.HCM)) == []

    def test_states_are_ignored_for_users(self, users: list[User]) -> None:
        assert len(self._names(users, FilterCriteria(states=("Accepted",), location=Location.HCM))) == 2

    def test_location(self, users: list[User]) -> None:
        assert self._names(users, FilterCriteria(location=Location.DN)) == ["bobd"]

    def test_joined_date(self) -> None:
        joined = UserBuilder()(username="newbie", joined_date=datetime(2025, 6, 3, 8, tzinfo=timezone.utc))
        other = UserBuilder()(username="oldie", joined_date=datetime(2024, 6, 3, 8, tzinfo=timezone.utc))
        assert self._names([joined, other], HCM, date(2025, 6, 3)) == ["newbie"]


# ---------------------------------------------------------------------------
# Assignments and return requests
# ---------------------------------------------------------------------------


class TestRelationalFilters:
    def test_assignment_states(self, assignments: list[Assignment]) -> None:
        criteria = FilterCriteria(states=("Accepted",), location=Location.HCM)
        keep = build_filter_predicate(EntityKind.ASSIGNMENT, criteria)
        assert [a.asset.code for a in assignments if keep(a)] == ["LA000001", "LA000002"]

    def test_assignment_date(self, assignments: list[Assignment]) -> None:
        keep = build_filter_predicate(EntityKind.ASSIGNMENT, HCM, (EPOCH + timedelta(days=3)).date())
        assert [a.asset.code for a in assignments if keep(a)] == ["LA000001"]

    def test_assignment_categories_are_ignored(self, assignments: list[Assignment]) -> None:
        criteria = FilterCriteria(categories=("Monitor",), location=Location.HCM)
        keep = build_filter_predicate(EntityKind.ASSIGNMENT, criteria)
        assert all(keep(a) for a in assignments)

    def test_return_request_states(self, return_requests: list[ReturnRequest]) -> None:
        criteria = FilterCriteria(states=("Waiting for returning",), location=Location.HCM)
        keep = build_filter_predicate(EntityKind.RETURN_REQUEST, criteria)
        assert [rr.asset.code for rr in return_requests if keep(rr)] == ["LA000003"]

    def test_return_request_date_skips_pending(self, return_requests: list[ReturnRequest]) -> None:
        keep = build_filter_predicate(EntityKind.RETURN_REQUEST, HCM, (EPOCH + timedelta(days=5)).date())
        assert [rr.asset.code for rr in return_requests if keep(rr)] == ["LA000002"]

    def test_return_request_location_follows_asset(self, return_requests: list[ReturnRequest]) -> None:
        keep = build_filter_predicate(EntityKind.RETURN_REQUEST, FilterCriteria(location=Location.HN))
        assert [rr for rr in return_requests if keep(rr)] == []
