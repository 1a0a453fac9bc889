"""Application query – per-entity field accessor registry.

Each entity kind is described by an :class:`EntityProfile`: a closed table
mapping lowercase sort keys to accessor functions, plus the fields the search
and filter stages read. The generic pipeline never inspects records directly;
it only goes through a profile.

Unknown sort keys resolve to the profile's ``default_key`` so every sort has a
total, deterministic order even for garbage client input. Asset and user lists
then sort ascending whatever direction was asked for; assignment and return
request lists keep the requested direction.
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from am_query.application.query.request import SortKey
from am_query.config.settings import DEFAULT_SETTINGS, QuerySettings
from am_query.domain.enums import (
    AssetState,
    AssignmentState,
    EntityKind,
    LabelledEnum,
    ReturnRequestState,
    UserType,
)
from am_query.domain.records import Asset, Assignment, ReturnRequest, User
from am_query.kernel.errors import UnknownEntityKindError

Getter = Callable[[Any], Any]


@dataclasses.dataclass(frozen=True)
class FieldAccessor:
    """Named extractor of one comparable value from a record."""

    key: str
    getter: Getter

    def __call__(self, record: Any) -> Any:
        return self.getter(record)


@dataclasses.dataclass(frozen=True)
class EntityProfile:
    kind: EntityKind
    accessors: Mapping[str, FieldAccessor]
    default_key: str
    default_sort: tuple[SortKey, ...]
    search_fields: tuple[Getter, ...]
    location_field: Getter
    default_page_size: int
    state_field: Getter | None = None
    state_enum: type[LabelledEnum] | None = None
    category_field: Getter | None = None
    type_field: Getter | None = None
    type_enum: type[LabelledEnum] | None = None
    date_field: Getter | None = None
    # an unknown sort key keeps its requested direction on the default key
    fallback_keeps_direction: bool = True

    def __post_init__(self) -> None:
        if self.default_key not in self.accessors:
            raise ValueError(f"default key {self.default_key!r} is not registered for {self.kind.value}")

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(self.accessors)

    def resolve(self, key: str | None) -> FieldAccessor:
        """Accessor for *key* (case-insensitive), or the default accessor."""
        if key:
            accessor = self.accessors.get(key.strip().lower())
            if accessor is not None:
                return accessor
        return self.accessors[self.default_key]

    def is_known(self, key: str | None) -> bool:
        return bool(key) and key.strip().lower() in self.accessors  # type: ignore[union-attr]


def _table(**getters: Getter) -> Mapping[str, FieldAccessor]:
    return MappingProxyType({key: FieldAccessor(key, fn) for key, fn in getters.items()})


def _username(user: User | None) -> str | None:
    return user.username if user is not None else None


def asset_profile(settings: QuerySettings = DEFAULT_SETTINGS) -> EntityProfile:
    def code(a: Asset) -> str:
        return a.code

    return EntityProfile(
        kind=EntityKind.ASSET,
        accessors=_table(
            id=lambda a: a.id,
            code=code,
            assetcode=code,
            name=lambda a: a.name,
            state=lambda a: a.state,
            category=lambda a: a.category_name,
            location=lambda a: a.location,
            installed=lambda a: a.installed_date,
            created=lambda a: a.created_date,
            updated=lambda a: a.last_modified_date,
        ),
        default_key="id",
        default_sort=(SortKey("id"),),
        search_fields=(code, lambda a: a.name),
        location_field=lambda a: a.location,
        default_page_size=settings.default_page_size,
        state_field=lambda a: a.state,
        state_enum=AssetState,
        category_field=lambda a: a.category_name,
        date_field=lambda a: a.installed_date,
        fallback_keeps_direction=False,
    )


def user_profile(settings: QuerySettings = DEFAULT_SETTINGS) -> EntityProfile:
    def staff_code(u: User) -> str:
        return u.staff_code

    return EntityProfile(
        kind=EntityKind.USER,
        accessors=_table(
            id=lambda u: u.id,
            code=staff_code,
            staffcode=staff_code,
            # first name then last name, as one composite key
            name=lambda u: (u.first_name, u.last_name),
            username=lambda u: u.username,
            joined=lambda u: u.joined_date,
            type=lambda u: u.type,
            location=lambda u: u.location,
            created=lambda u: u.created_date,
            updated=lambda u: u.last_modified_date,
        ),
        default_key="id",
        default_sort=(SortKey("id"),),
        search_fields=(lambda u: u.full_name, lambda u: u.reversed_name, staff_code),
        location_field=lambda u: u.location,
        default_page_size=settings.default_page_size,
        type_field=lambda u: u.type,
        type_enum=UserType,
        date_field=lambda u: u.joined_date,
        fallback_keeps_direction=False,
    )


def assignment_profile(settings: QuerySettings = DEFAULT_SETTINGS) -> EntityProfile:
    def created(a: Assignment) -> Any:
        return a.created_date

    return EntityProfile(
        kind=EntityKind.ASSIGNMENT,
        accessors=_table(
            id=lambda a: a.id,
            assetcode=lambda a: a.asset.code,
            assetname=lambda a: a.asset.name,
            assignedto=lambda a: _username(a.assignee),
            assignedby=lambda a: _username(a.assignor),
            assigneddate=lambda a: a.assigned_date,
            state=lambda a: a.state,
            no=created,
            created=created,
            updated=lambda a: a.last_modified_date,
        ),
        default_key="created",
        default_sort=(SortKey("assigneddate"),),
        search_fields=(
            lambda a: a.asset.code,
            lambda a: a.asset.name,
            lambda a: a.assignee.display_name,
        ),
        location_field=lambda a: a.asset.location,
        default_page_size=settings.default_page_size,
        state_field=lambda a: a.state,
        state_enum=AssignmentState,
        date_field=lambda a: a.assigned_date,
    )


def return_request_profile(settings: QuerySettings = DEFAULT_SETTINGS) -> EntityProfile:
    def created(rr: ReturnRequest) -> Any:
        return rr.created_date

    return EntityProfile(
        kind=EntityKind.RETURN_REQUEST,
        accessors=_table(
            id=lambda rr: rr.id,
            assetcode=lambda rr: rr.asset.code,
            assetname=lambda rr: rr.asset.name,
            requestedby=lambda rr: _username(rr.requester),
            acceptedby=lambda rr: _username(rr.acceptor),
            assigneddate=lambda rr: rr.assignment.assigned_date,
            returneddate=lambda rr: rr.returned_date,
            state=lambda rr: rr.state,
            no=created,
            created=created,
            updated=lambda rr: rr.last_modified_date,
        ),
        default_key="created",
        default_sort=(SortKey("returneddate"),),
        search_fields=(
            lambda rr: rr.asset.code,
            lambda rr: rr.asset.name,
            lambda rr: rr.requester.display_name,
        ),
        location_field=lambda rr: rr.asset.location,
        default_page_size=settings.default_page_size,
        state_field=lambda rr: rr.state,
        state_enum=ReturnRequestState,
        date_field=lambda rr: rr.returned_date,
    )


class FieldAccessorRegistry:
    """Lookup of :class:`EntityProfile` by :class:`EntityKind`."""

    def __init__(self, profiles: Iterable[EntityProfile], settings: QuerySettings = DEFAULT_SETTINGS) -> None:
        self._profiles: dict[EntityKind, EntityProfile] = {p.kind: p for p in profiles}
        self.settings = settings

    @classmethod
    def default(cls, settings: QuerySettings = DEFAULT_SETTINGS) -> "FieldAccessorRegistry":
        return cls(
            [
                asset_profile(settings),
                user_profile(settings),
                assignment_profile(settings),
                return_request_profile(settings),
            ],
            settings=settings,
        )

    @property
    def kinds(self) -> frozenset[EntityKind]:
        return frozenset(self._profiles)

    def profile(self, kind: EntityKind | str) -> EntityProfile:
        parsed = EntityKind.parse(kind)
        try:
            return self._profiles[parsed]
        except KeyError:
            raise UnknownEntityKindError(kind) from None

    def resolve(self, kind: EntityKind | str, key: str | None) -> FieldAccessor:
        return self.profile(kind).resolve(key)


DEFAULT_REGISTRY = FieldAccessorRegistry.default()


def resolve(kind: EntityKind | str, key: str | None) -> FieldAccessor:
    """Resolve *key* against the default registry."""
    return DEFAULT_REGISTRY.resolve(kind, key)


__all__ = [
    "DEFAULT_REGISTRY",
    "EntityProfile",
    "FieldAccessor",
    "FieldAccessorRegistry",
    "Getter",
    "asset_profile",
    "assignment_profile",
    "resolve",
    "return_request_profile",
    "user_profile",
]
