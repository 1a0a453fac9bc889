"""Config settings – QuerySettings for the list-query pipeline."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from am_query.config.settings.base import Settings
from am_query.config.validation import InvalidSettingValueError

ALL_SENTINEL = "All"
USER_TYPE_ALL_SENTINEL = "all"


@dataclasses.dataclass(frozen=True)
class QuerySettings(Settings):
    """Shared defaults for every list endpoint.

    Environment variables: ``QUERY_DEFAULT_PAGE_SIZE``, ``QUERY_MAX_PAGE_SIZE``,
    ``QUERY_ALL_SENTINEL``, ``QUERY_USER_TYPE_ALL_SENTINEL``.

    The sentinels are part of the contract with the admin UI; change them only
    together with the client.
    """

    _prefix: ClassVar[str] = "QUERY"

    default_page_size: int = 5
    max_page_size: int = 50
    all_sentinel: str = ALL_SENTINEL
    user_type_all_sentinel: str = USER_TYPE_ALL_SENTINEL

    def _validate(self) -> None:
        if self.default_page_size < 1:
            raise InvalidSettingValueError("default_page_size", self.default_page_size, "must be >= 1")
        if self.max_page_size < self.default_page_size:
            raise InvalidSettingValueError(
                "max_page_size", self.max_page_size, "must be >= default_page_size"
            )
        if not self.all_sentinel or not self.user_type_all_sentinel:
            raise InvalidSettingValueError("all_sentinel", self.all_sentinel, "sentinels must be non-empty")


DEFAULT_SETTINGS = QuerySettings()

__all__ = ["ALL_SENTINEL", "DEFAULT_SETTINGS", "USER_TYPE_ALL_SENTINEL", "QuerySettings"]
