"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from am_query.config.validation import ConfigError, InvalidSettingValueError
from am_query.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    UnknownEntityKindError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause)
        assert err.__cause__ is cause
        assert "original" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed["code"] == "oops"
        assert parsed["detail"] == {"x": 1}

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestDomainErrors:
    def test_validation_error_carries_field_errors(self) -> None:
        err = ValidationError("bad", errors=[{"field": "date", "message": "nope"}])
        assert isinstance(err, DomainError)
        assert err.code == "validation_error"
        assert err.to_dict()["errors"] == [{"field": "date", "message": "nope"}]

    def test_validation_error_defaults_to_empty_errors(self) -> None:
        assert ValidationError("bad").errors == []

    def test_unknown_entity_kind(self) -> None:
        err = UnknownEntityKindError("widget")
        assert err.kind == "widget"
        assert "widget" in err.message
        assert err.code == "unknown_entity_kind"


class TestApplicationErrors:
    def test_config_error_is_application_error(self) -> None:
        assert issubclass(ConfigError, ApplicationError)

    def test_invalid_setting_detail(self) -> None:
        err = InvalidSettingValueError("max_page_size", 0, "must be positive")
        assert err.detail == {"setting": "max_page_size", "reason": "must be positive"}
        with pytest.raises(ConfigError):
            raise err
