"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

from pgrest_filters.config import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from pgrest_filters.kernel.errors import BaseError, DomainError, ValidationError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_str_is_json(self) -> None:
        payload = json.loads(str(BaseError("m", detail={"k": 1})))
        assert payload == {"code": "base_error", "message": "m", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = ValueError("boom")
        err = BaseError("m", cause=cause)
        assert err.__cause__ is cause
        assert "boom" in err.to_dict()["cause"]


class TestValidationError:
    def test_is_domain_error(self) -> None:
        assert issubclass(ValidationError, DomainError)

    def test_errors_in_dict(self) -> None:
        err = ValidationError("bad", errors=[{"field": "chosen"}])
        assert err.code == "validation_error"
        assert err.to_dict()["errors"] == [{"field": "chosen"}]


class TestConfigErrors:
    def test_missing_setting(self) -> None:
        err = MissingRequiredSettingError("PGREST_FILTERS_X")
        assert isinstance(err, ConfigError)
        assert err.setting_name == "PGREST_FILTERS_X"
        assert err.code == "missing_required_setting"

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "not a level")
        assert err.value == "LOUD"
        assert "LOUD" in err.message


class TestDerivedCodes:
    def test_subclass_code_from_class_name(self) -> None:
        class ColumnLookupError(BaseError):
            pass

        assert ColumnLookupError("m").code == "column_lookup_error"

    def test_hierarchy_codes(self) -> None:
        assert DomainError("m").code == "domain_error"
        assert ConfigError("m").code == "config_error"

    def test_declared_code_wins(self) -> None:
        assert InvalidSettingValueError("a", 1, "r").code == "invalid_setting_value"
