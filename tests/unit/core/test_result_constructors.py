"""Constructors and the dematerialize boundary."""

from __future__ import annotations

import pytest

from resultkit import Failure, Success, attempt, from_error, from_optional, from_value
from tests.helpers import ERROR_A, FAILURE, SUCCESS, CallCounter, try_is_success

pytestmark = pytest.mark.unit


class TestDataModel:
    def test_success_is_immutable(self):
        success = Success("value")

        with pytest.raises(AttributeError):
            success.value = "modified"  # type: ignore[misc]

    def test_failure_is_immutable(self):
        failure = Failure(ValueError("boom"))

        with pytest.raises(AttributeError):
            failure.error = ValueError("other")  # type: ignore[misc]

    def test_success_exposes_value_and_no_error(self):
        assert SUCCESS.value == "success"
        assert SUCCESS.error is None
        assert SUCCESS.is_success is True
        assert SUCCESS.is_failure is False

    def test_failure_exposes_error_and_no_value(self):
        assert FAILURE.error is ERROR_A
        assert FAILURE.value is None
        assert FAILURE.is_success is False
        assert FAILURE.is_failure is True

    def test_failure_rejects_non_exception_payload(self):
        with pytest.raises(TypeError, match="exception instance"):
            Failure("not an error")  # type: ignore[arg-type]

    def test_structural_pattern_matching(self):
        def describe(result):
            match result:
                case Success(value):
                    return f"ok:{value}"
                case Failure(error):
                    return f"err:{error}"

        assert describe(SUCCESS) == "ok:success"
        assert describe(FAILURE) == "err:a"


class TestDirectConstructors:
    def test_from_value(self):
        result = from_value(42)

        assert result == Success(42)
        assert result.value == 42
        assert result.error is None

    def test_from_value_accepts_none(self):
        assert from_value(None) == Success(None)

    def test_from_error_keeps_the_same_object(self):
        error = KeyError("missing")
        result = from_error(error)

        assert result.error is error
        assert result.value is None


class TestFromOptional:
    def test_present_value_yields_success(self):
        assert from_optional("success", lambda: ERROR_A) == SUCCESS

    def test_absent_value_yields_failure(self):
        assert from_optional(None, lambda: ERROR_A) == FAILURE

    def test_fail_with_not_called_on_success_path(self):
        fail_with = CallCounter(returns=ERROR_A)

        from_optional("success", fail_with)

        assert fail_with.calls == 0

    def test_fail_with_called_exactly_once_on_failure_path(self):
        fail_with = CallCounter(returns=ERROR_A)

        result = from_optional(None, fail_with)

        assert fail_with.calls == 1
        assert result.error is ERROR_A

    @pytest.mark.parametrize("falsy", [0, "", [], False])
    def test_falsy_values_are_present(self, falsy):
        assert from_optional(falsy, lambda: ERROR_A) == Success(falsy)


class TestAttempt:
    def test_normal_return_yields_success(self):
        assert attempt(lambda: try_is_success("success")) == SUCCESS

    def test_raised_error_yields_failure(self):
        result = attempt(lambda: try_is_success(None))

        assert result.error == ERROR_A

    def test_raised_error_is_preserved_unwrapped(self):
        error = LookupError("domain-specific")

        def boom() -> str:
            raise error

        result = attempt(boom)

        assert result.error is error
        assert isinstance(result.error, LookupError)

    def test_keyboard_interrupt_propagates(self):
        def interrupted() -> None:
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            attempt(interrupted)


class TestDematerialize:
    def test_success_returns_value(self):
        assert SUCCESS.dematerialize() == "success"

    def test_failure_raises_the_stored_error(self):
        error = RuntimeError("stored")

        with pytest.raises(RuntimeError) as exc_info:
            Failure(error).dematerialize()

        assert exc_info.value is error

    def test_round_trip_through_attempt(self):
        result = attempt(lambda: try_is_success(None))

        assert attempt(result.dematerialize) == result
