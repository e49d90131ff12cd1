"""
Unit tests for Result, Ok and Err

Author: TM3
Date: 2026-10-17
"""
import pytest

from storefront.common.errors import ResultCannotGetErrorOfSuccess, ResultCannotGetValueOfFailure
from storefront.common.option import Nothing, Some
from storefront.common.result import Err, Ok, Result


class TestResultConstruction:
    """Test the Result factories and discriminant"""

    def test_ok_is_success(self):
        """Test Result.ok builds a success holding the value"""
        result = Result.ok(42)

        assert result.is_success
        assert not result.is_failure
        assert result.is_ok()
        assert result.value == 42

    def test_fail_is_failure(self):
        """Test Result.fail builds a failure holding the error"""
        result = Result.fail("boom")

        assert result.is_failure
        assert result.is_err()
        assert result.error == "boom"

    def test_ok_of_and_err_of(self):
        """Test the variant constructors match the base factories"""
        assert Ok.of(1) == Result.ok(1)
        assert Err.of("A") == Result.fail("A")

    def test_ok_without_value(self):
        """Test an empty success carries None"""
        assert Result.ok().value is None

    @pytest.mark.parametrize("error", ["", 0, False, None])
    def test_falsy_error_is_still_a_failure(self, error):
        """Test failure comes from the variant, never from error truthiness"""
        result = Result.fail(error)

        assert result.is_failure
        assert result.error == error


class TestResultAccessors:
    """Test reading the wrong side raises programmer errors"""

    def test_value_of_failure_raises(self):
        """Test .value on a failure raises ResultCannotGetValueOfFailure"""
        with pytest.raises(ResultCannotGetValueOfFailure) as exc:
            Err.of("A").value

        assert str(exc.value) == "Cannot get value of a failure result."

    def test_error_of_success_raises(self):
        """Test .error on a success raises ResultCannotGetErrorOfSuccess"""
        with pytest.raises(ResultCannotGetErrorOfSuccess) as exc:
            Ok.of(1).error

        assert str(exc.value) == "Cannot get error of a success result."

    def test_unwrap_or(self):
        assert Ok.of(1).unwrap_or(0) == 1
        assert Err.of("A").unwrap_or(0) == 0


class TestResultMatch:
    """Test the match eliminators"""

    def test_match_calls_success_branch(self):
        """Test match routes a success to the second callback"""
        message = Ok.of("john").match(lambda error: f"error {error}", lambda value: f"hello {value}")

        assert message == "hello john"

    def test_match_calls_failure_branch(self):
        """Test match routes a failure to the first callback"""
        message = Err.of("E1").match(lambda error: f"error {error}", lambda value: f"hello {value}")

        assert message == "error E1"

    def test_match_obj_with_both_callbacks(self):
        assert Ok.of(2).match_obj(fail=lambda e: -1, ok=lambda v: v * 2) == 4
        assert Err.of("A").match_obj(fail=lambda e: e.lower(), ok=lambda v: v) == "a"

    def test_match_obj_missing_callback_returns_none(self):
        """Test match_obj returns None when the relevant callback is omitted"""
        assert Ok.of(2).match_obj(fail=lambda e: e) is None
        assert Err.of("A").match_obj(ok=lambda v: v) is None


class TestResultCombine:
    """Test Result.combine"""

    def test_returns_first_failure(self):
        """Test the first failure in argument order wins"""
        result = Result.combine(Ok.of(1), Err.of("A"), Err.of("B"))

        assert result.is_failure
        assert result.error == "A"

    def test_collects_values_in_order(self):
        """Test all successes combine into a list of their values"""
        result = Result.combine(Ok.of(1), Ok.of("two"), Ok.of(None))

        assert result.is_success
        assert result.value == [1, "two", None]

    def test_empty_combine_is_success(self):
        assert Result.combine().value == []


class TestResultCombinators:
    """Test map / and_then / or_else style combinators"""

    def test_map_only_touches_success(self):
        assert Ok.of(2).map(lambda v: v + 1) == Ok.of(3)
        assert Err.of("A").map(lambda v: v + 1) == Err.of("A")

    def test_map_err_only_touches_failure(self):
        assert Err.of("a").map_err(str.upper) == Err.of("A")
        assert Ok.of(1).map_err(str.upper) == Ok.of(1)

    def test_and_then_chains_successes(self):
        """Test and_then stops at the first failure"""
        halve = lambda v: Ok.of(v // 2) if v % 2 == 0 else Err.of("odd")

        assert Ok.of(8).and_then(halve).and_then(halve) == Ok.of(2)
        assert Ok.of(6).and_then(halve).and_then(halve) == Err.of("odd")

    def test_and_returns_other_on_success(self):
        assert Ok.of(1).and_(Ok.of(2)) == Ok.of(2)
        assert Err.of("A").and_(Ok.of(2)) == Err.of("A")

    def test_or_else_recovers_failure(self):
        assert Err.of("A").or_else(lambda e: Ok.of(0)) == Ok.of(0)
        assert Ok.of(1).or_else(lambda e: Ok.of(0)) == Ok.of(1)

    def test_projections_to_option(self):
        """Test ok_value / err_value project each side to an Option"""
        assert Ok.of(1).ok_value() == Some(1)
        assert Ok.of(1).err_value() == Nothing()
        assert Err.of("A").err_value() == Some("A")
        assert Err.of("A").ok_value() == Nothing()
