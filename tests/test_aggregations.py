"""Tests for terminal reductions."""

import pytest
from conftest import CountingSource

import lazyseq as ls


def test_sum() -> None:
    """Test sum with and without key."""
    assert ls.Collection([1, 2, 3]).sum() == 6
    assert ls.Collection([{"foo": 50}, {"foo": 50}]).sum("foo") == 100
    assert ls.Collection([{"foo": 50}, {"foo": 50}]).sum(lambda i: i["foo"] * 2) == 200


def test_sum_empty() -> None:
    """Test sum of nothing is 0."""
    assert ls.Collection().sum() == 0


def test_avg() -> None:
    """Test avg and its alias."""
    data = [{"foo": 10}, {"foo": 20}]
    assert ls.Collection(data).avg("foo") == 15
    assert ls.Collection(data).average(lambda i: i["foo"]) == 15
    assert ls.Collection([1, 2, 3, 4]).avg() == 2.5


def test_avg_empty() -> None:
    """Test avg of nothing is None."""
    assert ls.Collection().avg() is None
    assert ls.Collection().average() is None


def test_min_max() -> None:
    """Test min and max ignore None values."""
    data = [{"foo": 10}, {"foo": None}, {"foo": 20}]
    assert ls.Collection(data).min("foo") == 10
    assert ls.Collection(data).max("foo") == 20
    assert ls.Collection([1, 2, 3]).min() == 1
    assert ls.Collection([1, 2, 3]).max() == 3


def test_min_max_empty() -> None:
    """Test min and max of nothing are None."""
    assert ls.Collection().min() is None
    assert ls.Collection([None]).max() is None


def test_reduce() -> None:
    """Test reduce with an initial carry."""
    assert ls.Collection([1, 2, 3]).reduce(lambda carry, value: carry + value, 0) == 6
    assert ls.Collection(["a", "b"]).reduce(lambda carry, value: carry + value, "") == "ab"


def test_reduce_empty_returns_initial() -> None:
    """Test reduce of nothing returns the initial carry."""
    assert ls.Collection().reduce(lambda carry, value: carry + value, 4) == 4


@pytest.mark.parametrize(
    ("data", "expected"),
    [([1, 2, 2, 4], 2), ([0, 3], 1.5), ([1, 5, 3], 3), ([5, 4, 3, 2, 1], 3)],
)
def test_median(data: list[int], expected: float) -> None:
    """Test median on odd, even and unsorted data."""
    assert ls.Collection(data).median() == expected


def test_median_by_key() -> None:
    """Test median with a key."""
    data = [{"foo": 1}, {"foo": 2}, {"foo": 2}, {"foo": 4}]
    assert ls.Collection(data).median("foo") == 2


def test_median_empty() -> None:
    """Test median of nothing is None."""
    assert ls.Collection().median() is None


def test_mode() -> None:
    """Test a single mode."""
    assert ls.Collection([1, 2, 3, 4, 4, 5]).mode() == [4]


def test_mode_ties_in_first_seen_order() -> None:
    """Test every tied value is returned in first seen order."""
    assert ls.Collection([1, 2, 2, 1]).mode() == [1, 2]
    assert ls.Collection([3, 1, 1, 3, 2]).mode() == [3, 1]


def test_mode_by_key() -> None:
    """Test mode with a key."""
    data = [{"foo": 1}, {"foo": 1}, {"foo": 2}, {"foo": 4}]
    assert ls.Collection(data).mode("foo") == [1]


def test_mode_empty() -> None:
    """Test mode of nothing is None."""
    assert ls.Collection().mode() is None


def test_implode() -> None:
    """Test joining values and keyed values."""
    data = [{"name": "taylor", "email": "foo"}, {"name": "dayle", "email": "bar"}]
    assert ls.Collection(data).implode(",", "email") == "foo,bar"
    assert ls.Collection(["taylor", "dayle"]).implode(",") == "taylor,dayle"
    assert ls.Collection([1, 2]).implode() == "12"


class TestFirstLast:
    """Test first() and last()."""

    def test_first(self) -> None:
        """Test first with and without a predicate."""
        assert ls.Collection(["foo", "bar", "LARAVEL"]).first() == "foo"
        assert ls.Collection(["foo", "bar", "LARAVEL"]).first(lambda v: v == "bar") == "bar"

    def test_first_default(self) -> None:
        """Test the default value."""
        assert ls.Collection(["foo", "bar"]).first(lambda v: v == "baz", "default") == "default"
        assert ls.Collection().first(default="default") == "default"

    def test_first_short_circuits(self, source: CountingSource) -> None:
        """Test first stops pulling at the match."""
        assert ls.Collection(source).first(lambda x: x >= 4) == 4
        assert source.pulls == 5

    def test_last(self) -> None:
        """Test last with and without a predicate."""
        assert ls.Collection(["foo", "bar"]).last() == "bar"
        assert ls.Collection([100, 200, 300]).last(lambda v: v < 250) == 200

    def test_last_default(self) -> None:
        """Test the default value."""
        assert ls.Collection(["foo", "bar"]).last(lambda v: v == "baz", "default") == "default"
        assert ls.Collection().last(default="default") == "default"

    def test_last_none_value(self) -> None:
        """Test a None value is a legitimate last value."""
        assert ls.Collection([1, None]).last(default="default") is None


def test_length() -> None:
    """Test counting pairs."""
    assert ls.Collection({"a": 1, "b": 2, "c": 3}).length() == 3
    assert ls.Collection().length() == 0
