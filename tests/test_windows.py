"""Tests for positional operators and their pull counts."""

import pytest
from conftest import CountingSource

import lazyseq as ls


class TestTake:
    """Test take() from both ends."""

    def test_take_first(self) -> None:
        """Test taking from the start keeps keys."""
        data = ls.Collection({"a": 1, "b": 2, "c": 3})
        assert data.take(2).to_dict() == {"a": 1, "b": 2}

    def test_take_never_pulls_extra(self, source: CountingSource) -> None:
        """Test that take(n) pulls an infinite source exactly n times."""
        assert ls.Collection(source).take(5).to_list() == [0, 1, 2, 3, 4]
        assert source.pulls == 5

    def test_take_zero_pulls_nothing(self, source: CountingSource) -> None:
        """Test that take(0) doesn't touch the source."""
        assert ls.Collection(source).take(0).to_list() == []
        assert source.pulls == 0

    def test_take_more_than_available(self) -> None:
        """Test take(n) on a shorter source."""
        assert ls.Collection([1, 2]).take(10).to_list() == [1, 2]

    def test_take_through_map(self, source: CountingSource) -> None:
        """Test that a map stage doesn't add pulls."""
        ls.Collection(source).map(lambda x: x * 2).take(3).to_list()
        assert source.pulls == 3

    def test_take_last(self) -> None:
        """Test taking from the end."""
        data = ls.Collection(["taylor", "dayle", "shawn"])
        assert data.take(-2).to_list() == ["dayle", "shawn"]

    def test_take_last_keeps_keys(self) -> None:
        """Test that the tail window keeps the original keys."""
        data = ls.Collection(["taylor", "dayle", "shawn"])
        assert data.take(-2).to_dict() == {1: "dayle", 2: "shawn"}

    def test_take_last_more_than_available(self) -> None:
        """Test a window larger than the source."""
        assert ls.Collection([1, 2]).take(-5).to_list() == [1, 2]

    def test_take_last_is_lazy(self, source: CountingSource) -> None:
        """Test that the tail window doesn't pull until consumed."""
        ls.Collection(source).take(-2)
        assert source.pulls == 0


class TestSlice:
    """Test skip(), slice() and for_page()."""

    def test_skip(self, source: CountingSource) -> None:
        """Test skip keeps keys and pulls lazily."""
        assert ls.Collection(source).skip(3).take(2).to_dict() == {3: 3, 4: 4}
        assert source.pulls == 5

    def test_skip_negative(self) -> None:
        """Test a negative skip is refused."""
        with pytest.raises(ls.InvalidArgumentError):
            ls.Collection([1]).skip(-1)

    def test_slice_offset(self) -> None:
        """Test slicing with only an offset."""
        data = ls.Collection([1, 2, 3, 4, 5, 6, 7, 8])
        assert data.slice(3).to_list() == [4, 5, 6, 7, 8]

    def test_slice_negative_offset(self) -> None:
        """Test a negative offset keeps the tail."""
        data = ls.Collection([1, 2, 3, 4, 5, 6, 7, 8])
        assert data.slice(-3).to_list() == [6, 7, 8]

    def test_slice_offset_and_length(self) -> None:
        """Test slicing with offset and length keeps keys."""
        data = ls.Collection([1, 2, 3, 4, 5, 6, 7, 8])
        assert data.slice(3, 3).to_dict() == {3: 4, 4: 5, 5: 6}

    def test_slice_negative_offset_and_length(self) -> None:
        """Test a negative offset bounded by a length."""
        data = ls.Collection([1, 2, 3, 4, 5, 6, 7, 8])
        assert data.slice(-5, 3).values().to_list() == [4, 5, 6]

    def test_slice_on_infinite_source(self, source: CountingSource) -> None:
        """Test slice pulls only what it needs."""
        assert ls.Collection(source).slice(5, 3).to_list() == [5, 6, 7]
        assert source.pulls == 8

    def test_slice_negative_length_is_eager(self) -> None:
        """Test that a negative length raises before claiming the collection."""
        data = ls.Collection([1, 2, 3])
        with pytest.raises(ls.InvalidArgumentError, match="Negative slice lengths"):
            data.slice(0, -1)
        assert data.to_list() == [1, 2, 3]

    @pytest.mark.parametrize("offset", [0, 1, 3, 9])
    @pytest.mark.parametrize("length", [0, 1, 4])
    def test_slice_composition(self, offset: int, length: int) -> None:
        """Test slice(a, b) is take(b) applied to slice(a)."""
        data = list(range(8))
        direct = ls.Collection(data).slice(offset, length).to_dict()
        composed = ls.Collection(data).slice(offset).take(length).to_dict()
        assert direct == composed

    def test_for_page(self) -> None:
        """Test pagination."""
        data = ["one", "two", "three", "four"]
        assert ls.Collection(data).for_page(1, 2).to_list() == ["one", "two"]
        assert ls.Collection(data).for_page(2, 2).to_dict() == {2: "three", 3: "four"}
        assert ls.Collection(data).for_page(3, 2).to_list() == []

    def test_for_page_is_one_indexed(self) -> None:
        """Test page 0 is refused."""
        with pytest.raises(ls.InvalidArgumentError):
            ls.Collection([1]).for_page(0, 2)


class TestNth:
    """Test nth()."""

    data = {6: "a", 4: "b", 7: "c", 1: "d", 5: "e", 3: "f"}

    def test_nth(self) -> None:
        """Test every fourth element with offsets."""
        assert ls.Collection(self.data).nth(4).to_list() == ["a", "e"]
        assert ls.Collection(self.data).nth(4, 1).to_list() == ["b", "f"]
        assert ls.Collection(self.data).nth(4, 2).to_list() == ["c"]
        assert ls.Collection(self.data).nth(4, 3).to_list() == ["d"]

    def test_nth_rekeys(self) -> None:
        """Test nth output is keyed from 0."""
        assert ls.Collection(self.data).nth(4).to_dict() == {0: "a", 1: "e"}

    def test_nth_on_infinite_source(self, source: CountingSource) -> None:
        """Test nth pulls only up to the last yielded element."""
        assert ls.Collection(source).nth(3, 1).take(2).to_list() == [1, 4]
        assert source.pulls == 5

    @pytest.mark.parametrize(("step", "offset"), [(0, 0), (-1, 0), (1, -1)])
    def test_nth_invalid(self, step: int, offset: int) -> None:
        """Test invalid step and offset."""
        with pytest.raises(ls.InvalidArgumentError):
            ls.Collection([1]).nth(step, offset)


class TestChunk:
    """Test chunk()."""

    def test_chunk(self) -> None:
        """Test chunks keep inner keys."""
        chunks = ls.Collection([1, 2, 3, 4, 5, 6, 7, 8, 9, 10]).chunk(3).to_list()
        assert len(chunks) == 4
        assert all(isinstance(chunk, ls.Collection) for chunk in chunks)
        assert chunks[0].to_dict() == {0: 1, 1: 2, 2: 3}
        assert chunks[3].to_dict() == {9: 10}

    @pytest.mark.parametrize("size", [0, -1])
    def test_chunk_non_positive_size(self, size: int) -> None:
        """Test a size of 0 or less gives nothing."""
        assert ls.Collection([1, 2, 3]).chunk(size).to_list() == []

    def test_chunk_on_infinite_source(self, source: CountingSource) -> None:
        """Test chunking an infinite source lazily."""
        first = ls.Collection(source).chunk(2).first()
        assert first.to_list() == [0, 1]
        assert source.pulls == 2


class TestSplice:
    """Test splice()."""

    def test_splice_removes_one(self) -> None:
        """Test the default length removes a single element."""
        assert ls.Collection(["foo", "baz"]).splice(1).to_list() == ["foo"]

    def test_splice_inserts(self) -> None:
        """Test inserting a scalar without removing anything."""
        assert ls.Collection(["foo", "baz"]).splice(1, 0, "bar").to_list() == ["foo", "bar", "baz"]

    def test_splice_replaces(self) -> None:
        """Test replacing a range by several values."""
        result = ls.Collection({"a": 1, "b": 2, "c": 3, "d": 4}).splice(1, 2, [20, 30, 35])
        assert result.to_dict() == {0: 1, 1: 20, 2: 30, 3: 35, 4: 4}

    def test_splice_none_length_removes_one(self) -> None:
        """Test a `None` length behaves like the default length."""
        assert ls.Collection([1, 2, 3]).splice(1, None).to_list() == [1, 3]
        assert ls.Collection([1, 2, 3]).splice(0, None, "x").to_list() == ["x", 2, 3]

    def test_splice_mapping_replacement(self) -> None:
        """Test a mapping replacement contributes its values."""
        assert ls.Collection([1, 2]).splice(1, 1, {"x": 9}).to_list() == [1, 9]

    def test_splice_on_infinite_source(self, source: CountingSource) -> None:
        """Test splice stays lazy after the removed range."""
        assert ls.Collection(source).splice(2, 2, "x").take(4).to_list() == [0, 1, "x", 4]
        assert source.pulls == 5

    @pytest.mark.parametrize(("offset", "length"), [(-1, 1), (1, -1)])
    def test_splice_invalid(self, offset: int, length: int) -> None:
        """Test negative bounds are refused."""
        with pytest.raises(ls.InvalidArgumentError):
            ls.Collection([1]).splice(offset, length)
