"""Tests for building sequences and collections from heterogeneous sources."""

from types import SimpleNamespace

import pytest

import lazyseq as ls


class KeyedRecord:
    """Mapping-like object exposing only `keys()` and `__getitem__`."""

    def __init__(self, **fields: object) -> None:
        self._fields = fields

    def keys(self) -> list[str]:
        return list(self._fields)

    def __getitem__(self, key: str) -> object:
        return self._fields[key]


class TestSourceAdapter:
    """Test the normalization rules of `Sequence.from_`."""

    def test_none_is_empty(self) -> None:
        """Test that None gives an empty collection."""
        assert ls.Collection().to_list() == []
        assert ls.Collection.from_(None).to_dict() == {}

    def test_scalar_is_a_single_pair(self) -> None:
        """Test that scalars become one pair keyed 0."""
        assert ls.Collection("foo").to_dict() == {0: "foo"}
        assert ls.Collection(42).to_dict() == {0: 42}
        assert ls.Collection(b"raw").to_list() == [b"raw"]
        assert ls.Collection(False).to_list() == [False]

    def test_list_and_tuple_are_enumerated(self) -> None:
        """Test that lists and tuples are keyed by position."""
        assert ls.Collection(["a", "b"]).to_dict() == {0: "a", 1: "b"}
        assert ls.Collection(("a", "b")).to_dict() == {0: "a", 1: "b"}

    def test_mapping_keeps_keys(self) -> None:
        """Test that mappings keep their keys and order."""
        data = {"b": 1, "a": 2, 3: "c"}
        assert list(ls.Collection(data)) == [("b", 1), ("a", 2), (3, "c")]

    def test_keys_and_getitem_object(self) -> None:
        """Test that an object with keys() and __getitem__ is read as a mapping."""
        record = KeyedRecord(name="taylor", age=30)
        assert ls.Collection(record).to_dict() == {"name": "taylor", "age": 30}

    def test_simple_namespace_attributes(self) -> None:
        """Test that a SimpleNamespace contributes its attributes."""
        obj = SimpleNamespace(foo="bar", baz=1)
        assert ls.Collection(obj).to_dict() == {"foo": "bar", "baz": 1}

    def test_generic_iterables_are_enumerated(self) -> None:
        """Test generators, ranges and sets."""
        assert ls.Collection(x * 2 for x in range(3)).to_dict() == {0: 0, 1: 2, 2: 4}
        assert ls.Collection(range(2)).to_list() == [0, 1]
        assert ls.Collection({7}).to_list() == [7]

    def test_from_collection_keeps_keys(self) -> None:
        """Test that wrapping a collection keeps its pairs."""
        inner = ls.Collection({"a": 1})
        assert ls.Collection(inner).to_dict() == {"a": 1}

    def test_from_sequence(self) -> None:
        """Test that wrapping a sequence keeps its pairs."""
        seq = ls.Sequence.from_(["x", "y"])
        assert ls.Collection(seq).to_dict() == {0: "x", 1: "y"}

    def test_invalid_input(self) -> None:
        """Test that objects without iteration semantics are rejected."""
        with pytest.raises(ls.InvalidInputError, match="got object"):
            ls.Collection(object())

    def test_invalid_input_is_a_type_error(self) -> None:
        """Test that InvalidInputError can be caught as a TypeError."""
        with pytest.raises(TypeError):
            ls.Sequence.from_(object())

    def test_construction_is_lazy(self) -> None:
        """Test that building a collection from a generator pulls nothing."""
        pulled = []

        def gen() -> object:
            for x in range(3):
                pulled.append(x)
                yield x

        coll = ls.Collection(gen())
        assert pulled == []
        assert coll.to_list() == [0, 1, 2]
        assert pulled == [0, 1, 2]


class TestConstructors:
    """Test the alternative constructors."""

    def test_from_pairs(self) -> None:
        """Test that from_pairs uses the given keys."""
        assert ls.Collection.from_pairs([("x", 1), ("y", 2)]).to_dict() == {"x": 1, "y": 2}

    def test_from_pairs_generator(self) -> None:
        """Test a generator producing its own keys."""

        def squares() -> object:
            for n in range(3):
                yield f"sq{n}", n * n

        assert ls.Collection.from_pairs(squares()).to_dict() == {"sq0": 0, "sq1": 1, "sq2": 4}

    def test_from_count(self) -> None:
        """Test the infinite counter."""
        assert ls.Collection.from_count(5, 5).take(3).to_dict() == {0: 5, 1: 10, 2: 15}

    def test_sequence_from_pairs(self) -> None:
        """Test Sequence.from_pairs yields Pair instances."""
        pairs = list(ls.Sequence.from_pairs([("k", "v")]))
        assert pairs == [ls.Pair("k", "v")]
        assert pairs[0].key == "k"

    def test_pull_next(self) -> None:
        """Test the pull primitive until exhaustion."""
        seq = ls.Sequence.from_(["a"])
        assert seq.pull_next().unwrap() == ls.Pair(0, "a")
        assert seq.pull_next().is_none()
        assert seq.pull_next().is_none()


def test_iteration_yields_pairs() -> None:
    """Test that iterating a collection yields unpackable pairs."""
    seen = {}
    for key, value in ls.Collection({"a": 1, "b": 2}):
        seen[key] = value
    assert seen == {"a": 1, "b": 2}


def test_round_trip() -> None:
    """Test that a key-unique mapping survives a round trip."""
    data = {"x": 1, 5: [2, 3], "z": None}
    assert ls.Collection(ls.Collection(data).to_dict()).to_dict() == data


def test_repr() -> None:
    """Test the repr shows the ownership state."""
    coll = ls.Collection([1])
    assert repr(coll) == "Collection(Sequence(<unclaimed>))"
    coll.to_list()
    assert repr(coll) == "Collection(Sequence(<claimed>))"
