from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .._core import Serializable, json_dumps
from ._base import CollectionWrapper


def _serialize(value: Any) -> Any:
    match value:
        case Serializable():
            return value.serialize()
        case Mapping():
            return {key: _serialize(item) for key, item in value.items()}
        case list() | tuple():
            return [_serialize(item) for item in value]
        case _:
            return value


def _is_positional(keys: list[Any]) -> bool:
    return all(
        isinstance(key, int) and not isinstance(key, bool) and key == idx
        for idx, key in enumerate(keys)
    )


class BaseEager[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def to_list(self) -> list[V]:
        """Collect the values in a `list`, discarding the keys.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"a": 1, "b": 2}).to_list()
        [1, 2]

        ```
        """
        return [pair.value for pair in self._pairs()]

    def to_dict(self) -> dict[K, V]:
        """Collect the pairs in a `dict`.

        A duplicated key keeps its first position and its last value.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(["a", "b"]).to_dict()
        {0: 'a', 1: 'b'}
        >>> ls.Collection.from_pairs([("x", 1), ("y", 2), ("x", 3)]).to_dict()
        {'x': 3, 'y': 2}

        ```
        """
        return self._into(dict)

    def serialize(self) -> list[Any] | dict[Any, Any]:
        """Collect the collection into a JSON-compatible structure.

        The result is a `list` when the keys are exactly `0, 1, 2...` in order, and a `dict` otherwise.

        Nested collections, and any object implementing `Serializable`, are serialized recursively.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, ls.Collection({"a": 2})]).serialize()
        [1, {'a': 2}]
        >>> ls.Collection(["a", "b", "c"]).filter(lambda x: x != "b").serialize()
        {0: 'a', 2: 'c'}

        ```
        """
        pairs = list(self._pairs())
        keys = [pair.key for pair in pairs]
        values = [_serialize(pair.value) for pair in pairs]
        if _is_positional(keys):
            return values
        return dict(zip(keys, values))

    def to_json(self) -> str:
        """Return the JSON text of `serialize()`.

        Formatting follows `Config.json_indent` and `Config.json_ensure_ascii`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"name": "taylor", "tags": ls.Collection(["a", "b"])}).to_json()
        '{"name": "taylor", "tags": ["a", "b"]}'

        ```
        """
        return json_dumps(self.serialize())

    def __str__(self) -> str:
        return self.to_json()
