from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from .._access import KeySpec, accessor
from .._sequence import is_nested, iter_values
from .._types import Pair
from ._base import CollectionWrapper, reindex

if TYPE_CHECKING:
    from ._main import Collection


def _flatten(values: Iterable[Any], depth: float) -> Iterator[Any]:
    lower = depth - 1
    for value in values:
        if lower >= 0 and is_nested(value):
            yield from _flatten(iter_values(value), lower)
        else:
            yield value


class BaseMap[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def map[R](self, func: Callable[[V], R]) -> Collection[K, R]:
        """Map each value through **func**, keeping the keys.

        Args:
            func (Callable[[V], R]): Function to apply to each value.

        Returns:
            Collection[K, R]: A lazy collection of transformed values.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"first": "taylor", "last": "otwell"}).map(str.upper).to_dict()
        {'first': 'TAYLOR', 'last': 'OTWELL'}

        ```
        """

        def _map(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, R]]:
            for key, value in data:
                yield Pair(key, func(value))

        return self._lazy(_map)

    def transform[R](self, func: Callable[[V], R]) -> Collection[K, R]:
        """Alias of `map`."""
        return self.map(func)

    def map_items[KR, VR](
        self, func: Callable[[Pair[K, V]], tuple[KR, VR]]
    ) -> Collection[KR, VR]:
        """Transform each pair with a function receiving the whole `Pair`.

        This is the key-aware counterpart of `map`.

        Args:
            func (Callable[[Pair[K, V]], tuple[KR, VR]]): Function returning a new `(key, value)` tuple.

        Returns:
            Collection[KR, VR]: A lazy collection of the transformed pairs.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = ls.Collection({"first": "taylor", "last": "otwell"})
        >>> data.map_items(lambda p: (p.key, f"{p.key}-{p.value[::-1]}")).to_dict()
        {'first': 'first-rolyat', 'last': 'last-llewto'}

        ```
        """

        def _map_items(data: Iterator[Pair[K, V]]) -> Iterator[Pair[KR, VR]]:
            for pair in data:
                yield Pair(*func(pair))

        return self._lazy(_map_items)

    def map_with_keys[KR, VR](
        self,
        func: Callable[[V], Mapping[KR, VR] | Iterable[tuple[KR, VR]]],
    ) -> Collection[KR, VR]:
        """Map each value to one or more new `(key, value)` pairs.

        Args:
            func (Callable[[V], Mapping[KR, VR] | Iterable[tuple[KR, VR]]]): Function returning a mapping, or an iterable of `(key, value)` tuples.

        Returns:
            Collection[KR, VR]: A lazy collection of every returned pair, in order.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = ls.Collection([{"id": 1, "name": "A"}, {"id": 2, "name": "B"}])
        >>> data.map_with_keys(lambda d: {d["name"]: d["id"]}).to_dict()
        {'A': 1, 'B': 2}
        >>> data = ls.Collection([{"id": 1, "name": "A"}])
        >>> data.map_with_keys(lambda d: [(d["id"], d["name"]), (d["name"], d["id"])]).to_dict()
        {1: 'A', 'A': 1}

        ```
        """

        def _map_with_keys(data: Iterator[Pair[K, V]]) -> Iterator[Pair[KR, VR]]:
            for pair in data:
                result = func(pair.value)
                items = result.items() if isinstance(result, Mapping) else result
                for key, value in items:
                    yield Pair(key, value)

        return self._lazy(_map_with_keys)

    def flip(self) -> Collection[V, K]:
        """Swap the keys with the values.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"name": "taylor", "framework": "laravel"}).flip().to_dict()
        {'taylor': 'name', 'laravel': 'framework'}

        ```
        """

        def _flip(data: Iterator[Pair[K, V]]) -> Iterator[Pair[V, K]]:
            for key, value in data:
                yield Pair(value, key)

        return self._lazy(_flip)

    def keys(self) -> Collection[int, K]:
        """Return the keys as values, keyed by position.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"name": "taylor", "framework": "laravel"}).keys().to_list()
        ['name', 'framework']

        ```
        """

        def _keys(data: Iterator[Pair[K, V]]) -> Iterator[Pair[int, K]]:
            return reindex(pair.key for pair in data)

        return self._lazy(_keys)

    def values(self) -> Collection[int, V]:
        """Discard the keys, re-keying the values sequentially from 0.

        Use it when key identity must be reset, after slicing or filtering for example.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(["", "Hello", "", "World"]).filter().values().to_dict()
        {0: 'Hello', 1: 'World'}

        ```
        """

        def _values(data: Iterator[Pair[K, V]]) -> Iterator[Pair[int, V]]:
            return reindex(pair.value for pair in data)

        return self._lazy(_values)

    def pluck(self, value: KeySpec, key: KeySpec = None) -> Collection[Any, Any]:
        """Extract a value from each element, optionally keyed by another extracted value.

        See `lazyseq._access` for how **value** and **key** resolve against an element.

        Args:
            value (KeySpec): Key, attribute, path or function giving the new values.
            key (KeySpec): Key, attribute, path or function giving the new keys. Defaults to None, which re-keys by position.

        Returns:
            Collection[Any, Any]: A lazy collection of extracted values.

        Raises:
            AccessError: When pulled, if an element doesn't resolve.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> from types import SimpleNamespace
        >>> data = [SimpleNamespace(name="taylor", email="foo"), {"name": "dayle", "email": "bar"}]
        >>> ls.Collection(data).pluck("email").to_list()
        ['foo', 'bar']
        >>> ls.Collection(data).pluck("email", "name").to_dict()
        {'taylor': 'foo', 'dayle': 'bar'}

        ```
        """
        get_value = accessor(value)

        def _pluck(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            return reindex(get_value(pair.value) for pair in data)

        def _pluck_keyed(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            for pair in data:
                yield Pair(get_key(pair.value), get_value(pair.value))

        if key is None:
            return self._lazy(_pluck)
        get_key = accessor(key)
        return self._lazy(_pluck_keyed)

    def key_by(self, key: KeySpec) -> Collection[Any, V]:
        """Re-key each element by a derived key.

        Later duplicates overwrite earlier ones when materialized with `to_dict()`.

        Args:
            key (KeySpec): Key, attribute, path or function giving the new keys.

        Returns:
            Collection[Any, V]: A lazy collection of re-keyed elements.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = [{"rating": 1, "name": "1"}, {"rating": 2, "name": "2"}]
        >>> ls.Collection(data).key_by("rating").keys().to_list()
        [1, 2]
        >>> ls.Collection(data).key_by(lambda d: d["rating"] * 2).keys().to_list()
        [2, 4]

        ```
        """
        get_key = accessor(key)

        def _key_by(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, V]]:
            for pair in data:
                yield Pair(get_key(pair.value), pair.value)

        return self._lazy(_key_by)

    def flatten(self, depth: float = math.inf) -> Collection[int, Any]:
        """Recursively expand nested containers up to **depth** levels.

        Lists, tuples, sets, mappings (their values), nested `Collection`s and iterators are expanded.

        Strings and bytes are never expanded.

        Keys are discarded: the output is re-keyed by position.

        Args:
            depth (float): Number of levels to expand. 0 expands nothing. Defaults to `math.inf`, fully recursive.

        Returns:
            Collection[int, Any]: A lazy flat collection.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([[1, 2], [3, [4]]]).flatten().to_list()
        [1, 2, 3, 4]
        >>> ls.Collection([[1, 2], [3, [4]]]).flatten(1).to_list()
        [1, 2, 3, [4]]
        >>> ls.Collection(["#foo", {"key": "#bar"}, ls.Collection(["#baz"])]).flatten().to_list()
        ['#foo', '#bar', '#baz']

        ```
        """

        def _flatten_values(data: Iterator[Pair[K, V]]) -> Iterator[Pair[int, Any]]:
            return reindex(_flatten((pair.value for pair in data), depth))

        return self._lazy(_flatten_values)

    def collapse(self) -> Collection[int, Any]:
        """Flatten a single level.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([ls.Collection([1, 2, 3]), [4, 5, 6]]).collapse().to_list()
        [1, 2, 3, 4, 5, 6]

        ```
        """
        return self.flatten(1)

    def flat_map(
        self, func: Callable[[V], Any], depth: float = math.inf
    ) -> Collection[int, Any]:
        """Map each value through **func**, then flatten to **depth**.

        Args:
            func (Callable[[V], Any]): Function to apply to each value.
            depth (float): Flattening depth. Defaults to `math.inf`.

        Returns:
            Collection[int, Any]: A lazy flat collection.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = [
        ...     {"name": "taylor", "hobbies": ["programming", "basketball"]},
        ...     {"name": "adam", "hobbies": ["music", "powerlifting"]},
        ... ]
        >>> ls.Collection(data).flat_map(lambda person: person["hobbies"]).to_list()
        ['programming', 'basketball', 'music', 'powerlifting']

        ```
        """
        return self.map(func).flatten(depth)
