from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from .._access import strict_equals
from .._option import Option
from .._sequence import Sequence, is_scalar
from .._types import Pair
from ._base import CollectionWrapper, reindex, track_int_key

if TYPE_CHECKING:
    from ._main import Collection


class BaseJoin[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def merge(self, items: Any) -> Collection[Any, Any]:
        """Append the pairs of **items** after the own pairs, with their own keys.

        A scalar is appended under the next integer key, one more than the largest integer key seen.

        `None` adds nothing.

        Args:
            items (Any): Anything accepted by `Collection.from_`.

        Returns:
            Collection[Any, Any]: A lazy merged collection.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"product_id": 1, "price": 100}).merge({"price": 200, "discount": False}).to_dict()
        {'product_id': 1, 'price': 200, 'discount': False}
        >>> ls.Collection(["Desk", "Chair"]).merge(["Bookcase", "Door"]).to_list()
        ['Desk', 'Chair', 'Bookcase', 'Door']
        >>> ls.Collection(["Desk", "Chair"]).merge("Door").to_dict()
        {0: 'Desk', 1: 'Chair', 2: 'Door'}

        ```
        """
        if items is None or is_scalar(items):

            def _merge_scalar(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
                largest = -1
                for pair in data:
                    largest = track_int_key(largest, pair.key)
                    yield pair
                if items is not None:
                    yield Pair(largest + 1, items)

            return self._lazy(_merge_scalar)
        other = Sequence.from_(items)

        def _merge(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            return itertools.chain(data, other.claim())

        return self._lazy(_merge)

    def append(self, items: Any, preserve_keys: bool = True) -> Collection[Any, Any]:
        """Append **items** after the own pairs.

        Args:
            items (Any): Anything accepted by `Collection.from_`.
            preserve_keys (bool): Keep the keys of both sides. Defaults to True. When False, the output is re-keyed from 0.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(["a", "b"]).append(["c"]).keys().to_list()
        [0, 1, 0]
        >>> ls.Collection(["a", "b"]).append(["c"]).to_dict()
        {0: 'c', 1: 'b'}
        >>> ls.Collection(["a", "b"]).append(["c"], preserve_keys=False).to_dict()
        {0: 'a', 1: 'b', 2: 'c'}

        ```
        """
        other = Sequence.from_(items)

        def _append(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            both = itertools.chain(data, other.claim())
            if preserve_keys:
                return both
            return reindex(pair.value for pair in both)

        return self._lazy(_append)

    def push(self, value: Any) -> Collection[Any, Any]:
        """Append **value** under the next integer key.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4]).push(5).to_list()
        [1, 2, 3, 4, 5]
        >>> ls.Collection({"a": 1, 7: 2}).push(3).to_dict()
        {'a': 1, 7: 2, 8: 3}

        ```
        """

        def _push(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            largest = -1
            for pair in data:
                largest = track_int_key(largest, pair.key)
                yield pair
            yield Pair(largest + 1, value)

        return self._lazy(_push)

    def prepend(self, value: Any, key: Any = None) -> Collection[Any, Any]:
        """Insert **value** before the own pairs.

        Without **key**, the whole output is re-keyed from 0.

        With **key**, every key is kept.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3]).prepend(0).to_dict()
        {0: 0, 1: 1, 2: 2, 3: 3}
        >>> ls.Collection({"one": 1, "two": 2}).prepend(0, "zero").to_dict()
        {'zero': 0, 'one': 1, 'two': 2}

        ```
        """

        def _prepend(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            return reindex(
                itertools.chain((value,), (pair.value for pair in data))
            )

        def _prepend_keyed(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            return itertools.chain((Pair(key, value),), data)

        return self._lazy(_prepend if key is None else _prepend_keyed)

    def put(self, key: Any, value: Any) -> Collection[Any, Any]:
        """Set **value** under **key**.

        Pairs with the same key are replaced where they stand.

        If the key never shows up, the pair is appended once the source is exhausted.

        Warning:
            On an infinite source, an absent key is never appended.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"product_id": 1, "name": "Desk"}).put("price", 100).to_dict()
        {'product_id': 1, 'name': 'Desk', 'price': 100}
        >>> ls.Collection({"product_id": 1, "name": "Desk"}).put("product_id", 2).to_dict()
        {'product_id': 2, 'name': 'Desk'}

        ```
        """

        def _put(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            replaced = False
            for pair in data:
                if strict_equals(pair.key, key):
                    replaced = True
                    yield Pair(key, value)
                else:
                    yield pair
            if not replaced:
                yield Pair(key, value)

        return self._lazy(_put)

    def combine(self, values: Any) -> Collection[V, Any]:
        """Use the own values as keys for **values**, positionally.

        Stops as soon as either side is exhausted.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(["name", "age"]).combine(["George", 29]).to_dict()
        {'name': 'George', 'age': 29}
        >>> ls.Collection.from_count().combine("abc").to_dict()
        {0: 'abc'}

        ```
        """
        other = Sequence.from_(values)

        def _combine(data: Iterator[Pair[K, V]]) -> Iterator[Pair[V, Any]]:
            for own, theirs in zip(data, other.claim()):
                yield Pair(own.value, theirs.value)

        return self._lazy(_combine)

    def zip(self, *others: Any) -> Collection[K, Collection[int, Any]]:
        """Bundle each own value with the next value of every other source.

        Each output value is a `Collection` of `[own_value, other_1_value, ...]`, kept under the own key.

        An exhausted source contributes `None`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(["Chair", "Desk"]).zip([100, 200]).map(lambda c: c.to_list()).to_list()
        [['Chair', 100], ['Desk', 200]]
        >>> ls.Collection([1, 2, 3]).zip([4, 5, 6], [7]).map(lambda c: c.to_list()).to_list()
        [[1, 4, 7], [2, 5, None], [3, 6, None]]

        ```
        """
        from ._main import Collection

        sources = tuple(Sequence.from_(other) for other in others)

        def _next_value(source: Iterator[Pair[Any, Any]]) -> Any:
            return Option.from_(next(source, None)).map(lambda pair: pair.value).unwrap_or(None)

        def _zip(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, Collection[int, Any]]]:
            claimed = tuple(source.claim() for source in sources)
            for key, value in data:
                row = [value, *(_next_value(source) for source in claimed)]
                yield Pair(key, Collection(row))

        return self._lazy(_zip)
