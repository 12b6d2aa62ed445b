from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

import more_itertools as mit

from .._access import KeySpec, accessor, comparator, contains, strict_equals
from .._sequence import is_scalar
from .._types import Pair
from ._base import CollectionWrapper

if TYPE_CHECKING:
    from ._main import Collection

logger = logging.getLogger(__name__)

_KEY_CONTAINERS = (list, tuple, set, frozenset)


def _as_keys(keys: tuple[Any, ...]) -> tuple[Any, ...]:
    if len(keys) == 1 and isinstance(keys[0], _KEY_CONTAINERS):
        return tuple(keys[0])
    return keys


class BaseFilter[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def filter(self, predicate: Callable[[V], Any] | None = None) -> Collection[K, V]:
        """Keep the pairs whose value passes **predicate**.

        Keys are preserved.

        Args:
            predicate (Callable[[V], Any] | None): Function tested against each value. Defaults to None, which keeps truthy values.

        Returns:
            Collection[K, V]: A lazy filtered collection.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4]).filter(lambda x: x % 2 == 0).to_dict()
        {1: 2, 3: 4}
        >>> ls.Collection([0, 1, "", "a", None]).filter().to_list()
        [1, 'a']

        ```
        """
        check = bool if predicate is None else predicate

        def _filter(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, V]]:
            for pair in data:
                if check(pair.value):
                    yield pair

        return self._lazy(_filter)

    def filter_items(self, predicate: Callable[[Pair[K, V]], Any]) -> Collection[K, V]:
        """Keep the pairs accepted by **predicate**, which receives the whole `Pair`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"a": 1, "b": 2, "c": 3}).filter_items(lambda p: p.key != "b").to_dict()
        {'a': 1, 'c': 3}

        ```
        """

        def _filter_items(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, V]]:
            for pair in data:
                if predicate(pair):
                    yield pair

        return self._lazy(_filter_items)

    def reject(self, predicate: Callable[[V], Any] | Any) -> Collection[K, V]:
        """The inverse of `filter`.

        **predicate** is interpreted according to its type:

        - a callable: values for which it returns a truthy result are removed.
        - anything else: scalar (or `None`) values strictly equal to it are removed, and non scalar values are removed when the key it names is truthy on them.

        Args:
            predicate (Callable[[V], Any] | Any): Function, value, or key to reject by.

        Returns:
            Collection[K, V]: A lazy filtered collection, keys preserved.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4]).reject(lambda x: x > 2).to_list()
        [1, 2]
        >>> ls.Collection(["a", "b", "a"]).reject("a").to_dict()
        {1: 'b'}
        >>> ls.Collection([{"done": True}, {"done": False}]).reject("done").to_list()
        [{'done': False}]

        ```
        """
        if callable(predicate):
            return self.filter(lambda value: not predicate(value))
        get = accessor(predicate)

        def _keep(value: V) -> bool:
            if value is None or is_scalar(value):
                return not strict_equals(value, predicate)
            return not get(value)

        return self.filter(_keep)

    def forget(self, keys: Any) -> Collection[K, V]:
        """Drop the pairs whose key is **keys**, or is one of **keys** when it's a `list`, `tuple` or `set`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"name": "taylor", "framework": "laravel"}).forget("name").to_dict()
        {'framework': 'laravel'}
        >>> ls.Collection(["a", "b", "c"]).forget([0, 2]).to_list()
        ['b']

        ```
        """
        if isinstance(keys, _KEY_CONTAINERS):
            dropped = tuple(keys)
            return self.filter_items(
                lambda pair: not contains(dropped, pair.key, strict=False)
            )
        return self.filter_items(lambda pair: not strict_equals(pair.key, keys))

    def except_(self, *keys: Any) -> Collection[K, V]:
        """Drop the pairs with the given keys.

        The keys can be passed as separate arguments or as a single `list`.

        A single callable argument is used as a predicate on the `Pair` instead, dropping the pairs it accepts.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = {"product_id": 1, "price": 100, "discount": False}
        >>> ls.Collection(data).except_("price", "discount").to_dict()
        {'product_id': 1}
        >>> ls.Collection(data).except_(["product_id"]).to_dict()
        {'price': 100, 'discount': False}
        >>> ls.Collection(data).except_(lambda p: p.value == 100).to_dict()
        {'product_id': 1, 'discount': False}

        ```
        """
        if len(keys) == 1 and callable(keys[0]):
            drop = keys[0]
            return self.filter_items(lambda pair: not drop(pair))
        dropped = _as_keys(keys)
        return self.filter_items(
            lambda pair: not contains(dropped, pair.key, strict=False)
        )

    def only(self, *keys: Any) -> Collection[K, V]:
        """Keep only the pairs with the given keys.

        `only(None)` keeps everything.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = {"product_id": 1, "name": "Desk", "price": 100}
        >>> ls.Collection(data).only("product_id", "name").to_dict()
        {'product_id': 1, 'name': 'Desk'}
        >>> ls.Collection(data).only(None).length()
        3

        ```
        """
        if len(keys) == 1 and keys[0] is None:
            return self._lazy(iter)
        kept = _as_keys(keys)
        return self.filter_items(lambda pair: contains(kept, pair.key, strict=False))

    def where(self, criteria: Mapping[Any, Any], strict: bool = False) -> Collection[K, V]:
        """Keep the elements matching every `key: expected` criterion.

        Keys resolve as described in `lazyseq._access`.

        Loose comparison (the default) considers a numeric string equal to the number it spells.

        Args:
            criteria (Mapping[Any, Any]): Expected value for each key.
            strict (bool): Require the same type as well as equal values. Defaults to False.

        Returns:
            Collection[K, V]: A lazy filtered collection, keys preserved.

        Raises:
            AccessError: When pulled, if an element lacks one of the keys.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = [
        ...     {"product": "Desk", "price": 200},
        ...     {"product": "Chair", "price": "100"},
        ...     {"product": "Door", "price": 100},
        ... ]
        >>> ls.Collection(data).where({"price": 100}).pluck("product").to_list()
        ['Chair', 'Door']
        >>> ls.Collection(data).where({"price": 100}, strict=True).pluck("product").to_list()
        ['Door']

        ```
        """
        eq = comparator(strict=strict)
        checks = tuple((accessor(key), expected) for key, expected in criteria.items())

        def _matches(value: V) -> bool:
            return all(eq(get(value), expected) for get, expected in checks)

        return self.filter(_matches)

    def where_in(self, key: KeySpec, values: Any, strict: bool = False) -> Collection[K, V]:
        """Keep the elements whose **key** is one of **values**.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = [{"price": 100}, {"price": 150}, {"price": 200}]
        >>> ls.Collection(data).where_in("price", [150, "200"]).pluck("price").to_list()
        [150, 200]
        >>> ls.Collection(data).where_in("price", [150, "200"], strict=True).pluck("price").to_list()
        [150]

        ```
        """
        get = accessor(key)
        allowed = tuple(values)
        return self.filter(lambda value: contains(allowed, get(value), strict=strict))

    def unique(self, key: KeySpec = None, strict: bool = False) -> Collection[K, V]:
        """Keep the first element of each distinct value, keys preserved.

        Unhashable values are supported.

        Warning:
            Every distinct value is kept in memory: the source must be finite, or have a finite number of distinct values.

        Args:
            key (KeySpec): Key, path or function computing the compared value. Defaults to None, the element itself.
            strict (bool): Compare types as well as values. Defaults to False.

        Returns:
            Collection[K, V]: A lazy deduplicated collection.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 1, 2, 2, 3, 4, 2]).unique().to_dict()
        {0: 1, 2: 2, 4: 3, 5: 4}
        >>> ls.Collection([1, "1", 2]).unique().to_list()
        [1, 2]
        >>> ls.Collection([1, "1", 2]).unique(strict=True).to_list()
        [1, '1', 2]
        >>> data = [{"brand": "Apple"}, {"brand": "Samsung"}, {"brand": "Apple"}]
        >>> ls.Collection(data).unique("brand").pluck("brand").to_list()
        ['Apple', 'Samsung']

        ```
        """
        get = accessor(key)

        def _token(pair: Pair[K, V]) -> tuple[type, Any]:
            compared = get(pair.value)
            return type(compared), compared

        def _unique_strict(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, V]]:
            logger.debug("unique() tracks every distinct value in memory")
            yield from mit.unique_everseen(data, key=_token)

        def _unique_loose(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, V]]:
            logger.debug("unique() tracks every distinct value in memory")
            seen: list[Any] = []
            for pair in data:
                compared = get(pair.value)
                if not contains(seen, compared, strict=False):
                    seen.append(compared)
                    yield pair

        return self._lazy(_unique_strict if strict else _unique_loose)
