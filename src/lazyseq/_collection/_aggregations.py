from __future__ import annotations

import functools
import logging
import statistics
from collections.abc import Callable, Iterator
from typing import Any

import cytoolz as cz

from .._access import KeySpec, accessor
from .._core import SupportsRichComparison
from .._types import ABSENT
from ._base import CollectionWrapper

logger = logging.getLogger(__name__)


class BaseAgg[K, V](CollectionWrapper[K, V]):
    """Terminal reductions.

    Each of them consumes the whole `Sequence`, so the source must be finite.

    Except for `reduce`, every method accepts an optional **key** argument resolved against each element (see `lazyseq._access`).
    """

    __slots__ = ()

    def _values(self, key: KeySpec) -> Iterator[Any]:
        get = accessor(key)
        return (get(pair.value) for pair in self._pairs())

    def sum(self, key: KeySpec = None) -> Any:
        """Return the sum of the values, or 0 if empty.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4, 5]).sum()
        15
        >>> ls.Collection([{"pages": 176}, {"pages": 1096}]).sum("pages")
        1272
        >>> ls.Collection().sum()
        0

        ```
        """
        return sum(self._values(key))

    def avg(self, key: KeySpec = None) -> float | None:
        """Return the average of the values, or None if empty.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([{"foo": 10}, {"foo": 10}, {"foo": 20}, {"foo": 40}]).avg("foo")
        20.0
        >>> ls.Collection([1, 1, 2, 4]).avg()
        2.0
        >>> ls.Collection().avg() is None
        True

        ```
        """
        total = 0
        count = 0
        for value in self._values(key):
            total += value
            count += 1
        if not count:
            return None
        return total / count

    def average(self, key: KeySpec = None) -> float | None:
        """Alias of `avg`."""
        return self.avg(key)

    def min(self, key: KeySpec = None) -> SupportsRichComparison[Any] | None:
        """Return the smallest value, ignoring `None`s, or None if there's none.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([{"foo": 10}, {"foo": 20}]).min("foo")
        10
        >>> ls.Collection([None, 5, 3]).min()
        3

        ```
        """
        return min((v for v in self._values(key) if v is not None), default=None)

    def max(self, key: KeySpec = None) -> SupportsRichComparison[Any] | None:
        """Return the largest value, ignoring `None`s, or None if there's none.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([{"foo": 10}, {"foo": 20}]).max("foo")
        20
        >>> ls.Collection().max() is None
        True

        ```
        """
        return max((v for v in self._values(key) if v is not None), default=None)

    def reduce[R](self, func: Callable[[R, V], R], initial: R | None = None) -> R | None:
        """Fold the values into a single one, starting from **initial**.

        Args:
            func (Callable[[R, V], R]): Function receiving the carry and the next value.
            initial (R | None): Starting carry. Defaults to None.

        Returns:
            R | None: The final carry, or **initial** if empty.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3]).reduce(lambda carry, value: carry + value, 4)
        10
        >>> ls.Collection().reduce(lambda carry, value: carry + value) is None
        True

        ```
        """
        return functools.reduce(func, (pair.value for pair in self._pairs()), initial)  # type: ignore[arg-type]

    def median(self, key: KeySpec = None) -> Any:
        """Return the median of the values, or None if empty.

        With an even count, the mean of the two middle values is returned.

        Warning:
            Every value is buffered in memory.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 2, 4]).median()
        2.0
        >>> ls.Collection([{"foo": 10}, {"foo": 10}, {"foo": 20}, {"foo": 40}]).median("foo")
        15.0
        >>> ls.Collection().median() is None
        True

        ```
        """
        values = list(self._values(key))
        logger.debug("median() buffered %d values", len(values))
        if not values:
            return None
        return statistics.median(values)

    def mode(self, key: KeySpec = None) -> list[Any] | None:
        """Return every value tied for the highest frequency, in first-seen order, or None if empty.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 2, 1]).mode()
        [1, 2]
        >>> ls.Collection([{"foo": 10}, {"foo": 10}, {"foo": 20}, {"foo": 40}]).mode("foo")
        [10]
        >>> ls.Collection().mode() is None
        True

        ```
        """
        counts: dict[Any, int] = cz.itertoolz.frequencies(self._values(key))
        if not counts:
            return None
        highest = max(counts.values())
        return [value for value, count in counts.items() if count == highest]

    def implode(self, glue: str = "", key: KeySpec = None) -> str:
        """Join the string form of the values with **glue**.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4, 5]).implode("-")
        '1-2-3-4-5'
        >>> ls.Collection([{"product": "Desk"}, {"product": "Chair"}]).implode(", ", "product")
        'Desk, Chair'

        ```
        """
        return glue.join(str(value) for value in self._values(key))

    def first(
        self, predicate: Callable[[V], Any] | None = None, default: Any = None
    ) -> Any:
        """Return the first value passing **predicate**, or **default**.

        Pulls only until a match is found, so it's safe on infinite sources when a match exists.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4]).first()
        1
        >>> ls.Collection.from_count().first(lambda x: x > 2)
        3
        >>> ls.Collection([1, 2]).first(lambda x: x > 2, "none")
        'none'

        ```
        """
        for pair in self._pairs():
            if predicate is None or predicate(pair.value):
                return pair.value
        return default

    def last(
        self, predicate: Callable[[V], Any] | None = None, default: Any = None
    ) -> Any:
        """Return the last value passing **predicate**, or **default**.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4]).last(lambda x: x < 3)
        2
        >>> ls.Collection().last(default=0)
        0

        ```
        """
        found: Any = ABSENT
        for pair in self._pairs():
            if predicate is None or predicate(pair.value):
                found = pair.value
        return default if found is ABSENT else found

    def length(self) -> int:
        """Return the number of pairs.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection({"a": 1, "b": 2}).length()
        2

        ```
        """
        return self._into(cz.itertoolz.count)
