from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Self

import more_itertools as mit

from .._option import Option
from .._sequence import Sequence
from .._types import Pair
from ._base import CollectionWrapper

if TYPE_CHECKING:
    from ._main import Collection


class BaseProcess[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def each(self, func: Callable[[V], Any]) -> Collection[K, V]:
        """Call **func** on each value as it is pulled, passing the pairs through.

        If **func** returns exactly `False`, the collection stops after that element.

        Any other return value, `None` included, lets it continue.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> seen = []
        >>> coll = ls.Collection([1, 2, 3]).each(seen.append)
        >>> seen
        []
        >>> coll.to_list(), seen
        ([1, 2, 3], [1, 2, 3])
        >>> ls.Collection.from_count().each(lambda x: x < 2).to_list()
        [0, 1, 2]

        ```
        """

        def _each(data: Iterator[Pair[K, V]]) -> Iterator[Pair[K, V]]:
            for pair in data:
                stop = func(pair.value) is False
                yield pair
                if stop:
                    return

        return self._lazy(_each)

    def tap(self, func: Callable[[Collection[K, V]], Any]) -> Self:
        """Call **func** with an independent snapshot of the collection, then return it unconsumed.

        The snapshot shares the source through `itertools.tee`: whatever it pulls is buffered until `self` pulls it too.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> seen = []
        >>> coll = ls.Collection([1, 2, 3]).tap(lambda snapshot: seen.extend(snapshot.to_list()))
        >>> seen
        [1, 2, 3]
        >>> coll.map(lambda x: x * 10).to_list()
        [10, 20, 30]

        ```
        """
        from ._main import Collection

        snapshot, rest = itertools.tee(self._pairs())
        func(Collection.from_sequence(Sequence(snapshot)))
        self._inner = Sequence(rest)
        return self

    def when(self, condition: Any, func: Callable[[Self], Collection[Any, Any]]) -> Self:
        """Replace the collection content with `func(self)` when **condition** is truthy.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3]).when(True, lambda c: c.push(4)).to_list()
        [1, 2, 3, 4]
        >>> ls.Collection([1, 2, 3]).when(False, lambda c: c.push(4)).to_list()
        [1, 2, 3]

        ```
        """
        if condition:
            self._inner = func(self).inner()
        return self

    def close(self) -> None:
        """Drain the collection without collecting anything.

        Useful to trigger the side effects of `each`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> seen = []
        >>> ls.Collection([1, 2, 3]).each(seen.append).close()
        >>> seen
        [1, 2, 3]

        ```
        """
        mit.consume(self._pairs())

    def next(self) -> Option[Pair[K, V]]:
        """Pull the next pair.

        Successive calls continue where the previous one stopped, as long as nothing else claimed the collection.

        Returns:
            Option[Pair[K, V]]: `Some(pair)`, or `NONE` once exhausted.

        Raises:
            SequenceConsumedError: If the collection was already claimed and `Config.strict_ownership` is on.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> coll = ls.Collection(["a"])
        >>> coll.next()
        Some(value=(0, 'a'))
        >>> coll.next()
        NONE

        ```
        """
        return self._inner.pull_next()
