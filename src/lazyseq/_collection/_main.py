from __future__ import annotations

import itertools
from collections.abc import Iterable
from typing import Any

from .._sequence import Sequence
from ._aggregations import BaseAgg
from ._eager import BaseEager
from ._filters import BaseFilter
from ._groups import BaseGroup
from ._joins import BaseJoin
from ._maps import BaseMap
from ._process import BaseProcess
from ._windows import BaseWindow


class Collection[K, V](
    BaseFilter[K, V],
    BaseMap[K, V],
    BaseWindow[K, V],
    BaseJoin[K, V],
    BaseGroup[K, V],
    BaseProcess[K, V],
    BaseAgg[K, V],
    BaseEager[K, V],
):
    """A lazy, chainable wrapper around a single-pass `Sequence` of `(key, value)` pairs.

    - Any data source can be wrapped: lists, mappings, scalars, generators, other collections... See `Sequence.from_` for the exact rules.
    - Chainable methods return a new `Collection` without pulling anything from the source.
    - Terminal methods (`to_list`, `sum`, `first`...) and iteration drive the evaluation.

    A `Collection` is single-use: chaining a method, iterating, or calling a terminal method takes ownership of its `Sequence`.

    Reusing it afterwards raises `SequenceConsumedError` (see `Config.strict_ownership`).

    If you need the data twice, materialize it first with `to_dict()` or `to_list()`, or inspect it with `tap()`.

    Infinite sources are fine as long as the pipeline bounds what it pulls, with `take()`, `first()`, `each()`...

    Args:
        data (Any): The source to wrap. Defaults to None, an empty collection.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> coll = ls.Collection([1, 2, 3, 4])
    >>> coll.map(lambda x: x * 2).filter(lambda x: x > 4).to_dict()
    {2: 6, 3: 8}
    >>> coll.to_list()
    Traceback (most recent call last):
        ...
    lazyseq._errors.SequenceConsumedError: Sequence was already claimed by another consumer
    >>> for key, value in ls.Collection({"a": 1}):
    ...     print(key, value)
    a 1

    ```
    """

    __slots__ = ()

    def __init__(self, data: Any = None) -> None:
        self._inner = Sequence.from_(data)

    @staticmethod
    def from_sequence[KU, VU](sequence: Sequence[KU, VU]) -> Collection[KU, VU]:
        """Wrap an existing `Sequence` as is, without claiming it."""
        coll: Collection[KU, VU] = Collection.__new__(Collection)
        coll._inner = sequence
        return coll

    @staticmethod
    def from_(data: Any = None) -> Collection[Any, Any]:
        """Create a `Collection` from any supported source.

        Equivalent to the constructor.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection.from_("foo").to_list()
        ['foo']
        >>> ls.Collection.from_(None).to_list()
        []

        ```
        """
        return Collection(data)

    @staticmethod
    def from_pairs[KU, VU](pairs: Iterable[tuple[KU, VU]]) -> Collection[KU, VU]:
        """Create a `Collection` from `(key, value)` tuples.

        Use it when a generator produces its own keys.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> def fizz():
        ...     for n in range(1, 4):
        ...         yield f"n{n}", n * 3
        >>> ls.Collection.from_pairs(fizz()).to_dict()
        {'n1': 3, 'n2': 6, 'n3': 9}

        ```
        """
        return Collection.from_sequence(Sequence.from_pairs(pairs))

    @staticmethod
    def from_count(start: int = 0, step: int = 1) -> Collection[int, int]:
        """Create an infinite `Collection` of evenly spaced values, keyed by position.

        **Warning** ⚠️
            This creates an infinite collection.
            Be sure to use `take()`, `slice()` or `first()` to limit the number of pairs pulled.

        Args:
            start (int): Starting value. Defaults to 0.
            step (int): Difference between consecutive values. Defaults to 1.

        Returns:
            Collection[int, int]: A lazy, infinite collection.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection.from_count(10, 2).take(3).to_list()
        [10, 12, 14]

        ```
        """
        return Collection(itertools.count(start, step))
