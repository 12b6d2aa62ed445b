from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

import more_itertools as mit

from .._errors import InvalidArgumentError
from .._sequence import Sequence, is_nested
from .._types import Pair
from ._base import CollectionWrapper, reindex

if TYPE_CHECKING:
    from ._main import Collection

logger = logging.getLogger(__name__)


def _tail[K, V](data: Iterator[Pair[K, V]], n: int) -> Iterator[Pair[K, V]]:
    logger.debug("Buffering a sliding window of %d pairs", n)
    yield from mit.tail(n, data)


def _no_pairs(data: Iterator[Pair[Any, Any]]) -> Iterator[Pair[Any, Any]]:
    return iter(())


class BaseWindow[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def take(self, n: int) -> Collection[K, V]:
        """Take the first **n** pairs, or the last `abs(n)` pairs if **n** is negative.

        With `n >= 0`, the source is never pulled more than **n** times, so this is safe on infinite sources.

        With `n < 0`, the whole source is consumed through a sliding window of `abs(n)` pairs.

        The source must therefore be finite.

        Keys are preserved in both cases.

        Args:
            n (int): Number of pairs to take.

        Returns:
            Collection[K, V]: A lazy collection of at most `abs(n)` pairs.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection.from_count().take(3).to_list()
        [0, 1, 2]
        >>> ls.Collection(["taylor", "dayle", "shawn"]).take(-2).to_list()
        ['dayle', 'shawn']
        >>> ls.Collection(["taylor", "dayle", "shawn"]).take(-2).to_dict()
        {1: 'dayle', 2: 'shawn'}

        ```
        """
        if n >= 0:
            return self._lazy(itertools.islice, n)
        return self._lazy(_tail, -n)

    def skip(self, n: int) -> Collection[K, V]:
        """Drop the first **n** pairs, keys preserved.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection.from_count().skip(10).take(2).to_dict()
        {10: 10, 11: 11}

        ```
        """
        if n < 0:
            msg = f"Can't skip a negative number of pairs, got {n}"
            raise InvalidArgumentError(msg)
        return self._lazy(itertools.islice, n, None)

    def slice(self, offset: int, length: int | None = None) -> Collection[K, V]:
        """Slice the collection, keys preserved.

        A negative **offset** keeps the last `abs(offset)` pairs, consuming the whole source.

        A positive **offset** skips that many pairs.

        **length**, when given, then bounds the result.

        Args:
            offset (int): Number of pairs to skip, or to keep from the end if negative.
            length (int | None): Maximum number of pairs. Defaults to None, unbounded.

        Returns:
            Collection[K, V]: A lazy sliced collection.

        Raises:
            InvalidArgumentError: If **length** is negative.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(range(1, 11)).slice(4).to_list()
        [5, 6, 7, 8, 9, 10]
        >>> ls.Collection(range(1, 11)).slice(4, 2).to_dict()
        {4: 5, 5: 6}
        >>> ls.Collection(range(1, 11)).slice(-3, 2).to_list()
        [8, 9]
        >>> ls.Collection(range(1, 11)).slice(0, -1)
        Traceback (most recent call last):
            ...
        lazyseq._errors.InvalidArgumentError: Negative slice lengths are not supported

        ```
        """
        if length is not None and length < 0:
            msg = "Negative slice lengths are not supported"
            raise InvalidArgumentError(msg)
        result = self.take(offset) if offset < 0 else self.skip(offset)
        if length is None:
            return result
        return result.take(length)

    def for_page(self, page: int, per_page: int) -> Collection[K, V]:
        """Return the pairs of a 1-indexed page.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(range(1, 10)).for_page(2, 3).to_list()
        [4, 5, 6]
        >>> ls.Collection.from_count(1).for_page(1000, 2).to_list()
        [1999, 2000]

        ```
        """
        if page < 1:
            msg = f"Pages are 1-indexed, got {page}"
            raise InvalidArgumentError(msg)
        return self.slice((page - 1) * per_page, per_page)

    def nth(self, step: int, offset: int = 0) -> Collection[int, V]:
        """Take every **step**-th value, starting after **offset** skipped pairs.

        The result is re-keyed from 0.

        Args:
            step (int): Distance between two taken values, at least 1.
            offset (int): Number of pairs to skip first. Defaults to 0.

        Returns:
            Collection[int, V]: A lazy collection of every **step**-th value.

        Raises:
            InvalidArgumentError: If **step** is lower than 1 or **offset** is negative.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection(["a", "b", "c", "d", "e", "f"]).nth(4).to_list()
        ['a', 'e']
        >>> ls.Collection(["a", "b", "c", "d", "e", "f"]).nth(4, 1).to_list()
        ['b', 'f']

        ```
        """
        if step < 1:
            msg = f"nth() step must be at least 1, got {step}"
            raise InvalidArgumentError(msg)
        if offset < 0:
            msg = f"nth() offset can't be negative, got {offset}"
            raise InvalidArgumentError(msg)

        def _nth(data: Iterator[Pair[K, V]]) -> Iterator[Pair[int, V]]:
            return reindex(
                pair.value for pair in itertools.islice(data, offset, None, step)
            )

        return self._lazy(_nth)

    def chunk(self, size: int) -> Collection[int, Collection[K, V]]:
        """Break the collection into consecutive `Collection`s of **size** pairs.

        The last chunk may be smaller.

        Keys are preserved inside each chunk, and the chunks are keyed from 0.

        A **size** of 0 or less gives an empty result.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> chunks = ls.Collection([1, 2, 3, 4, 5, 6, 7]).chunk(4)
        >>> chunks.map(lambda chunk: chunk.to_dict()).to_list()
        [{0: 1, 1: 2, 2: 3, 3: 4}, {4: 5, 5: 6, 6: 7}]
        >>> ls.Collection([1, 2, 3]).chunk(0).to_list()
        []

        ```
        """
        from ._main import Collection

        def _chunk(data: Iterator[Pair[K, V]]) -> Iterator[Pair[int, Collection[K, V]]]:
            return reindex(Collection.from_pairs(batch) for batch in mit.chunked(data, size))

        if size <= 0:
            return self._lazy(_no_pairs)
        return self._lazy(_chunk)

    def splice(
        self, offset: int, length: int | None = 1, replacement: Any = ()
    ) -> Collection[int, Any]:
        """Remove **length** pairs after **offset**, inserting **replacement** in their place.

        **replacement** is iterated for its values, except strings and other scalars which are inserted as a single value.

        The result is re-keyed from 0.

        Args:
            offset (int): Number of pairs kept before the removed ones.
            length (int | None): Number of pairs to remove, `None` meaning 1. Defaults to 1.
            replacement (Any): Values to insert. Defaults to nothing.

        Returns:
            Collection[int, Any]: A lazy spliced collection.

        Raises:
            InvalidArgumentError: If **offset** or **length** is negative.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3, 4, 5]).splice(2).to_list()
        [1, 2, 4, 5]
        >>> ls.Collection([1, 2, 3, 4, 5]).splice(2, None).to_list()
        [1, 2, 4, 5]
        >>> ls.Collection([1, 2, 3, 4, 5]).splice(1, 2, [10, 11]).to_list()
        [1, 10, 11, 4, 5]
        >>> ls.Collection.from_count().splice(1, 1, "x").take(3).to_list()
        [0, 'x', 2]

        ```
        """
        if length is None:
            length = 1
        if offset < 0 or length < 0:
            msg = f"splice() bounds can't be negative, got offset={offset}, length={length}"
            raise InvalidArgumentError(msg)
        if is_nested(replacement):
            inserted = Sequence.from_(replacement)
        else:
            inserted = Sequence.from_((replacement,))

        def _splice(data: Iterator[Pair[K, V]]) -> Iterator[Any]:
            for pair in itertools.islice(data, offset):
                yield pair.value
            mit.consume(data, length)
            for pair in inserted.claim():
                yield pair.value
            for pair in data:
                yield pair.value

        def _spliced(data: Iterator[Pair[K, V]]) -> Iterator[Pair[int, Any]]:
            return reindex(_splice(data))

        return self._lazy(_spliced)
