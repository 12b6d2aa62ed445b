from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Mapping
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any

from ._core import SupportsKeysAndGetItem, get_config
from ._errors import InvalidInputError, SequenceConsumedError
from ._option import Option
from ._types import Pair

if TYPE_CHECKING:
    from ._collection import Collection

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)


class Sequence[K, V](Iterator[Pair[K, V]]):
    """A single-pass, pull-based producer of `Pair(key, value)`.

    A `Sequence` wraps exactly one iterator of pairs. Once a pair has been pulled, it can't be pulled again.

    A `Sequence` is driven by exactly one consumer. The consumer takes ownership with `claim()`:

    - a downstream operator claims its upstream when it is chained,
    - a terminal operation claims it when it is called,
    - iterating over the owning `Collection` claims it.

    While `Config.strict_ownership` is on (the default), a second claim raises `SequenceConsumedError`.

    Note:
        You rarely need to build a `Sequence` yourself: `Collection` does it for you.

    Args:
        pairs (Iterable[Pair[K, V]]): The pairs to produce, already normalized.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> seq = ls.Sequence.from_(["a", "b"])
    >>> seq.pull_next()
    Some(value=(0, 'a'))
    >>> list(seq.claim())
    [(1, 'b')]
    >>> seq.claim()
    Traceback (most recent call last):
        ...
    lazyseq._errors.SequenceConsumedError: Sequence was already claimed by another consumer

    ```
    """

    _pairs: Iterator[Pair[K, V]]
    _claimed: bool

    __slots__ = ("_claimed", "_pairs")

    def __init__(self, pairs: Iterable[Pair[K, V]]) -> None:
        self._pairs = iter(pairs)
        self._claimed = False

    def __next__(self) -> Pair[K, V]:
        self._check_owner()
        return next(self._pairs)

    def _check_owner(self) -> None:
        if self._claimed and get_config().strict_ownership:
            msg = "Sequence was already claimed by another consumer"
            raise SequenceConsumedError(msg)

    def __repr__(self) -> str:
        state = "claimed" if self._claimed else "unclaimed"
        return f"{self.__class__.__name__}(<{state}>)"

    @property
    def claimed(self) -> bool:
        """Whether a consumer already took ownership of this `Sequence`."""
        return self._claimed

    def claim(self) -> Iterator[Pair[K, V]]:
        """Take exclusive ownership of the `Sequence`.

        The owner gets the underlying iterator. From then on, pulling from the `Sequence` object itself is refused.

        Returns:
            Iterator[Pair[K, V]]: The pairs, ready to be pulled by the owner.

        Raises:
            SequenceConsumedError: If the sequence was already claimed and `Config.strict_ownership` is on.
        """
        if self._claimed:
            self._check_owner()
            logger.debug("Sequence claimed twice, strict ownership is off")
        self._claimed = True
        return self._pairs

    def pull_next(self) -> Option[Pair[K, V]]:
        """Pull the next pair.

        This is the primitive every operator is built upon.

        Returns:
            Option[Pair[K, V]]: `Some(pair)`, or `NONE` once the sequence is exhausted.

        Raises:
            SequenceConsumedError: If the sequence was claimed and `Config.strict_ownership` is on.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> seq = ls.Sequence.from_([1, 2])
        >>> wrapped = ls.Collection(seq)
        >>> seq.pull_next()
        Traceback (most recent call last):
            ...
        lazyseq._errors.SequenceConsumedError: Sequence was already claimed by another consumer
        >>> wrapped.to_list()
        [1, 2]

        ```
        """
        self._check_owner()
        return Option.from_(next(self._pairs, None))

    @staticmethod
    def from_pairs[KU, VU](pairs: Iterable[tuple[KU, VU]]) -> Sequence[KU, VU]:
        """Create a `Sequence` from an iterable of `(key, value)` tuples.

        Use this when a generator produces its own keys.

        Args:
            pairs (Iterable[tuple[KU, VU]]): The `(key, value)` tuples.

        Returns:
            Sequence[KU, VU]: A new unclaimed sequence.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> list(ls.Sequence.from_pairs(iter([("x", 1), ("y", 2)])))
        [('x', 1), ('y', 2)]

        ```
        """
        return Sequence(itertools.starmap(Pair, pairs))

    @staticmethod
    def from_(data: Any = None) -> Sequence[Any, Any]:
        """Normalize **data** into a `Sequence`.

        Accepted inputs:

        - `None`: an empty sequence.
        - A scalar (`str`, `bytes`, `int`, `float`, `bool`...): a single pair keyed `0`.
        - A `list` or `tuple`: pairs keyed by position.
        - A `Mapping`, or any object with `keys()` and `__getitem__`: its items.
        - A `types.SimpleNamespace`: its attributes.
        - A `Sequence` or a `Collection`: its pairs, taking ownership of it.
        - Any other `Iterable`: pairs keyed by position, pulled lazily.

        Args:
            data (Any): The source to normalize.

        Returns:
            Sequence[Any, Any]: A new unclaimed sequence.

        Raises:
            InvalidInputError: If **data** has no iteration semantics.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> list(ls.Sequence.from_("foo"))
        [(0, 'foo')]
        >>> list(ls.Sequence.from_({"a": 1, "b": 2}))
        [('a', 1), ('b', 2)]
        >>> list(ls.Sequence.from_(None))
        []
        >>> ls.Sequence.from_(object())
        Traceback (most recent call last):
            ...
        lazyseq._errors.InvalidInputError: Invalid value passed, must be an iterable or a scalar, got object

        ```
        """
        from ._collection import Collection

        match data:
            case None:
                return Sequence(())
            case Sequence():
                return Sequence(data.claim())
            case Collection():
                return Sequence(data.inner().claim())
            case _ if isinstance(data, _SCALARS):
                return Sequence((Pair(0, data),))
            case list() | tuple():
                return Sequence(itertools.starmap(Pair, enumerate(data)))
            case Mapping():
                return Sequence(itertools.starmap(Pair, data.items()))
            case SimpleNamespace():
                return Sequence(itertools.starmap(Pair, vars(data).items()))
            case _ if hasattr(data, "keys") and hasattr(data, "__getitem__"):
                return Sequence(_keyed(data))
            case Iterable():
                logger.debug("Lazily enumerating %s source", type(data).__name__)
                return Sequence(itertools.starmap(Pair, enumerate(data)))
            case _:
                msg = (
                    "Invalid value passed, must be an iterable or a scalar, "
                    f"got {type(data).__name__}"
                )
                raise InvalidInputError(msg)


def _keyed[K, V](data: SupportsKeysAndGetItem[K, V]) -> Iterator[Pair[K, V]]:
    for key in data.keys():
        yield Pair(key, data[key])


def is_scalar(value: object) -> bool:
    return isinstance(value, _SCALARS)


def is_nested(value: object) -> bool:
    """Whether **value** is a container that `flatten` expands.

    Strings and bytes are atoms.
    """
    from ._collection import Collection

    return isinstance(value, (Collection, Sequence)) or (
        isinstance(value, Iterable) and not is_scalar(value)
    )


def iter_values(value: Any) -> Iterator[Any]:
    """Iterate over the values of a nested container, dropping its keys."""
    for pair in Sequence.from_(value).claim():
        yield pair.value
