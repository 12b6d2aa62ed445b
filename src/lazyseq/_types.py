from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

if TYPE_CHECKING:
    from ._collection import Collection


class Pair[K, V](NamedTuple):
    """A (key, value) pair, the unit flowing through every `Sequence`.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> pair = ls.Pair("name", "taylor")
    >>> pair
    ('name', 'taylor')
    >>> key, value = pair
    >>> pair.value
    'taylor'

    ```
    """

    key: K
    """The key of the pair."""
    value: V
    """The value associated with the key."""

    def __repr__(self) -> str:
        return f"({self.key.__repr__()}, {self.value.__repr__()})"


class Partition[K, V](NamedTuple):
    """The two halves produced by `Collection.partition()`.

    Unpacks like a tuple: `passed, failed = collection.partition(predicate)`.
    """

    passed: Collection[K, V]
    """Elements for which the predicate was truthy, with their original keys."""
    failed: Collection[K, V]
    """Elements for which the predicate was falsy, with their original keys."""


class Absent:
    """Sentinel type for arguments whose `None` value is meaningful."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT: Any = Absent()
