from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Concatenate

from .._core import CommonBase
from .._sequence import Sequence
from .._types import Pair

if TYPE_CHECKING:
    from ._main import Collection


class CollectionWrapper[K, V](CommonBase[Sequence[K, V]]):
    """Shared plumbing of the `Collection` mixins.

    Holds exactly one `Sequence`, and knows how to wrap it in a new deferred stage.
    """

    _inner: Sequence[K, V]

    __slots__ = ()

    def __iter__(self) -> Iterator[Pair[K, V]]:
        return self._inner.claim()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._inner!r})"

    def _pairs(self) -> Iterator[Pair[K, V]]:
        return self._inner.claim()

    def _lazy[**P, KU, VU](
        self,
        factory: Callable[Concatenate[Iterator[Pair[K, V]], P], Iterable[Pair[KU, VU]]],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Collection[KU, VU]:
        """Claim the current `Sequence` and wrap it in a new stage built by **factory**.

        **factory** must not pull anything when called: generator functions are the usual choice.
        """
        from ._main import Collection

        return Collection.from_sequence(
            Sequence(factory(self._pairs(), *args, **kwargs))
        )

    def _into[**P, R](
        self,
        func: Callable[Concatenate[Iterator[Pair[K, V]], P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Claim the current `Sequence` and pass it to **func**, a terminal consumer."""
        return func(self._pairs(), *args, **kwargs)


def reindex[T](values: Iterable[T]) -> Iterator[Pair[int, T]]:
    """Key **values** by position, starting at 0."""
    for idx, value in enumerate(values):
        yield Pair(idx, value)


def track_int_key(largest: int, key: Any) -> int:
    """Update the largest integer key seen so far.

    Appending operators key new values with `largest + 1`, starting at 0 when no integer key was seen (`largest == -1`).
    """
    if isinstance(key, int) and not isinstance(key, bool) and key > largest:
        return key
    return largest
