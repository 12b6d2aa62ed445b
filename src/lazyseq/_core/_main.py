from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    """Mixin class providing the `pipe` method for fluent chaining."""

    __slots__ = ()

    def pipe[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Pass `Self` to **func** and return its result verbatim.

        Conceptually, this allow to do `x.pipe(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        This is usually how custom terminal logic is plugged at the end of a chain.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function receiving the instance.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: Whatever **func** returns.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Collection([1, 2, 3]).pipe(lambda c: c.sum())
        6
        >>> ls.Collection([1, 2, 3]).pipe(lambda c, n: c.take(n).to_list(), 2)
        [1, 2]

        ```
        """
        return func(self, *args, **kwargs)


class CommonBase[T](ABC, Pipeable):
    """Base class for all wrappers.

    Args:
        data (T): The underlying data to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Get the underlying data.

        Returns:
            T: The underlying data.
        """
        return self._inner
