from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC):
    """A value that may be absent.

    `Sequence.pull_next()` returns `Some(pair)` while elements remain, and `NONE` at the end of the sequence.
    """

    __slots__ = ()

    @staticmethod
    def from_[U](value: U | None) -> Option[U]:
        """Wrap **value** in `Some`, or return `NONE` if it is `None`.

        Args:
            value (U | None): The value to wrap.

        Returns:
            Option[U]: `Some(value)` or `NONE`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Option.from_(3)
        Some(value=3)
        >>> ls.Option.from_(None)
        NONE

        ```
        """
        return NONE if value is None else Some(value)

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """Returns `True` if the option is a `Some` value."""
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """Returns `True` if the option is `NONE`."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """Returns the contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `NONE`.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Some("car").unwrap()
        'car'
        >>> ls.NONE.unwrap()
        Traceback (most recent call last):
            ...
        lazyseq._option.OptionUnwrapError: called `unwrap` on a `None`

        ```
        """
        ...

    def unwrap_or(self, default: T) -> T:
        """Returns the contained `Some` value or a provided default.

        Args:
            default (T): The value to return if the option is `NONE`.

        Returns:
            T: The contained value or **default**.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> ls.Some("car").unwrap_or("bike")
        'car'
        >>> ls.NONE.unwrap_or("bike")
        'bike'

        ```
        """
        return self.unwrap() if self.is_some() else default

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """Maps an `Option[T]` to `Option[U]` by applying **f** to a contained value.

        Args:
            f (Callable[[T], U]): The function to apply to the `Some` value.

        Returns:
            Option[U]: The mapped `Some`, or `NONE` untouched.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> seq = ls.Sequence.from_({"a": 1})
        >>> seq.pull_next().map(lambda pair: pair.value)
        Some(value=1)
        >>> seq.pull_next().map(lambda pair: pair.value)
        NONE

        ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE


@dataclass(slots=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""
