from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable


class SupportsKeysAndGetItem[K, V](Protocol):
    def keys(self) -> Iterable[K]: ...
    def __getitem__(self, key: K, /) -> V: ...


@runtime_checkable
class Serializable(Protocol):
    """Objects exposing a JSON-compatible representation of themselves.

    `Collection` implements it, and so can any user type stored as a value.
    """

    def serialize(self) -> Any: ...


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]
