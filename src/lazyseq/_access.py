"""Value accessors and comparison helpers shared by the operators.

Operators such as `pluck`, `where`, `group_by` or `sum` accept a "key" argument.

The argument type selects one accessor variant, once, when the operator is called:

- `None`: the element itself.
- a callable: `func(element)`.
- a `list` or `tuple`: a path of keys, applied left to right.
- anything else: a single key.

A single key resolves by subscription when the element supports `__getitem__`, or by attribute lookup when the key is a `str`.
Attribute lookup only returns data: a key naming a method raises `AccessError`.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any

from ._errors import AccessError

type KeySpec = Callable[[Any], Any] | list[Any] | tuple[Any, ...] | Hashable | None

_NUMERIC = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(slots=True, frozen=True)
class Identity:
    def __call__(self, item: Any) -> Any:
        return item


@dataclass(slots=True, frozen=True)
class Func:
    func: Callable[[Any], Any]

    def __call__(self, item: Any) -> Any:
        return self.func(item)


@dataclass(slots=True, frozen=True)
class Key:
    key: Any

    def __call__(self, item: Any) -> Any:
        if hasattr(item, "__getitem__"):
            try:
                return item[self.key]
            except (KeyError, IndexError, TypeError) as exc:
                msg = f"Cannot access {self.key!r} on {item.__class__.__name__}"
                raise AccessError(msg) from exc
        if isinstance(self.key, str):
            try:
                found = getattr(item, self.key)
            except AttributeError as exc:
                msg = f"{item.__class__.__name__} has no attribute {self.key!r}"
                raise AccessError(msg) from exc
            if (inspect.ismethod(found) or inspect.isbuiltin(found)) and getattr(
                found, "__self__", None
            ) is item:
                msg = f"{self.key!r} is a method of {item.__class__.__name__}, not a value"
                raise AccessError(msg)
            return found
        msg = f"Cannot access {self.key!r} on {item.__class__.__name__}"
        raise AccessError(msg)


@dataclass(slots=True, frozen=True)
class Path:
    keys: tuple[Key, ...]

    def __call__(self, item: Any) -> Any:
        for key in self.keys:
            item = key(item)
        return item


type Accessor = Identity | Func | Key | Path


def accessor(spec: KeySpec) -> Accessor:
    """Build the accessor matching **spec**.

    Args:
        spec (KeySpec): `None`, a callable, a path (`list`/`tuple`) or a single key.

    Returns:
        Accessor: A callable extracting a value from an element.

    Example:
    ```python
    >>> from lazyseq._access import accessor
    >>> accessor("name")({"name": "taylor"})
    'taylor'
    >>> accessor(("user", 0))({"user": ["dayle"]})
    'dayle'
    >>> accessor(len)("abc")
    3
    >>> accessor(None)(42)
    42
    >>> accessor("missing")({"name": "taylor"})
    Traceback (most recent call last):
        ...
    lazyseq._errors.AccessError: Cannot access 'missing' on dict

    ```
    """
    match spec:
        case None:
            return Identity()
        case list() | tuple():
            return Path(tuple(Key(k) for k in spec))
        case _ if callable(spec):
            return Func(spec)
        case _:
            return Key(spec)


def _as_number(value: Any) -> float | None:
    match value:
        case bool():
            return float(value)
        case int() | float():
            return float(value)
        case str():
            text = value.strip()
            return float(text) if _NUMERIC.fullmatch(text) else None
        case _:
            return None


def loose_equals(left: Any, right: Any) -> bool:
    """Equality that also matches a numeric string against an equal number.

    Example:
    ```python
    >>> from lazyseq._access import loose_equals
    >>> loose_equals(3, "3"), loose_equals("0", "00"), loose_equals("a", "b")
    (True, True, False)
    >>> loose_equals("1_000", 1000), loose_equals("inf", "infinity")
    (False, False)

    ```
    """
    if left == right:
        return True
    if isinstance(left, str) or isinstance(right, str):
        left_num, right_num = _as_number(left), _as_number(right)
        return left_num is not None and left_num == right_num
    return False


def strict_equals(left: Any, right: Any) -> bool:
    """Equality requiring the same type.

    Example:
    ```python
    >>> from lazyseq._access import strict_equals
    >>> strict_equals(3, 3), strict_equals(3, "3"), strict_equals(1, True)
    (True, False, False)

    ```
    """
    return type(left) is type(right) and left == right


def comparator(*, strict: bool) -> Callable[[Any, Any], bool]:
    return strict_equals if strict else loose_equals


def contains(values: Any, item: Any, *, strict: bool) -> bool:
    eq = comparator(strict=strict)
    return any(eq(item, v) for v in values)
