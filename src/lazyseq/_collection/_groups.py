from __future__ import annotations

import itertools
import logging
import math
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from .._access import KeySpec, accessor
from .._errors import InvalidArgumentError
from .._types import Pair, Partition
from ._base import CollectionWrapper

if TYPE_CHECKING:
    from ._main import Collection

logger = logging.getLogger(__name__)

_FAN_OUT = (list, tuple, set, frozenset)


class BaseGroup[K, V](CollectionWrapper[K, V]):
    __slots__ = ()

    def group_by(
        self,
        key: KeySpec,
        preserve_keys: bool = False,
        batch_size: float = math.inf,
    ) -> Collection[Any, list[V] | dict[K, V]]:
        """Group the elements by the value of **key**.

        When **key** resolves to a `list`, `tuple` or `set`, the element is added to each of those groups.

        Groups are emitted in order of first appearance, once the source is exhausted.

        With a finite **batch_size**, the groups accumulated so far are emitted (and forgotten) each time more than **batch_size** elements were read since the last flush.

        This bounds memory on large or infinite sources, but the same group key may then be emitted several times.

        Args:
            key (KeySpec): Key, path or function giving the group(s) of an element.
            preserve_keys (bool): Store members as a `dict` of their original keys instead of a `list`. Defaults to False.
            batch_size (float): Number of elements after which the groups are flushed. Defaults to `math.inf`, never.

        Returns:
            Collection[Any, list[V] | dict[K, V]]: A lazy collection of groups, keyed by group key.

        Raises:
            InvalidArgumentError: If **batch_size** is lower than 1.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> data = [
        ...     {"account_id": "account-x10", "product": "Chair"},
        ...     {"account_id": "account-x10", "product": "Bookcase"},
        ...     {"account_id": "account-x11", "product": "Desk"},
        ... ]
        >>> groups = ls.Collection(data).group_by("account_id").to_dict()
        >>> [len(members) for members in groups.values()]
        [2, 1]
        >>> ls.Collection(["a", "bb", "cc"]).group_by(len, preserve_keys=True).to_dict()
        {1: {0: 'a'}, 2: {1: 'bb', 2: 'cc'}}
        >>> ls.Collection([1, 1, 1, 1]).group_by(None, batch_size=2).to_list()
        [[1, 1, 1], [1]]

        ```
        """
        if batch_size < 1:
            msg = f"group_by() batch size must be at least 1, got {batch_size}"
            raise InvalidArgumentError(msg)
        get = accessor(key)

        def _group_by(data: Iterator[Pair[K, V]]) -> Iterator[Pair[Any, Any]]:
            groups: dict[Any, Any] = {}
            count = 0
            for pair in data:
                count += 1
                names = get(pair.value)
                if not isinstance(names, _FAN_OUT):
                    names = (names,)
                for name in names:
                    if preserve_keys:
                        groups.setdefault(name, {})[pair.key] = pair.value
                    else:
                        groups.setdefault(name, []).append(pair.value)
                if count > batch_size:
                    logger.debug("Flushing %d groups after %d elements", len(groups), count)
                    yield from itertools.starmap(Pair, groups.items())
                    groups = {}
                    count = 0
            yield from itertools.starmap(Pair, groups.items())

        return self._lazy(_group_by)

    def partition(self, predicate: KeySpec) -> Partition[K, V]:
        """Split the elements in two collections, in a single full pass.

        **predicate** is resolved like any key argument (see `lazyseq._access`), and its result is tested for truthiness.

        Both halves keep the original keys.

        Warning:
            The source is consumed immediately, and must be finite.

        Example:
        ```python
        >>> import lazyseq as ls
        >>> passed, failed = ls.Collection(range(1, 7)).partition(lambda x: x < 3)
        >>> passed.to_dict(), failed.to_dict()
        ({0: 1, 1: 2}, {2: 3, 3: 4, 4: 5, 5: 6})

        ```
        """
        from ._main import Collection

        get = accessor(predicate)
        passed: list[Pair[K, V]] = []
        failed: list[Pair[K, V]] = []
        for pair in self._pairs():
            (passed if get(pair.value) else failed).append(pair)
        logger.debug("Partitioned %d/%d pairs", len(passed), len(failed))
        return Partition(Collection.from_pairs(passed), Collection.from_pairs(failed))
