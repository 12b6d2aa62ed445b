from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Config:
    """Process-wide settings of lazyseq.

    The instance returned by `get_config` is shared, and is meant to be mutated in place.

    Example:
    ```python
    >>> import lazyseq as ls
    >>> cfg = ls.get_config()
    >>> cfg.strict_ownership
    True
    >>> cfg.json_indent is None
    True

    ```
    """

    strict_ownership: bool = True
    """Raise `SequenceConsumedError` when a `Sequence` is claimed twice."""
    json_indent: int | None = None
    """Indentation used by `Collection.to_json()` and `str(Collection)`."""
    json_ensure_ascii: bool = True
    """Escape non-ASCII characters in JSON output."""


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
