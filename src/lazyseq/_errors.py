class LazySeqError(Exception):
    """Base class of every error raised by lazyseq."""


class InvalidInputError(LazySeqError, TypeError):
    """A `Sequence` can't be built from the given data type."""


class InvalidArgumentError(LazySeqError, ValueError):
    """An operator received an argument outside of its domain."""


class AccessError(LazySeqError, LookupError):
    """A key, index, attribute or path doesn't resolve against an element."""


class SequenceConsumedError(LazySeqError, RuntimeError):
    """A `Sequence` was claimed by a second consumer."""
