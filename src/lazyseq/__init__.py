import logging

from ._collection import Collection
from ._core import Config, Serializable, get_config
from ._errors import (
    AccessError,
    InvalidArgumentError,
    InvalidInputError,
    LazySeqError,
    SequenceConsumedError,
)
from ._option import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._sequence import Sequence
from ._types import Pair, Partition

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "AccessError",
    "Collection",
    "Config",
    "InvalidArgumentError",
    "InvalidInputError",
    "LazySeqError",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Pair",
    "Partition",
    "Sequence",
    "SequenceConsumedError",
    "Serializable",
    "Some",
    "get_config",
]
