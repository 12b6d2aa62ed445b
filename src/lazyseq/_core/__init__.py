from ._config import Config, get_config
from ._format import json_dumps
from ._main import CommonBase, Pipeable
from ._protocols import Serializable, SupportsKeysAndGetItem, SupportsRichComparison

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "Serializable",
    "SupportsKeysAndGetItem",
    "SupportsRichComparison",
    "get_config",
    "json_dumps",
]
