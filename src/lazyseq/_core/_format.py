import json
from typing import Any

from ._config import get_config
from ._protocols import Serializable


def _json_default(obj: object) -> Any:
    if isinstance(obj, Serializable):
        return obj.serialize()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    msg = f"Object of type {obj.__class__.__name__} is not JSON serializable"
    raise TypeError(msg)


def json_dumps(data: Any) -> str:
    cfg = get_config()
    return json.dumps(
        data,
        default=_json_default,
        indent=cfg.json_indent,
        ensure_ascii=cfg.json_ensure_ascii,
    )
