"""
query_args.py
-------------
Parsing of the JSON argument bag passed alongside a query.

SQLite accepts named placeholders written as :name, @name or $name and binds
them from a mapping keyed by the bare name, so prefixed keys are stripped.
"""
import json
from typing import Any, Dict, Optional, Tuple, Union

NAMED_PREFIXES = ("$", ":", "@")

BindParams = Union[Dict[str, Any], Tuple[Any, ...]]


def parse_args(raw: Any) -> Any:
    # Hosts may hand over JSON parameters already decoded
    if isinstance(raw, (dict, list)):
        return raw
    if raw is None:
        return {}
    return json.loads(raw)


def normalize_key(key: str) -> str:
    if key and key[0] in NAMED_PREFIXES:
        return key[1:]
    return key


def to_bind_params(args: Any) -> Optional[BindParams]:
    if args is None:
        return None
    if isinstance(args, dict):
        if not args:
            return None
        return {normalize_key(str(k)): v for k, v in args.items()}
    if isinstance(args, (list, tuple)):
        return tuple(args) if args else None
    return (args,)
