"""Parameter extraction helpers.

Producer params are plain dicts loaded from YAML. Keys use spaces
("create sentence indices") so configs read like prose.

These helpers raise ConfigurationError (never KeyError/TypeError) so a bad
config fails at construction time with a message naming the key.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, Optional, Tuple, Type, Union

from ..errors import ConfigurationError

_MISSING = object()

Kind = Union[Type[Any], Tuple[Type[Any], ...]]

def _check_kind(value: Any, key: str, kind: Optional[Kind], owner: str) -> Any:
    if kind is None:
        return value
    kinds = kind if isinstance(kind, tuple) else (kind,)
    # bool is an int subclass; "max sentences: true" must not pass as 1
    if isinstance(value, bool) and bool not in kinds:
        ok = False
    else:
        ok = isinstance(value, kinds)
    if not ok:
        names = "/".join(k.__name__ for k in kinds)
        raise ConfigurationError(
            f"{owner or 'params'}: '{key}' must be {names}, got {type(value).__name__} ({value!r})"
        )
    return value

def require_param(params: Dict[str, Any], key: str, kind: Optional[Kind] = None, *, owner: str = "") -> Any:
    if key not in params or params[key] is None:
        raise ConfigurationError(f"{owner or 'params'}: missing required parameter '{key}'")
    return _check_kind(params[key], key, kind, owner)

def get_param(
    params: Dict[str, Any],
    key: str,
    default: Any = None,
    kind: Optional[Kind] = None,
    *,
    owner: str = "",
) -> Any:
    value = params.get(key, _MISSING)
    if value is _MISSING or value is None:
        return default
    return _check_kind(value, key, kind, owner)

def ensure_no_extras(params: Dict[str, Any], valid: Iterable[str], *, owner: str = "") -> None:
    """Reject keys a producer does not understand (usually typos)."""
    valid = set(valid)
    extras = sorted(k for k in params if k not in valid)
    if extras:
        raise ConfigurationError(
            f"{owner or 'params'}: unexpected parameter(s) {extras}. Valid: {sorted(valid)}"
        )
