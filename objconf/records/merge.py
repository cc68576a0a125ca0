# objconf/records/merge.py
"""
Record composition.

merge_records(base, *overrides) combines records the way layered config
files are combined: later records win, nested mappings merge
recursively, lists concatenate. Replace() and Unset() markers override
the default merge for a single key.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict
import copy
import logging

from objconf.errors import InvalidKeyError
from objconf.records.keys import classify_key

logger = logging.getLogger(__name__)


class Replace:
    """Marks a value that replaces the base value instead of merging into it."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Replace({self.value!r})"


class Unset:
    """Marks a key that must be removed from the merged record."""

    def __repr__(self) -> str:
        return "Unset()"


def _resolve_markers(value: Any) -> Any:
    if isinstance(value, Replace):
        return _resolve_markers(value.value)
    if isinstance(value, Mapping):
        return {k: _resolve_markers(v) for k, v in value.items() if not isinstance(v, Unset)}
    if isinstance(value, list):
        return [_resolve_markers(v) for v in value]
    return copy.deepcopy(value)


def _identity(key: Any) -> tuple:
    # "on click" and "on  click" name the same entry; plain data keys match as written
    if isinstance(key, str):
        try:
            return classify_key(key).identity
        except InvalidKeyError:
            pass
    return ("raw", key)


def _merge_two(base: Dict[str, Any], override: Mapping) -> Dict[str, Any]:
    result = dict(base)
    existing = {_identity(k): k for k in result}
    for raw_key, value in override.items():
        identity = _identity(raw_key)
        # the base spelling and position win
        key = existing.setdefault(identity, raw_key)
        if isinstance(value, Unset):
            result.pop(key, None)
            existing.pop(identity, None)
        elif isinstance(value, Replace):
            result[key] = _resolve_markers(value.value)
        elif key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _merge_two(dict(result[key]), value)
        elif key in result and isinstance(result[key], list) and isinstance(value, list):
            result[key] = result[key] + _resolve_markers(value)
        else:
            result[key] = _resolve_markers(value)
    return result


def merge_records(base: Mapping, *overrides: Mapping) -> Dict[str, Any]:
    """
    Merge one or more records into ``base``.

    Args:
        base (Mapping): Starting record.
        *overrides (Mapping): Records applied in order; later ones win.

    Returns:
        Dict[str, Any]: A new plain dict; inputs are left untouched.
    """
    result = _resolve_markers(base)
    for override in overrides:
        result = _merge_two(result, override)
    logger.debug("Merged %d record(s) into base with %d key(s)", len(overrides), len(result))
    return result
