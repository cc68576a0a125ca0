# objconf/records/keys.py
"""
Record key classification.

A record key is one of:
- the literal ``class``: the type to instantiate
- ``on <event>``: an event handler binding
- ``as <behavior>``: a behavior attachment
- anything else: a property name
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from objconf.errors import InvalidKeyError

CLASS_KEY = "class"
EVENT_PREFIX = "on "
BEHAVIOR_PREFIX = "as "


class KeyKind(Enum):
    CLASS = "class"
    PROPERTY = "property"
    EVENT = "event"
    BEHAVIOR = "behavior"


@dataclass(frozen=True)
class RecordKey:
    """A classified record key."""
    raw: str
    kind: KeyKind
    name: str

    @property
    def identity(self) -> tuple:
        """(kind, name) pair; two keys with the same identity collide."""
        return (self.kind, self.name)


def _prefixed(key: str, prefix: str, kind: KeyKind) -> RecordKey:
    name = key[len(prefix):].strip()
    if not name:
        raise InvalidKeyError(key, f"Key {key!r} has no {kind.value} name after {prefix!r}")
    return RecordKey(raw=key, kind=kind, name=name)


def classify_key(key) -> RecordKey:
    """
    Classify a single record key.

    Args:
        key: Raw key as found in the record.

    Returns:
        RecordKey: The key with its kind and bare name.

    Raises:
        InvalidKeyError: If the key is not a string, is empty, or is a
            prefixed key with nothing after the prefix.
    """
    if not isinstance(key, str):
        raise InvalidKeyError(key, f"Configuration keys must be strings, got {type(key).__name__}")
    if not key.strip():
        raise InvalidKeyError(key, "Configuration keys must not be empty")

    if key == CLASS_KEY:
        return RecordKey(raw=key, kind=KeyKind.CLASS, name=CLASS_KEY)
    if key.startswith(EVENT_PREFIX):
        return _prefixed(key, EVENT_PREFIX, KeyKind.EVENT)
    if key.startswith(BEHAVIOR_PREFIX):
        return _prefixed(key, BEHAVIOR_PREFIX, KeyKind.BEHAVIOR)
    return RecordKey(raw=key, kind=KeyKind.PROPERTY, name=key)
