# objconf/records/record.py
"""
ConfigRecord: an ordered, read-only configuration record.

Wraps a plain mapping and exposes its classified view (class name,
properties, event handlers, behaviors) while keeping source order.
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Optional, Tuple
import logging

from objconf.errors import DuplicateKeyError
from objconf.records.keys import CLASS_KEY, KeyKind, RecordKey, classify_key

logger = logging.getLogger(__name__)


def is_record(value: Any) -> bool:
    """Return True if ``value`` is shaped like a configuration record."""
    return isinstance(value, Mapping)


class ConfigRecord(Mapping):
    """
    Immutable configuration record.

    Usage:
        record = ConfigRecord.from_mapping({
            "class": "app.widgets.Button",
            "label": "OK",
            "on click": "app.handlers.submit",
            "as tooltip": {"class": "app.behaviors.Tooltip", "text": "Send"},
        })
        record.class_name      # "app.widgets.Button"
        record.events          # {"click": "app.handlers.submit"}
        record.behaviors       # {"tooltip": ConfigRecord(...)}
    """

    def __init__(self, items: Mapping, source: Optional[str] = None) -> None:
        self.source = source
        self._data: Dict[str, Any] = {}
        self._keys: List[RecordKey] = []
        seen: Dict[tuple, str] = {}

        for raw, value in items.items():
            key = classify_key(raw)
            if key.identity in seen:
                logger.error("Duplicate key %r collides with %r", raw, seen[key.identity])
                raise DuplicateKeyError(raw, source)
            seen[key.identity] = raw
            if key.kind is KeyKind.BEHAVIOR and is_record(value) and not isinstance(value, ConfigRecord):
                value = ConfigRecord(value, source=source)
            self._data[raw] = value
            self._keys.append(key)

    @classmethod
    def from_mapping(cls, mapping: Mapping, source: Optional[str] = None) -> "ConfigRecord":
        """Wrap a mapping, returning it unchanged if it is already a record."""
        if isinstance(mapping, ConfigRecord):
            return mapping
        if not is_record(mapping):
            raise TypeError(f"Configuration record must be a mapping, got {type(mapping).__name__}")
        return cls(mapping, source=source)

    # Mapping protocol
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ConfigRecord({self._data!r})"

    # Classified view
    @property
    def keys_classified(self) -> List[RecordKey]:
        return list(self._keys)

    @property
    def class_name(self) -> Any:
        """Value of the ``class`` key, or None."""
        return self._data.get(CLASS_KEY)

    @property
    def has_class(self) -> bool:
        return CLASS_KEY in self._data

    def _by_kind(self, kind: KeyKind) -> Dict[str, Any]:
        return {k.name: self._data[k.raw] for k in self._keys if k.kind is kind}

    @property
    def properties(self) -> Dict[str, Any]:
        return self._by_kind(KeyKind.PROPERTY)

    @property
    def events(self) -> Dict[str, Any]:
        return self._by_kind(KeyKind.EVENT)

    @property
    def behaviors(self) -> Dict[str, Any]:
        return self._by_kind(KeyKind.BEHAVIOR)

    def entries(self) -> List[Tuple[RecordKey, Any]]:
        """Classified entries in source order, ``class`` excluded."""
        return [(k, self._data[k.raw]) for k in self._keys if k.kind is not KeyKind.CLASS]

    def without_class(self) -> "ConfigRecord":
        """Return a copy of this record with the ``class`` key removed."""
        return ConfigRecord(
            {k: v for k, v in self._data.items() if k != CLASS_KEY},
            source=self.source,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain nested dict copy (records and mappings unwrapped)."""
        return _plain(self._data)


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value
