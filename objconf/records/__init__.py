from objconf.records.keys import BEHAVIOR_PREFIX, CLASS_KEY, EVENT_PREFIX, KeyKind, RecordKey, classify_key
from objconf.records.record import ConfigRecord, is_record
from objconf.records.merge import Replace, Unset, merge_records

__all__ = [
    "BEHAVIOR_PREFIX",
    "CLASS_KEY",
    "EVENT_PREFIX",
    "ConfigRecord",
    "KeyKind",
    "RecordKey",
    "Replace",
    "Unset",
    "classify_key",
    "is_record",
    "merge_records",
]
