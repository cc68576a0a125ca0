"""
objconf
-------

Configuration records for object creation: a mapping whose ``class`` key
names the type to build, whose plain keys are properties, and whose
``on <event>`` / ``as <behavior>`` keys bind event handlers and attach
behaviors.
"""

from objconf.errors import ConfigError
from objconf.records import ConfigRecord, KeyKind, classify_key, merge_records
from objconf.factory import Configurable, ObjectFactory, configure, create_object
from objconf.loader import dump_record, load_config, load_record

__all__ = [
    "ConfigError",
    "ConfigRecord",
    "Configurable",
    "KeyKind",
    "ObjectFactory",
    "classify_key",
    "configure",
    "create_object",
    "dump_record",
    "load_config",
    "load_record",
    "merge_records",
]

__version__ = "0.1.0"
