from objconf.loader.yaml_loader import (
    DEFAULT_MAX_INCLUDE_DEPTH,
    RecordFileLoader,
    dump_record,
    dumps_record,
    load_config,
    load_record,
)

__all__ = [
    "DEFAULT_MAX_INCLUDE_DEPTH",
    "RecordFileLoader",
    "dump_record",
    "dumps_record",
    "load_config",
    "load_record",
]
