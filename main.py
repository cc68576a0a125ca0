"""
Central CLI entrypoint for objconf.

Loads configuration record files and inspects, validates, composes or
instantiates them.

Usage:
    python main.py [--settings SETTINGS_PATH] <command> ...

Supported commands:
    inspect         Print each key of a record file with its kind
    validate        Check a record file (and nested records) for key errors
    create          Create the object a record file describes
    merge           Compose several record files, later files win

Examples:
    python main.py inspect configs/mailer.yaml
    python main.py validate configs/app.yaml
    python main.py create configs/mailer.yaml
    python main.py merge configs/base.yaml configs/local.yaml --output merged.yaml
"""

import argparse
import os
import sys
from collections.abc import Mapping
from typing import Iterator, List, Optional

from objconf.errors import ConfigError
from objconf.factory import ObjectFactory
from objconf.loader import dump_record, dumps_record, load_record
from objconf.records import CLASS_KEY, ConfigRecord, KeyKind, merge_records
from objconf.utils.logger import configure_logging, get_logger
from objconf.utils.settings import load_settings

logger = get_logger(__name__)


def validate_config_path(config_path: str) -> None:
    """
    Validates whether the given config path exists and is a file.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    if not config_path or not os.path.isfile(config_path):
        logger.error(f"Config file not found: {config_path}")
        raise FileNotFoundError(f"Config file not found: {config_path}")


def describe_record(record: ConfigRecord, indent: int = 0) -> List[str]:
    """Return one line per key: kind, name, and nested behavior records."""
    pad = "  " * indent
    lines = []
    for key in record.keys_classified:
        value = record[key.raw]
        if key.kind is KeyKind.CLASS:
            lines.append(f"{pad}class      {value}")
            continue
        lines.append(f"{pad}{key.kind.value:<10} {key.name}")
        if isinstance(value, ConfigRecord):
            lines.extend(describe_record(value, indent + 1))
    return lines


def _nested_records(value) -> Iterator[Mapping]:
    """Yield mappings carrying a ``class`` key, looking inside lists too."""
    if isinstance(value, Mapping):
        if CLASS_KEY in value:
            yield value
    elif isinstance(value, list):
        for item in value:
            yield from _nested_records(item)


def validate_record(record: Mapping) -> int:
    """
    Classify every key of ``record`` and of the records nested in it.

    Behavior values and property values with a ``class`` key are records;
    other mappings are plain data and are not checked.

    Returns:
        int: Number of records checked.
    """
    count = 1
    record = ConfigRecord.from_mapping(record)
    for key, value in record.entries():
        if key.kind is KeyKind.BEHAVIOR and isinstance(value, Mapping):
            count += validate_record(value)
        elif key.kind is KeyKind.PROPERTY:
            for nested in _nested_records(value):
                count += validate_record(nested)
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Configuration record CLI")
    parser.add_argument("--settings", "-s", default=None, help="Path to settings YAML")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- Inspect ---
    inspect_parser = subparsers.add_parser("inspect", help="List the keys of a record file")
    inspect_parser.add_argument("config", help="Path to record file (YAML or JSON)")

    # --- Validate ---
    validate_parser = subparsers.add_parser("validate", help="Validate a record file")
    validate_parser.add_argument("config", help="Path to record file (YAML or JSON)")

    # --- Create ---
    create_parser = subparsers.add_parser("create", help="Create the object described by a record file")
    create_parser.add_argument("config", help="Path to record file (YAML or JSON)")

    # --- Merge ---
    merge_parser = subparsers.add_parser("merge", help="Merge record files, later files win")
    merge_parser.add_argument("configs", nargs="+", help="Record files in merge order")
    merge_parser.add_argument("--output", "-o", default=None, help="Write the merged record here")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI arguments and dispatch commands.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.settings)
        configure_logging(settings.logging.level, settings.logging.file)
        depth = settings.loader.max_include_depth

        if args.command == "inspect":
            validate_config_path(args.config)
            record = load_record(args.config, max_include_depth=depth)
            print("\n".join(describe_record(record)))

        elif args.command == "validate":
            validate_config_path(args.config)
            record = load_record(args.config, max_include_depth=depth)
            checked = validate_record(record)
            print(f"OK: {args.config} ({checked} record(s))")

        elif args.command == "create":
            validate_config_path(args.config)
            record = load_record(args.config, max_include_depth=depth)
            obj = ObjectFactory.from_settings(settings).create(record)
            print(repr(obj))

        elif args.command == "merge":
            records = []
            for path in args.configs:
                validate_config_path(path)
                records.append(load_record(path, max_include_depth=depth))
            merged = merge_records(*records)
            if args.output:
                dump_record(merged, args.output)
                logger.info(f"Merged {len(records)} file(s) into {args.output}")
            else:
                print(dumps_record(merged), end="")

    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    except Exception as e:
        logger.exception(f"Fatal error during execution: {e}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
