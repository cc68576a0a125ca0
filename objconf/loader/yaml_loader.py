# objconf/loader/yaml_loader.py
"""
Load and persist configuration records as files.

Supported formats:
- YAML (.yaml / .yml): ``!include other.yaml`` substitutes another file
- JSON (.json): a mapping of the single key ``"$include"`` does the same

Include paths are relative to the including file. Duplicate keys within
one mapping are rejected instead of silently keeping the last value.
"""

from __future__ import annotations
from collections.abc import Hashable, Mapping
from pathlib import Path
from typing import Any, Dict, List, Union
import json
import logging

import yaml
from yaml.constructor import ConstructorError
from yaml.resolver import BaseResolver

from objconf.errors import ConfigError, DuplicateKeyError, IncludeCycleError, IncludeDepthError
from objconf.records.record import ConfigRecord

logger = logging.getLogger(__name__)

DEFAULT_MAX_INCLUDE_DEPTH = 16
INCLUDE_TAG = "!include"
JSON_INCLUDE_KEY = "$include"
YAML_SUFFIXES = (".yaml", ".yml")
JSON_SUFFIXES = (".json",)

PathLike = Union[str, Path]


class _RecordYamlLoader(yaml.SafeLoader):
    """SafeLoader that knows which file it reads and who included it."""

    file_loader: "RecordFileLoader"
    path: Path


def _construct_mapping(loader: _RecordYamlLoader, node: yaml.MappingNode) -> Dict[Any, Any]:
    own = [k for k, _ in node.value if k.tag != "tag:yaml.org,2002:merge"]
    loader.flatten_mapping(node)
    merged_count = len(node.value) - len(own)

    mapping: Dict[Any, Any] = {}
    own_keys = set()
    for index, (key_node, value_node) in enumerate(node.value):
        key = loader.construct_object(key_node, deep=True)
        if not isinstance(key, Hashable):
            raise ConstructorError(
                "while constructing a mapping", node.start_mark,
                "found unhashable key", key_node.start_mark,
            )
        # keys pulled in through '<<' merges may be overridden once
        if index >= merged_count:
            if key in own_keys:
                logger.error("Duplicate key %r in %s", key, loader.path)
                raise DuplicateKeyError(key, str(loader.path))
            own_keys.add(key)
        mapping[key] = loader.construct_object(value_node, deep=True)
    return mapping


def _construct_include(loader: _RecordYamlLoader, node: yaml.Node) -> Any:
    relative = loader.construct_scalar(node)
    if not relative:
        raise ConfigError(f"Empty {INCLUDE_TAG} in {loader.path}")
    return loader.file_loader.load(loader.path.parent / relative)


_RecordYamlLoader.add_constructor(BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping)
_RecordYamlLoader.add_constructor(INCLUDE_TAG, _construct_include)


class RecordFileLoader:
    """
    Loads one record file together with everything it includes.

    Attributes:
        max_include_depth (int): Maximum nesting of included files.
        chain (List[Path]): Files currently being loaded, outermost first.
    """

    def __init__(self, max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH) -> None:
        self.max_include_depth = max_include_depth
        self.chain: List[Path] = []

    def load(self, path: PathLike) -> Any:
        path = Path(path).resolve()
        if not path.is_file():
            logger.error(f"Config file not found: {path}")
            raise FileNotFoundError(f"Config file not found: {path}")
        if path in self.chain:
            chain = [str(p) for p in self.chain] + [str(path)]
            logger.error("Circular include detected: %s", " -> ".join(chain))
            raise IncludeCycleError(chain)
        if len(self.chain) > self.max_include_depth:
            logger.error("Include depth %d exceeded at %s", self.max_include_depth, path)
            raise IncludeDepthError(str(path), self.max_include_depth)

        self.chain.append(path)
        try:
            if path.suffix.lower() in JSON_SUFFIXES:
                data = self._load_json(path)
            else:
                data = self._load_yaml(path)
        finally:
            self.chain.pop()

        logger.debug("Loaded %s (include depth %d)", path, len(self.chain))
        return data

    def _load_yaml(self, path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as file:
            loader = _RecordYamlLoader(file)
            loader.file_loader = self
            loader.path = path
            try:
                return loader.get_single_data()
            except yaml.YAMLError as e:
                logger.error(f"Error parsing YAML config file {path}: {e}")
                raise
            finally:
                loader.dispose()

    def _load_json(self, path: Path) -> Any:
        def object_pairs_hook(pairs):
            if len(pairs) == 1 and pairs[0][0] == JSON_INCLUDE_KEY and isinstance(pairs[0][1], str):
                return self.load(path.parent / pairs[0][1])
            mapping = {}
            for key, value in pairs:
                if key in mapping:
                    logger.error("Duplicate key %r in %s", key, path)
                    raise DuplicateKeyError(key, str(path))
                mapping[key] = value
            return mapping

        with open(path, "r", encoding="utf-8") as file:
            try:
                return json.load(file, object_pairs_hook=object_pairs_hook)
            except json.JSONDecodeError as e:
                logger.error(f"Error parsing JSON config file {path}: {e}")
                raise


def load_config(config_path: PathLike, max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH) -> Dict[str, Any]:
    """
    Load a YAML or JSON configuration file, resolving includes.

    Args:
        config_path (str | Path): Path to the config file.
        max_include_depth (int): Maximum nesting of included files.

    Returns:
        Dict[str, Any]: Configuration dictionary (empty for an empty file).

    Raises:
        FileNotFoundError: If the file, or an included file, does not exist.
        yaml.YAMLError / json.JSONDecodeError: If parsing fails.
        DuplicateKeyError: If a mapping repeats a key.
        IncludeCycleError / IncludeDepthError: On bad inclusion.
    """
    config = RecordFileLoader(max_include_depth=max_include_depth).load(config_path)
    logger.info(f"Successfully loaded config from {config_path}")
    return {} if config is None else config


def load_record(config_path: PathLike, max_include_depth: int = DEFAULT_MAX_INCLUDE_DEPTH) -> ConfigRecord:
    """
    Load a file whose top level is a configuration record.

    Raises:
        ConfigError: If the file's top level is not a mapping.
    """
    data = load_config(config_path, max_include_depth=max_include_depth)
    if not isinstance(data, Mapping):
        logger.error("Top level of %s is %s, not a mapping", config_path, type(data).__name__)
        raise ConfigError(f"Top level of {config_path} must be a mapping, got {type(data).__name__}")
    return ConfigRecord.from_mapping(data, source=str(config_path))


def dump_record(record: Mapping, output_path: PathLike) -> Path:
    """
    Persist a record as YAML (or JSON for a ``.json`` path), keeping key order.

    Returns:
        Path: The written file.
    """
    path = Path(output_path)
    data = ConfigRecord.from_mapping(record).to_dict()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as file:
        if path.suffix.lower() in JSON_SUFFIXES:
            json.dump(data, file, indent=2)
        else:
            yaml.safe_dump(data, file, sort_keys=False, default_flow_style=False, allow_unicode=True)
    logger.info("Wrote record to %s", path)
    return path


def dumps_record(record: Mapping) -> str:
    """Return the YAML text of a record."""
    data = ConfigRecord.from_mapping(record).to_dict()
    return yaml.safe_dump(data, sort_keys=False, default_flow_style=False, allow_unicode=True)
