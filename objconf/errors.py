# objconf/errors.py
"""
Custom Exceptions for Configuration Records
-------------------------------------------

Defines exceptions raised while parsing, loading and applying
configuration records, so callers can tell a bad key from a bad file
from a bad class reference.
"""

from typing import List, Optional


class ConfigError(Exception):
    """
    Base exception for all configuration record errors.
    """
    pass


class InvalidKeyError(ConfigError):
    """
    Raised when a record key cannot be classified, e.g. a non-string key
    or an ``on ``/``as `` prefix with nothing after it.
    """

    def __init__(self, key, message: str = ""):
        self.key = key
        self.message = message or f"Invalid configuration key: {key!r}"
        super().__init__(self.message)


class DuplicateKeyError(ConfigError):
    """
    Raised when two keys of one record resolve to the same entry.
    """

    def __init__(self, key: str, source: Optional[str] = None):
        self.key = key
        self.source = source
        message = f"Duplicate configuration key: {key!r}"
        if source:
            message += f" (in {source})"
        super().__init__(message)


class MissingClassError(ConfigError):
    """
    Raised when an object is requested from a record without a ``class`` key.
    """

    def __init__(self, keys: Optional[List[str]] = None):
        self.keys = keys or []
        super().__init__(
            f"Configuration record has no 'class' key (keys: {self.keys})"
        )


class ClassResolutionError(ConfigError):
    """
    Raised when a class or handler reference cannot be imported.
    """

    def __init__(self, spec, reason: str = ""):
        self.spec = spec
        self.reason = reason
        message = f"Cannot resolve {spec!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnknownPropertyError(ConfigError):
    """
    Raised when a record sets a property the target object does not define.
    """

    def __init__(self, obj_type: str, name: str):
        self.obj_type = obj_type
        self.name = name
        super().__init__(f"Setting unknown property: {obj_type}.{name}")


class UnsupportedHostError(ConfigError):
    """
    Raised when a record binds events or behaviors to an object that
    cannot receive them.
    """

    def __init__(self, obj_type: str, capability: str, name: str):
        self.obj_type = obj_type
        self.capability = capability
        self.name = name
        super().__init__(
            f"{obj_type} does not support {capability} (needed for {name!r})"
        )


class IncludeError(ConfigError):
    """
    Base exception for record file inclusion problems.
    """
    pass


class IncludeCycleError(IncludeError):
    """
    Raised when record files include each other in a loop.
    """

    def __init__(self, chain: List[str]):
        self.chain = chain
        super().__init__("Circular include: " + " -> ".join(chain))


class IncludeDepthError(IncludeError):
    """
    Raised when nested inclusion goes deeper than the configured limit.
    """

    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Include depth {max_depth} exceeded while loading {path}")
