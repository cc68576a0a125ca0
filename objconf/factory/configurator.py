# objconf/factory/configurator.py
"""
Apply a configuration record to an existing object.

Entries are applied in record order:
- property keys are assigned with setattr
- ``on <event>`` keys are bound through the object's ``on(name, handler)``
- ``as <behavior>`` keys are created if needed and attached through
  ``attach_behavior(name, behavior)``
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Optional
import logging

from objconf.errors import UnknownPropertyError, UnsupportedHostError
from objconf.factory.ports import BehaviorHost, EventHost
from objconf.factory.resolver import ClassResolver
from objconf.records.keys import CLASS_KEY, KeyKind
from objconf.records.record import ConfigRecord

logger = logging.getLogger(__name__)


def _has_property(obj: Any, name: str) -> bool:
    if hasattr(obj, name):
        return True
    # declared but not yet assigned slots/annotations still count
    for klass in type(obj).__mro__:
        slots = getattr(klass, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        if name in slots or name in getattr(klass, "__annotations__", {}):
            return True
    return False


def _set_property(obj: Any, name: str, value: Any, strict: bool) -> None:
    if strict and not _has_property(obj, name):
        logger.error("Unknown property %s on %s", name, type(obj).__name__)
        raise UnknownPropertyError(type(obj).__name__, name)
    setattr(obj, name, value)


def _bind_event(obj: Any, name: str, handler: Any, resolver: ClassResolver) -> None:
    if not isinstance(obj, EventHost):
        logger.error("%s cannot bind event %s", type(obj).__name__, name)
        raise UnsupportedHostError(type(obj).__name__, "event handlers", name)
    obj.on(name, resolver.resolve_callable(handler))
    logger.debug("Bound event %s on %s", name, type(obj).__name__)


def _attach_behavior(obj: Any, name: str, spec: Any, resolver: ClassResolver, strict: bool) -> None:
    if not isinstance(obj, BehaviorHost):
        logger.error("%s cannot attach behavior %s", type(obj).__name__, name)
        raise UnsupportedHostError(type(obj).__name__, "behaviors", name)

    from objconf.factory.creator import create_object

    if isinstance(spec, Mapping) or isinstance(spec, (str, type)):
        behavior = create_object(spec, resolver=resolver, strict=strict)
    else:
        behavior = spec
    obj.attach_behavior(name, behavior)
    logger.debug("Attached behavior %s (%s) to %s", name, type(behavior).__name__, type(obj).__name__)


def configure(
    obj: Any,
    record: Mapping,
    *,
    resolver: Optional[ClassResolver] = None,
    strict: bool = True,
    instantiate_nested: bool = True,
) -> Any:
    """
    Apply ``record`` to ``obj``.

    Args:
        obj: Object to configure.
        record (Mapping): Configuration record; a ``class`` key is ignored.
        resolver (ClassResolver, optional): Used for handler and nested class specs.
        strict (bool): Reject properties the object does not already define.
        instantiate_nested (bool): Create objects for property values that
            are mappings carrying a ``class`` key.

    Returns:
        The same object, configured.

    Raises:
        UnknownPropertyError: Strict mode and an undefined property.
        UnsupportedHostError: Event or behavior keys on an object without
            ``on``/``attach_behavior``.
        ClassResolutionError: A handler or nested class cannot be imported.
    """
    resolver = resolver or ClassResolver()
    record = ConfigRecord.from_mapping(record)

    if record.has_class:
        logger.debug("Ignoring 'class' key while configuring existing %s", type(obj).__name__)

    for key, value in record.entries():
        if key.kind is KeyKind.PROPERTY:
            if instantiate_nested and isinstance(value, Mapping) and CLASS_KEY in value:
                from objconf.factory.creator import create_object

                value = create_object(value, resolver=resolver, strict=strict)
            _set_property(obj, key.name, value, strict)
        elif key.kind is KeyKind.EVENT:
            _bind_event(obj, key.name, value, resolver)
        elif key.kind is KeyKind.BEHAVIOR:
            _attach_behavior(obj, key.name, value, resolver, strict)

    return obj
