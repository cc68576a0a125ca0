# objconf/factory/creator.py
"""
Create objects from configuration records.

create_object() accepts:
- a class spec (type, alias, or dotted path): instantiated with *args
- a record with a ``class`` key: instantiated, then configured with the
  remaining entries
- any other callable: called with *args
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Optional
import inspect
import logging

from objconf.errors import ConfigError, MissingClassError
from objconf.factory.base import Configurable
from objconf.factory.configurator import configure
from objconf.factory.resolver import ClassResolver
from objconf.records.record import ConfigRecord

logger = logging.getLogger(__name__)


def _construct_configurable(cls: type, args: tuple, body: ConfigRecord, options: dict) -> Any:
    """
    Call a Configurable constructor with ``config=body``.

    Resolver and strictness options go only to constructors that accept
    them; an overridden ``__init__(self, config=None)`` gets the record alone.

    Raises:
        ConfigError: If the positional args and the record cannot both be passed.
    """
    signature = inspect.signature(cls)
    takes_any = any(p.kind is inspect.Parameter.VAR_KEYWORD for p in signature.parameters.values())
    kwargs = {"config": body}
    for name, value in options.items():
        if takes_any or name in signature.parameters:
            kwargs[name] = value

    try:
        signature.bind(*args, **kwargs)
    except TypeError as e:
        logger.error("Cannot call %s with %d positional arg(s) and a record: %s", cls.__name__, len(args), e)
        raise ConfigError(f"Cannot construct {cls.__name__} from a record: {e}") from e
    return cls(*args, **kwargs)


def create_object(
    spec: Any,
    *args: Any,
    resolver: Optional[ClassResolver] = None,
    strict: bool = True,
    instantiate_nested: bool = True,
) -> Any:
    """
    Build an object from a class spec, a configuration record, or a callable.

    Args:
        spec: What to build.
        *args: Positional constructor arguments.
        resolver (ClassResolver, optional): Resolver for class and handler specs.
        strict (bool): Passed to configure().
        instantiate_nested (bool): Passed to configure().

    Returns:
        The created object.

    Raises:
        MissingClassError: Record without a ``class`` key.
        ClassResolutionError: Class cannot be imported.
        ConfigError: Unsupported spec type.
    """
    resolver = resolver or ClassResolver()
    options = {"resolver": resolver, "strict": strict, "instantiate_nested": instantiate_nested}

    if isinstance(spec, str) or isinstance(spec, type):
        cls = resolver.resolve(spec)
        logger.info("Creating %s", getattr(cls, "__name__", cls))
        return cls(*args)

    if isinstance(spec, Mapping):
        record = ConfigRecord.from_mapping(spec)
        if not record.has_class:
            logger.error("Record without 'class' key: %s", list(record))
            raise MissingClassError(list(record))

        cls = resolver.resolve(record.class_name)
        body = record.without_class()
        logger.info("Creating %s from record with %d entries", getattr(cls, "__name__", cls), len(body))

        if isinstance(cls, type) and issubclass(cls, Configurable):
            return _construct_configurable(cls, args, body, options)
        obj = cls(*args)
        return configure(obj, body, **options)

    if callable(spec):
        return spec(*args)

    logger.error("Unsupported object spec type: %s", type(spec).__name__)
    raise ConfigError(f"Unsupported object configuration type: {type(spec).__name__}")


class ObjectFactory:
    """
    Shared resolver and options for repeated object creation.

    Usage:
        factory = ObjectFactory.from_settings(load_settings())
        mailer = factory.create({"class": "app.mail.Mailer", "port": 2525})
    """

    def __init__(
        self,
        resolver: Optional[ClassResolver] = None,
        strict: bool = True,
        instantiate_nested: bool = True,
    ) -> None:
        self.resolver = resolver or ClassResolver()
        self.strict = strict
        self.instantiate_nested = instantiate_nested

    @classmethod
    def from_settings(cls, settings) -> "ObjectFactory":
        factory_cfg = settings.factory
        return cls(
            resolver=ClassResolver(aliases=factory_cfg.aliases),
            strict=factory_cfg.strict,
            instantiate_nested=factory_cfg.instantiate_nested,
        )

    def create(self, spec: Any, *args: Any) -> Any:
        return create_object(
            spec,
            *args,
            resolver=self.resolver,
            strict=self.strict,
            instantiate_nested=self.instantiate_nested,
        )

    def configure(self, obj: Any, record: Mapping) -> Any:
        return configure(
            obj,
            record,
            resolver=self.resolver,
            strict=self.strict,
            instantiate_nested=self.instantiate_nested,
        )
