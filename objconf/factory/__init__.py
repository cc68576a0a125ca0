from objconf.factory.resolver import ClassResolver
from objconf.factory.ports import BehaviorHost, EventHost
from objconf.factory.configurator import configure
from objconf.factory.base import Configurable
from objconf.factory.creator import ObjectFactory, create_object

__all__ = [
    "BehaviorHost",
    "ClassResolver",
    "Configurable",
    "EventHost",
    "ObjectFactory",
    "configure",
    "create_object",
]
