# objconf/factory/resolver.py
"""
Resolve ``class`` values and handler references to Python objects.

A reference is either the object itself (a type or callable), an alias
registered on the resolver, or a dotted import path written as
``package.module.Name`` or ``package.module:Name``.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional
import importlib
import logging

from objconf.errors import ClassResolutionError

logger = logging.getLogger(__name__)


class ClassResolver:
    """
    Turns class specs into types and handler specs into callables.

    Usage:
        resolver = ClassResolver(aliases={"button": "app.widgets.Button"})
        cls = resolver.resolve("button")
        handler = resolver.resolve_callable("app.handlers:on_click")
    """

    def __init__(self, aliases: Optional[Dict[str, Any]] = None) -> None:
        self._aliases: Dict[str, Any] = dict(aliases or {})

    @property
    def aliases(self) -> Dict[str, Any]:
        return dict(self._aliases)

    def register(self, alias: str, target: Any) -> None:
        """Register ``alias`` as a short name for ``target`` (object or dotted path)."""
        if not isinstance(alias, str) or not alias:
            raise ValueError("Alias must be a non-empty string")
        self._aliases[alias] = target
        logger.debug("Registered alias %s -> %r", alias, target)

    def resolve(self, spec: Any) -> Any:
        """
        Resolve a class spec.

        Args:
            spec: A type, a callable, an alias, or a dotted path string.

        Returns:
            The referenced object.

        Raises:
            ClassResolutionError: If the spec is empty, malformed or cannot be imported.
        """
        if callable(spec):
            return spec
        if not isinstance(spec, str) or not spec.strip():
            logger.error("Invalid class spec: %r", spec)
            raise ClassResolutionError(spec, "expected a type, callable, or dotted path string")

        if spec in self._aliases:
            target = self._aliases[spec]
            logger.debug("Resolved alias %s -> %r", spec, target)
            # aliases do not chain: a string target is always an import path
            return self._import(target) if isinstance(target, str) else self.resolve(target)
        return self._import(spec)

    def resolve_callable(self, spec: Any) -> Callable:
        """Resolve a handler spec and check the result is callable."""
        target = self.resolve(spec)
        if not callable(target):
            logger.error("Resolved handler is not callable: %r", spec)
            raise ClassResolutionError(spec, "resolved object is not callable")
        return target

    @staticmethod
    def _import(path: str) -> Any:
        if ":" in path:
            module_name, _, attr_path = path.partition(":")
        else:
            module_name, _, attr_path = path.rpartition(".")
        if not module_name or not attr_path:
            logger.error("Class spec is not a dotted path: %s", path)
            raise ClassResolutionError(path, "expected 'module.Name' or 'module:Name'")

        try:
            target = importlib.import_module(module_name)
        except ImportError as e:
            logger.error("Failed to import module %s: %s", module_name, e)
            raise ClassResolutionError(path, str(e)) from e

        for part in attr_path.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as e:
                logger.error("Module %s has no attribute %s", module_name, attr_path)
                raise ClassResolutionError(path, str(e)) from e

        logger.debug("Imported %s", path)
        return target
