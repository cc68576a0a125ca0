"""Host protocols for event and behavior binding.

Records only bind; the host object owns its events and behaviors.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class EventHost(Protocol):
    """Object that accepts event handlers by name."""

    def on(self, name: str, handler: Callable) -> None:
        """Bind ``handler`` to the event ``name``."""


@runtime_checkable
class BehaviorHost(Protocol):
    """Object that accepts named behaviors."""

    def attach_behavior(self, name: str, behavior: Any) -> Any:
        """Attach ``behavior`` under ``name``."""
