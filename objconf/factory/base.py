"""Base class for objects built from configuration records."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from objconf.factory.configurator import configure


class Configurable:
    """
    Object whose constructor takes its configuration record.

    Subclasses declare their properties as class attributes and override
    ``init()`` for work that needs the configured values.

        class Mailer(Configurable):
            host = "localhost"
            port = 25

            def init(self):
                self.address = f"{self.host}:{self.port}"

        Mailer({"port": 2525}).address   # "localhost:2525"
    """

    def __init__(self, config: Optional[Mapping[str, Any]] = None, **options: Any) -> None:
        if config:
            configure(self, config, **options)
        self.init()

    def init(self) -> None:
        """Hook run after configuration is applied."""
