"""Small host classes used by the tests as ``class`` targets."""

from objconf.factory import Configurable


def on_click(event=None):
    return "clicked"


def not_a_function():
    pass


NOT_CALLABLE = 42


class Widget:
    """Event and behavior host with a couple of properties."""

    label = ""
    width = 0
    child = None
    ports = None
    children = ()

    def __init__(self, *args):
        self.args = args
        self.handlers = {}
        self.behaviors = {}

    def on(self, name, handler):
        self.handlers.setdefault(name, []).append(handler)

    def attach_behavior(self, name, behavior):
        behavior.owner = self
        self.behaviors[name] = behavior
        return behavior

    def __repr__(self):
        return f"Widget(label={self.label!r}, width={self.width!r})"


class PlainWidget:
    """Has properties but cannot bind events or behaviors."""

    label = ""


class Tooltip:
    text = ""
    owner = None


class SlottedPoint:
    __slots__ = ("x", "y")


class SingleSlot:
    __slots__ = "value"


class Mailer(Configurable):
    host = "localhost"
    port = 25
    transport = None

    def init(self):
        self.address = f"{self.host}:{self.port}"

    def __repr__(self):
        return f"Mailer({self.address})"


class Cache(Configurable):
    """Overrides the constructor with the plain record-only signature."""

    ttl = 0

    def __init__(self, config=None):
        self.ready = False
        super().__init__(config)

    def init(self):
        self.ready = True


class Connection(Configurable):
    """Takes a positional argument ahead of its record."""

    timeout = 10

    def __init__(self, dsn, config=None, **options):
        self.dsn = dsn
        super().__init__(config, **options)
