import logging

import pytest

from objconf.factory import ClassResolver
from sample_components import Widget


@pytest.fixture
def resolver():
    """Resolver with short aliases for the sample components."""
    return ClassResolver(aliases={
        "widget": "sample_components.Widget",
        "tooltip": "sample_components.Tooltip",
    })


@pytest.fixture
def widget():
    return Widget()


@pytest.fixture
def write_file(tmp_path):
    """Write text to a file under tmp_path and return its path."""
    def _write(name: str, content: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _write


@pytest.fixture(autouse=True)
def isolate_package_logger():
    """Restore the objconf logger's handlers and level after every test.

    main.main() configures logging with a console handler bound to the
    test's captured stdout, which pytest closes when the test ends.
    """
    logger = logging.getLogger("objconf")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
