import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """`configure_logging` replaces root handlers; put the originals back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
