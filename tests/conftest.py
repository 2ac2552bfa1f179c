import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handlers and levels installed by tgraph.logs.setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
