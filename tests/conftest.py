import logging

import pytest


@pytest.fixture
def restore_root_logging():
    """Drop and close the root handlers a test installs through setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
