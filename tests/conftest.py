from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture(autouse=True)
def restore_litequery_logger() -> Generator[None, None, None]:
    """Undo any handler, level or propagation changes a test makes to the ``litequery`` logger."""
    logger = logging.getLogger("litequery")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
