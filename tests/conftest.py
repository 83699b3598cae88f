import logging

import pytest
import structlog

from ethereal_vault.state import APP_STATE


@pytest.fixture(autouse=True)
def isolated_logging():
    """
    Restores the root logger, structlog configuration and process state after
    each test, since the CLI reconfigures all three.
    """
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    structlog.reset_defaults()

    yield

    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)
    structlog.reset_defaults()
    APP_STATE.verbose_mode = False
