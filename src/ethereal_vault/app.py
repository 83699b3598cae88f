import enum

import structlog

TOOL_NAME = "EtherealVault"
DEBUG_PREFIX = "[DEBUG] "
INFO_PREFIX = "[INFO] "


class AppLifecycle(enum.Enum):
    IDLE = "idle"
    COMPLETED = "completed"


class Application:
    """
    The EtherealVault unit of work.

    The logger is taken as a dependency so callers (and tests) can supply their
    own sink. Whatever logger is used gets the verbosity prefix bound to it, and
    the renderer in `logging_setup` puts that prefix at the start of each line.

    `run()` raises an `EtherealVaultError` subclass on failure and returns None
    otherwise.
    """

    def __init__(self, verbose: bool, logger=None):
        self._verbose = verbose
        self.prefix = DEBUG_PREFIX if verbose else INFO_PREFIX
        if logger is None:
            logger = structlog.get_logger("ethereal_vault.app")
        self.logger = logger.bind(prefix=self.prefix)
        self.state = AppLifecycle.IDLE

    @property
    def verbose(self) -> bool:
        return self._verbose

    def run(self) -> None:
        self.logger.info(f"Starting {TOOL_NAME} processing")

        # The processing itself is not defined yet.

        self.logger.info("Processing completed successfully")
        self.state = AppLifecycle.COMPLETED
