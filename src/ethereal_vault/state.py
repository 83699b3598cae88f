class AppState:
    """A simple singleton-like class to hold process-wide CLI state."""

    def __init__(self):
        self.verbose_mode: bool = False


# The single instance shared by the CLI and its error handler.
APP_STATE = AppState()
