"""Exceptions for tunnel toggling."""


class WgToggleError(Exception):
    """Base error that aborts the current invocation."""

    pass


class DirectoryUnreadableError(WgToggleError):
    """Configuration directory is missing or cannot be listed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read config directory {path}: {reason}")


class StoreWriteError(WgToggleError):
    """Selected configuration could not be persisted."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot save selection to {path}: {reason}")
