"""Persisted selection of the tunnel configuration to use."""

from dataclasses import dataclass
from pathlib import Path

from ..utils.logging import get_logger
from .errors import StoreWriteError

log = get_logger("selection")


@dataclass
class StoreRead:
    """Outcome of reading the state file."""

    value: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class SelectionStore:
    """Single-value file store for the selected config identifier.

    No locking is done; concurrent invocations race and the last write wins.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def read(self) -> StoreRead:
        """Read the stored identifier, reporting why it is unavailable."""
        try:
            return StoreRead(value=self.path.read_text(encoding="utf-8").strip())
        except FileNotFoundError:
            return StoreRead(error="no saved selection")
        except (OSError, UnicodeDecodeError) as e:
            return StoreRead(error=str(e))

    def load(self) -> str:
        """Return the stored identifier, or an empty string if none."""
        result = self.read()
        if not result.ok:
            log.debug("Selection unavailable at %s: %s", self.path, result.error)
        return result.value

    def save(self, identifier: str) -> None:
        """Persist an identifier, replacing previous contents.

        Raises:
            StoreWriteError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(identifier.encode("utf-8"))
        except OSError as e:
            raise StoreWriteError(self.path, e.strerror or str(e)) from e
        except UnicodeError as e:
            raise StoreWriteError(self.path, str(e)) from e
        log.debug("Saved selection %r to %s", identifier, self.path)
