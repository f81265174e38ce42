"""Status report for the status bar."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..utils.logging import get_logger
from ..utils.settings import Settings
from .awg import TunnelControl
from .configs import list_configs
from .errors import DirectoryUnreadableError, StoreWriteError
from .selection import SelectionStore

log = get_logger("status")

CONNECTED = "connected"
DISCONNECTED = "disconnected"


class StatusReport(BaseModel):
    """One line of waybar custom-module JSON."""

    model_config = ConfigDict(populate_by_name=True)

    text: str
    alt: str
    tooltip: str
    css_class: str = Field(alias="class")
    percentage: int = Field(ge=0, le=100)

    @property
    def connected(self) -> bool:
        return self.css_class == CONNECTED

    def to_json(self) -> str:
        """Serialize as compact single-line JSON keyed as waybar expects."""
        return self.model_dump_json(by_alias=True)


def make_report(active: str | None, selected: str, settings: Settings) -> StatusReport:
    """Compose a report from the active interface and the selection."""
    if active:
        return StatusReport(
            text=f"{settings.icon} {active}",
            alt=CONNECTED,
            tooltip=f"{settings.label} Connected: {active}",
            css_class=CONNECTED,
            percentage=100,
        )
    return StatusReport(
        text=f"{settings.icon} {selected}",
        alt=DISCONNECTED,
        tooltip=f"{settings.label} Disconnected. Selected: {selected}",
        css_class=DISCONNECTED,
        percentage=0,
    )


def ensure_selection(store: SelectionStore, config_dir: Path) -> str:
    """Load the selection, adopting the first config when none is stored.

    Both the directory listing and persisting the adopted default are
    best-effort here.
    """
    selected = store.load()
    if selected:
        return selected

    try:
        configs = list_configs(config_dir)
    except DirectoryUnreadableError as e:
        log.warning("%s", e)
        configs = []

    if not configs:
        return ""

    selected = configs[0]
    try:
        store.save(selected)
    except StoreWriteError as e:
        log.warning("%s", e)
    return selected


def build_status(
    control: TunnelControl,
    store: SelectionStore,
    settings: Settings,
) -> StatusReport:
    """Get a fresh status report."""
    active = control.active_interface()
    selected = ensure_selection(store, settings.config_dir)
    return make_report(active, selected, settings)
