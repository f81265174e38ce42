"""Toggle and cycle tunnel configurations."""

from ..utils.logging import get_logger
from ..utils.settings import Settings
from .awg import TunnelControl
from .configs import list_configs
from .selection import SelectionStore
from .status import StatusReport, build_status

log = get_logger("switcher")

NEXT = 1
PREVIOUS = -1


def next_index(current: int, direction: int, count: int) -> int:
    """Step ``current`` by ``direction`` through ``count`` items, wrapping."""
    if count <= 0:
        raise ValueError("count must be positive")
    return (current + direction) % count


class TunnelSwitcher:
    """Decide what to bring up or down for each invocation mode."""

    def __init__(
        self,
        control: TunnelControl,
        store: SelectionStore,
        settings: Settings,
    ):
        self.control = control
        self.store = store
        self.settings = settings

    def status(self) -> StatusReport:
        """Get the current status report."""
        return build_status(self.control, self.store, self.settings)

    def toggle(self) -> StatusReport:
        """Bring the active tunnel down, or the selected one up.

        Returns:
            Fresh status after the action
        """
        active = self.control.active_interface()
        if active:
            log.info("Bringing down %s", active)
            self.control.bring_down(active)
        else:
            selected = self.store.load()
            if selected:
                log.info("Bringing up %s", selected)
                self.control.bring_up(selected)
            else:
                log.info("Nothing selected, toggle is a no-op")
        return self.status()

    def cycle(self, direction: int) -> StatusReport | None:
        """Move the selection through the sorted configs.

        An active tunnel is switched over: the old one goes down before the
        new one comes up.

        Args:
            direction: NEXT or PREVIOUS

        Returns:
            Fresh status, or None when there are no configurations

        Raises:
            DirectoryUnreadableError: If the config directory cannot be listed
            StoreWriteError: If the new selection cannot be saved
        """
        configs = list_configs(self.settings.config_dir)
        if not configs:
            log.info("No configurations in %s", self.settings.config_dir)
            return None

        selected = self.store.load()
        active = self.control.active_interface()

        try:
            current = configs.index(selected)
        except ValueError:
            current = 0

        new_config = configs[next_index(current, direction, len(configs))]
        self.store.save(new_config)
        log.info("Selected %s", new_config)

        if active:
            self.control.bring_down(active)
            self.control.bring_up(new_config)

        return self.status()
