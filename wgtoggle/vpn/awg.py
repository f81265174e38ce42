"""AmneziaWG / WireGuard command-line controller."""

import subprocess
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

from ..utils.logging import get_logger
from ..utils.settings import Settings
from .configs import config_path

log = get_logger("awg")


class InterfaceState(Enum):
    """What the probe learned about the tunnel."""

    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


@dataclass
class ProbeResult:
    """Outcome of ``<tool> show interfaces``."""

    state: InterfaceState
    interface: str | None = None
    error: str | None = None


class TunnelControl(Protocol):
    """Operations the switcher needs from the tunnel tooling."""

    def bring_up(self, identifier: str) -> None: ...

    def bring_down(self, identifier: str) -> None: ...

    def active_interface(self) -> str | None: ...


class AwgController:
    """Control tunnels by shelling out to ``awg`` and ``awg-quick``.

    Configurations are always passed to the quick tool as full file paths
    under ``settings.config_dir``, never as bare names.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    def _command(self, *args: str) -> list[str]:
        prefix = ["sudo"] if self.settings.use_sudo else []
        return [*prefix, *args]

    def probe(self) -> ProbeResult:
        """Ask the tool which interface is up. Never raises."""
        cmd = self._command(self.settings.tool, "show", "interfaces")
        log.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.SubprocessError) as e:
            return ProbeResult(state=InterfaceState.UNKNOWN, error=str(e))

        if result.returncode != 0:
            return ProbeResult(
                state=InterfaceState.UNKNOWN,
                error=f"exit status {result.returncode}",
            )

        tokens = result.stdout.decode(errors="replace").split()
        if not tokens:
            return ProbeResult(state=InterfaceState.DOWN)
        return ProbeResult(state=InterfaceState.UP, interface=tokens[0])

    def active_interface(self) -> str | None:
        """Get the name of the interface currently up, if any."""
        result = self.probe()
        if result.state == InterfaceState.UNKNOWN:
            log.debug("Probe unavailable: %s", result.error)
        return result.interface if result.state == InterfaceState.UP else None

    def bring_up(self, identifier: str) -> None:
        """Bring up the configuration named by ``identifier``."""
        self._quick("up", config_path(self.settings.config_dir, identifier))

    def bring_down(self, identifier: str) -> None:
        """Bring down the tunnel named by ``identifier``."""
        self._quick("down", config_path(self.settings.config_dir, identifier))

    def _quick(self, action: str, path: Path) -> None:
        # Fire and forget: callers re-probe instead of trusting the exit status.
        cmd = self._command(self.settings.quick_tool, action, str(path))
        log.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.SubprocessError) as e:
            log.warning("Could not run %s %s: %s", self.settings.quick_tool, action, e)
            return

        if result.returncode != 0:
            log.warning(
                "%s %s %s exited with status %d",
                self.settings.quick_tool,
                action,
                path,
                result.returncode,
            )
