"""Shared pytest fixtures"""

import logging

import pytest

from wgtoggle.utils.settings import Settings
from wgtoggle.vpn.selection import SelectionStore


class FakeTunnelControl:
    """Records tunnel actions and answers probes from scripted state."""

    def __init__(self, active=None, succeed=True):
        self.active = active
        self.succeed = succeed
        self.calls = []

    def active_interface(self):
        self.calls.append(("probe", None))
        return self.active

    def bring_up(self, identifier):
        self.calls.append(("up", identifier))
        if self.succeed:
            self.active = identifier

    def bring_down(self, identifier):
        self.calls.append(("down", identifier))
        if self.succeed and self.active == identifier:
            self.active = None

    @property
    def actions(self):
        """Up/down calls only, without probes."""
        return [c for c in self.calls if c[0] != "probe"]


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by setup_logging during a test."""
    yield
    logger = logging.getLogger("wgtoggle")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def config_dir(tmp_path):
    """Config directory with three tunnels and a stray file."""
    path = tmp_path / "amneziawg"
    path.mkdir()
    for name in ("b", "a", "c"):
        (path / f"{name}.conf").write_text("[Interface]\n")
    (path / "notes.txt").write_text("ignore me")
    return path


@pytest.fixture
def state_path(tmp_path):
    return tmp_path / "cache" / "wg-toggle-state"


@pytest.fixture
def settings(config_dir, state_path):
    return Settings(config_dir=config_dir, state_path=state_path, icon="*")


@pytest.fixture
def store(state_path):
    return SelectionStore(state_path)


@pytest.fixture
def fake_control():
    return FakeTunnelControl()
