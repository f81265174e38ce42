"""Runtime settings resolved from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CONFIG_DIR = Path("/etc/amnezia/amneziawg")
DEFAULT_TOOL = "awg"
DEFAULT_ICON = "\uf023"  # Nerd Font lock

STATE_FILE_NAME = "wg-toggle-state"

TOOL_LABELS = {
    "awg": "AmneziaWG",
    "wg": "WireGuard",
}

_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class Settings:
    """Settings shared by every component of one invocation."""

    config_dir: Path
    state_path: Path
    tool: str = DEFAULT_TOOL
    use_sudo: bool = True
    icon: str = DEFAULT_ICON

    @property
    def quick_tool(self) -> str:
        """Companion tool that brings tunnels up and down."""
        return f"{self.tool}-quick"

    @property
    def label(self) -> str:
        """Human-readable name of the tunnel flavour."""
        return TOOL_LABELS.get(self.tool, self.tool)


def default_state_path() -> Path:
    """Location of the persisted selection.

    Uses ``$XDG_CACHE_HOME`` or ``~/.cache``, and ``/tmp`` when no home
    directory can be determined.
    """
    cache_home = os.getenv("XDG_CACHE_HOME")
    if cache_home:
        return Path(cache_home) / STATE_FILE_NAME
    try:
        return Path.home() / ".cache" / STATE_FILE_NAME
    except RuntimeError:
        return Path("/tmp") / STATE_FILE_NAME


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in _FALSE_VALUES


def get_settings() -> Settings:
    """Load settings from environment.

    Recognized variables:
        WG_TOGGLE_CONFIG_DIR: directory of ``*.conf`` files
        WG_TOGGLE_TOOL: probe tool name (``awg`` or ``wg``)
        WG_TOGGLE_SUDO: set to 0/false/no to run tools without sudo
        WG_TOGGLE_ICON: icon prefix for the bar text

    Will load from .env file if present; variables already set win.
    """
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_dir = os.getenv("WG_TOGGLE_CONFIG_DIR") or DEFAULT_CONFIG_DIR

    return Settings(
        config_dir=Path(config_dir),
        state_path=default_state_path(),
        tool=os.getenv("WG_TOGGLE_TOOL") or DEFAULT_TOOL,
        use_sudo=_env_flag("WG_TOGGLE_SUDO", True),
        icon=os.getenv("WG_TOGGLE_ICON", DEFAULT_ICON),
    )
