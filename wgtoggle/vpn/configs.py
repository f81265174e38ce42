"""Tunnel configuration discovery."""

from pathlib import Path

from .errors import DirectoryUnreadableError

CONFIG_SUFFIX = ".conf"


def list_configs(config_dir: Path) -> list[str]:
    """List configuration identifiers available in a directory.

    Args:
        config_dir: Directory holding ``*.conf`` files

    Returns:
        Sorted identifiers (file names without the ``.conf`` suffix)

    Raises:
        DirectoryUnreadableError: If the directory cannot be listed
    """
    try:
        entries = list(Path(config_dir).iterdir())
    except OSError as e:
        raise DirectoryUnreadableError(config_dir, e.strerror or str(e)) from e

    configs = [
        item.stem
        for item in entries
        if item.suffix == CONFIG_SUFFIX and _is_text(item.stem)
    ]
    configs.sort()
    return configs


def _is_text(name: str) -> bool:
    # Undecodable file names come back from the OS as surrogate escapes
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def config_path(config_dir: Path, identifier: str) -> Path:
    """Full path of the config file for an identifier."""
    return Path(config_dir) / f"{identifier}{CONFIG_SUFFIX}"
