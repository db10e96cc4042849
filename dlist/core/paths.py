"""Centralized path constants for dlist."""

from __future__ import annotations

import os
from pathlib import Path

# Every presented device path is DEVICE_ROOT + device name, verbatim
DEVICE_ROOT = "/dev/"

# Scan roots
MACOS_SCAN_ROOT = DEVICE_ROOT
LINUX_SCAN_ROOT = "/sys/class/tty/"


def _resolve_config_dir() -> Path:
    """Pick the per-user configuration directory.

    ``DLIST_CONFIG_DIR`` wins, then ``$XDG_CONFIG_HOME/dlist``, then
    ``~/.config/dlist``.
    """
    override = os.environ.get("DLIST_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_home:
        return Path(xdg_home).expanduser() / "dlist"
    return Path.home() / ".config" / "dlist"


# User-specific configuration (read-only inputs, never written by dlist)
USER_CONFIG_DIR = _resolve_config_dir()
IGNORE_FILE = USER_CONFIG_DIR / "ignore"
CONFIG_PATH = USER_CONFIG_DIR / "config.txt"


__all__ = [
    'DEVICE_ROOT',
    'MACOS_SCAN_ROOT',
    'LINUX_SCAN_ROOT',
    'USER_CONFIG_DIR',
    'IGNORE_FILE',
    'CONFIG_PATH',
]
