"""
Ignore list for host-injected pseudo-devices.

A device is dropped when any ignore entry occurs anywhere in its name.
User entries come from an optional file with one entry per line; bare names
and full ``/dev/`` paths are both accepted.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from dlist.core.logging_utils import get_module_logger
from dlist.core.paths import DEVICE_ROOT, IGNORE_FILE

logger = get_module_logger("IgnoreList")

# Known non-MCU ports that macOS always creates
BUILTIN_IGNORES = ("cu.debug-console", "cu.Bluetooth-Incoming-Port")


def read_user_ignores(path: Path) -> List[str]:
    """Read ignore entries from ``path``.

    Raises OSError (or UnicodeDecodeError) if the file can't be read.
    """
    entries: List[str] = []
    with open(path, "r", encoding="utf-8") as fh:
        for raw_line in fh:
            line = raw_line.strip()
            if not line:
                continue
            if line.startswith(DEVICE_ROOT):
                line = line[len(DEVICE_ROOT):]
            # A bare "/dev/" would match every device
            if line:
                entries.append(line)
    return entries


def load_ignore_list(path: Optional[Path] = None) -> List[str]:
    """Return user ignore entries (file order) followed by the built-ins.

    A missing or unreadable file is not an error: only the built-ins are
    returned.
    """
    target = Path(path) if path is not None else IGNORE_FILE
    try:
        user_entries = read_user_ignores(target)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("No user ignore list loaded from %s: %s", target, exc)
        user_entries = []
    else:
        logger.debug("Loaded %d ignore entries from %s", len(user_entries), target)

    return user_entries + list(BUILTIN_IGNORES)


def is_ignored(name: str, ignores: Iterable[str]) -> bool:
    return any(entry in name for entry in ignores)


def prune(devices: Sequence[str], ignores: Sequence[str]) -> List[str]:
    """Drop ignorable devices, keeping discovery order.

    Duplicates are passed through untouched.
    """
    kept = [device for device in devices if not is_ignored(device, ignores)]
    if len(kept) != len(devices):
        logger.debug("Pruned %d ignored device(s)", len(devices) - len(kept))
    return kept


__all__ = [
    "BUILTIN_IGNORES",
    "load_ignore_list",
    "read_user_ignores",
    "is_ignored",
    "prune",
]
