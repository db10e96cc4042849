"""
Directory scanners that produce candidate serial device names.

FlatPrefixScan is the macOS flavour: every node lives in ``/dev`` and the
``cu.`` prefix marks a callout serial port. LivenessPathScan is the Linux
flavour: ``/sys/class/tty`` only holds ``ttyUSB*``/``ttyACM*`` entries
while an adaptor is actually plugged in, unlike ``/dev``.
"""

import os
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from dlist.core.logging_utils import get_module_logger
from dlist.core.paths import LINUX_SCAN_ROOT, MACOS_SCAN_ROOT
from .ignore_list import is_ignored

logger = get_module_logger("DeviceEnumerator")


class DirectoryNotFoundError(OSError):
    """The scan root is missing or can't be listed."""

    def __init__(self, path: str):
        super().__init__(f"{path} cannot be found")
        self.path = path


class DeviceEnumerator(ABC):
    """Lists candidate device names under a scan root, in host order."""

    default_root: str = ""

    def __init__(self, root: Optional[str] = None):
        self.root = root or self.default_root

    def list_entries(self, root: str) -> List[str]:
        try:
            return os.listdir(root)
        except OSError as exc:
            logger.debug("Unable to list %s: %s", root, exc)
            raise DirectoryNotFoundError(root) from exc

    @abstractmethod
    def accepts(self, name: str) -> bool:
        """True if ``name`` belongs to the serial device class."""

    def scan(self, root: Optional[str] = None) -> List[str]:
        target = root or self.root
        devices = [name for name in self.list_entries(target) if self.accepts(name)]
        logger.debug("Scan of %s found %d candidate(s): %s", target, len(devices), devices)
        return devices


class FlatPrefixScan(DeviceEnumerator):
    """Keep ``cu.*`` entries, dropping ignorable ones while scanning."""

    default_root = MACOS_SCAN_ROOT
    PREFIX = "cu."

    def __init__(self, root: Optional[str] = None, ignores: Sequence[str] = ()):
        super().__init__(root)
        self.ignores = tuple(ignores)

    def accepts(self, name: str) -> bool:
        return name.startswith(self.PREFIX) and not is_ignored(name, self.ignores)


class LivenessPathScan(DeviceEnumerator):
    """Keep USB serial driver entries that only exist while connected."""

    default_root = LINUX_SCAN_ROOT
    PREFIXES: Tuple[str, ...] = ("ttyUSB", "ttyACM")

    def accepts(self, name: str) -> bool:
        return name.startswith(self.PREFIXES)


__all__ = [
    "DirectoryNotFoundError",
    "DeviceEnumerator",
    "FlatPrefixScan",
    "LivenessPathScan",
]
