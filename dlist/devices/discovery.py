"""
One-shot device discovery: scan, then prune ignorable entries.
"""

from typing import List, Optional, Sequence

from dlist.core.logging_utils import LoggerLike, ensure_structured_logger
from .backend import DeviceBackend
from .ignore_list import prune


class DeviceDiscovery:
    """
    Produces the filtered device list for a single invocation.

    Usage:
        discovery = DeviceDiscovery(select_backend(info, ignores), ignores)
        devices = discovery.discover()
    """

    def __init__(
        self,
        backend: DeviceBackend,
        ignores: Sequence[str],
        logger: LoggerLike = None,
    ):
        self.backend = backend
        self.ignores = list(ignores)
        self.logger = ensure_structured_logger(logger, fallback_name="Discovery")

    def discover(self, root: Optional[str] = None) -> List[str]:
        """Return connected device names in host order.

        Raises DirectoryNotFoundError if the scan root can't be listed.
        """
        raw = self.backend.enumerator.scan(root)
        devices = prune(raw, self.ignores)
        self.logger.info("Discovered %d device(s)", len(devices))
        return devices


__all__ = ["DeviceDiscovery"]
