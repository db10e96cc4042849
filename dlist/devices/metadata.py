"""
Best-effort product/vendor/serial lookups for discovered devices.

Lookups never raise. Anything the host can't tell us comes back as UNKNOWN.
pyserial does the registry work: ``comports()`` walks the IORegistry on
macOS in one call, while ``SysFS`` reads a single device's sysfs attributes
on Linux.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Sequence

import serial.tools.list_ports
from serial.tools import list_ports_linux
from serial.tools.list_ports_common import ListPortInfo

from dlist.core.logging_utils import get_module_logger
from .ignore_list import is_ignored
from .types import DeviceInfo, device_path, format_vendor_id

logger = get_module_logger("DeviceMetadata")


def info_from_port(port: ListPortInfo) -> DeviceInfo:
    """Map pyserial port data onto a DeviceInfo.

    The vendor falls back to the USB vendor id when there's no name.
    """
    vendor = port.manufacturer
    if not vendor or not str(vendor).strip():
        vendor = format_vendor_id(port.vid)
    return DeviceInfo.from_values(
        serial_number=port.serial_number,
        product_type=port.product,
        vendor_name=vendor,
    )


class MetadataQuery(ABC):
    """Looks up DeviceInfo by device name."""

    @abstractmethod
    def lookup(self, name: str) -> DeviceInfo:
        """Return the device's info, sentinel-filled where unknown."""


class NullMetadataQuery(MetadataQuery):
    """For hosts with no device registry to ask."""

    def lookup(self, name: str) -> DeviceInfo:
        return DeviceInfo()


class BulkMetadataQuery(MetadataQuery):
    """One registry walk, cached and keyed by full device path."""

    def __init__(self, ignores: Sequence[str] = ()):
        self.ignores = tuple(ignores)
        self._devices: Optional[Dict[str, DeviceInfo]] = None

    def query(self) -> Dict[str, DeviceInfo]:
        try:
            ports = serial.tools.list_ports.comports()
        except (OSError, ValueError) as exc:
            logger.debug("Serial device registry query failed: %s", exc)
            return {}

        devices: Dict[str, DeviceInfo] = {}
        for port in ports:
            if not port.device or is_ignored(port.device, self.ignores):
                continue
            devices[port.device] = info_from_port(port)
        logger.debug("Registry reported %d serial device(s)", len(devices))
        return devices

    @property
    def devices(self) -> Dict[str, DeviceInfo]:
        if self._devices is None:
            self._devices = self.query()
        return self._devices

    def lookup(self, name: str) -> DeviceInfo:
        return self.devices.get(device_path(name), DeviceInfo())


class PerDeviceMetadataQuery(MetadataQuery):
    """Ask sysfs about one device at a time."""

    def lookup(self, name: str) -> DeviceInfo:
        path = device_path(name)
        try:
            port = list_ports_linux.SysFS(path)
        except (OSError, TypeError, ValueError) as exc:
            logger.debug("No sysfs data for %s: %s", path, exc)
            return DeviceInfo()
        return info_from_port(port)


__all__ = [
    "MetadataQuery",
    "NullMetadataQuery",
    "BulkMetadataQuery",
    "PerDeviceMetadataQuery",
    "info_from_port",
]
