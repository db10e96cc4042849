"""
Serial device discovery for dlist.

- ignore_list: pseudo-device ignore entries and pruning
- enumerator: per-platform directory scanners
- metadata: product/vendor/serial lookups via pyserial
- backend: platform to scanner/metadata mapping
- presenter: single-path or table output
"""

from .backend import DeviceBackend, UnsupportedPlatformError, select_backend
from .discovery import DeviceDiscovery
from .enumerator import DeviceEnumerator, DirectoryNotFoundError, FlatPrefixScan, LivenessPathScan
from .ignore_list import BUILTIN_IGNORES, is_ignored, load_ignore_list, prune
from .metadata import BulkMetadataQuery, MetadataQuery, NullMetadataQuery, PerDeviceMetadataQuery
from .presenter import NO_DEVICES_MESSAGE, show_devices
from .types import UNKNOWN, DeviceInfo, device_path

__all__ = [
    "DeviceBackend",
    "UnsupportedPlatformError",
    "select_backend",
    "DeviceDiscovery",
    "DeviceEnumerator",
    "DirectoryNotFoundError",
    "FlatPrefixScan",
    "LivenessPathScan",
    "BUILTIN_IGNORES",
    "is_ignored",
    "load_ignore_list",
    "prune",
    "BulkMetadataQuery",
    "MetadataQuery",
    "NullMetadataQuery",
    "PerDeviceMetadataQuery",
    "NO_DEVICES_MESSAGE",
    "show_devices",
    "UNKNOWN",
    "DeviceInfo",
    "device_path",
]
