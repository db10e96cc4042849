"""
Per-platform choice of scanner and metadata source, made once at startup.
"""

from dataclasses import dataclass
from typing import Sequence

from dlist.core.logging_utils import get_module_logger
from dlist.core.platform_info import PlatformInfo
from .enumerator import DeviceEnumerator, FlatPrefixScan, LivenessPathScan
from .metadata import BulkMetadataQuery, MetadataQuery, PerDeviceMetadataQuery

logger = get_module_logger("DeviceBackend")


class UnsupportedPlatformError(RuntimeError):
    """No serial device scanner exists for this host."""


@dataclass(frozen=True)
class DeviceBackend:
    enumerator: DeviceEnumerator
    metadata: MetadataQuery


def select_backend(platform_info: PlatformInfo, ignores: Sequence[str] = ()) -> DeviceBackend:
    """Pick the enumerator and metadata query for ``platform_info``."""
    if platform_info.is_macos:
        backend = DeviceBackend(
            enumerator=FlatPrefixScan(ignores=ignores),
            metadata=BulkMetadataQuery(ignores=ignores),
        )
    elif platform_info.is_linux:
        backend = DeviceBackend(
            enumerator=LivenessPathScan(),
            metadata=PerDeviceMetadataQuery(),
        )
    else:
        raise UnsupportedPlatformError(f"{platform_info.platform} is not supported")

    logger.debug(
        "Using %s with %s on %s",
        type(backend.enumerator).__name__,
        type(backend.metadata).__name__,
        platform_info,
    )
    return backend


__all__ = ["DeviceBackend", "UnsupportedPlatformError", "select_backend"]
