"""
Core type definitions for device discovery.
"""

from dataclasses import dataclass
from typing import Optional

from dlist.core.paths import DEVICE_ROOT

# Placeholder for any metadata the host could not supply
UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class DeviceInfo:
    """Descriptive data for one device, used for display only."""
    serial_number: str = UNKNOWN
    product_type: str = UNKNOWN
    vendor_name: str = UNKNOWN

    @classmethod
    def from_values(
        cls,
        serial_number: Optional[str] = None,
        product_type: Optional[str] = None,
        vendor_name: Optional[str] = None,
    ) -> "DeviceInfo":
        """Build a record, replacing missing or blank values with UNKNOWN."""
        return cls(
            serial_number=_clean(serial_number),
            product_type=_clean(product_type),
            vendor_name=_clean(vendor_name),
        )


def _clean(value: Optional[str]) -> str:
    if value is None:
        return UNKNOWN
    text = str(value).strip()
    return text or UNKNOWN


def device_path(name: str) -> str:
    """Full path for a device name. No normalization, no symlink resolution."""
    return DEVICE_ROOT + name


def format_vendor_id(vid: Optional[int]) -> Optional[str]:
    if vid is None:
        return None
    return f"0x{vid:04x}"
