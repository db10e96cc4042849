"""
Decide what to print for a discovered device list.

Either one device path goes to stdout, for piping, or a table goes to
stderr, for humans. Never both.
"""

from typing import Optional, Sequence

from dlist.core.logging_utils import get_module_logger
from dlist.core.terminal import Terminal
from .metadata import MetadataQuery, NullMetadataQuery
from .types import device_path

logger = get_module_logger("Presenter")

NO_DEVICES_MESSAGE = "No connected devices"


def format_device_line(path: str, product_type: str, vendor_name: str, index: Optional[int] = None) -> str:
    line = f"{path}\t\t[{product_type}, {vendor_name}]"
    if index is None:
        return line
    return f"{index}. {line}"


def show_devices(
    devices: Sequence[str],
    selection: Optional[int],
    verbose: bool,
    terminal: Terminal,
    metadata: Optional[MetadataQuery] = None,
) -> Optional[str]:
    """List devices, or emit the selected one.

    Args:
        devices: Filtered device names in host order.
        selection: 1-based index chosen by the user, or None.
        verbose: Show product and vendor data even when a single device
            would otherwise be printed bare.
        terminal: Output channels.
        metadata: Source of DeviceInfo for the table.

    Returns:
        The path written to stdout, or None if nothing was.
    """
    count = len(devices)

    if count == 0:
        terminal.report(NO_DEVICES_MESSAGE)
        return None

    if count == 1 and not verbose:
        if selection is not None and selection != 1:
            terminal.report_warning(f"{selection} is out of range (1)")
        path = device_path(devices[0])
        terminal.output(path)
        return path

    if selection is not None and selection > count:
        terminal.report_warning(f"{selection} is out of range (1-{count})")
        selection = None

    if selection is not None and not verbose:
        path = device_path(devices[selection - 1])
        terminal.output(path)
        return path

    query = metadata or NullMetadataQuery()
    for index, device in enumerate(devices, 1):
        if selection is not None and index != selection:
            continue
        path = device_path(device)
        info = query.lookup(device)
        logger.debug("%s serial number: %s", path, info.serial_number)
        terminal.report(format_device_line(
            path,
            info.product_type,
            info.vendor_name,
            index=None if selection is not None else index,
        ))

    return None


__all__ = ["NO_DEVICES_MESSAGE", "format_device_line", "show_devices"]
