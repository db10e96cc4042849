"""
Platform detection for dlist.

Detection runs once per process and the result is cached. The device
backend (enumerator plus metadata query) is chosen from it at startup.
"""

import platform
import sys
from dataclasses import dataclass
from typing import Optional

from dlist.core.logging_utils import get_module_logger

logger = get_module_logger("PlatformInfo")


@dataclass(frozen=True)
class PlatformInfo:
    """Immutable platform information detected at startup.

    Attributes:
        platform: System platform ('linux', 'darwin', 'win32')
        architecture: CPU architecture ('x86_64', 'arm64', 'aarch64')
        os_release: OS release version string
        python_version: Python version string
    """

    platform: str
    architecture: str
    os_release: str
    python_version: str

    @property
    def is_macos(self) -> bool:
        return self.platform == "darwin"

    @property
    def is_linux(self) -> bool:
        return self.platform.startswith("linux")

    def __str__(self) -> str:
        return f"{self.platform} ({self.architecture})"


def detect_platform() -> PlatformInfo:
    """Detect current platform information.

    Use get_platform_info() for the cached instance.
    """
    info = PlatformInfo(
        platform=sys.platform,
        architecture=platform.machine(),
        os_release=platform.release(),
        python_version=platform.python_version(),
    )
    logger.debug("Platform detected: %s", info)
    return info


# Singleton instance
_platform_info: Optional[PlatformInfo] = None


def get_platform_info() -> PlatformInfo:
    """Get cached platform information (singleton)."""
    global _platform_info
    if _platform_info is None:
        _platform_info = detect_platform()
    return _platform_info


def reset_platform_info() -> None:
    """Reset the cached platform info (for testing only)."""
    global _platform_info
    _platform_info = None


__all__ = [
    "PlatformInfo",
    "get_platform_info",
    "detect_platform",
    "reset_platform_info",
]
