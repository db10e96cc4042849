"""Mock hosts and metadata sources for dlist tests."""

from .device_mocks import LINUX, MACOS, WINDOWS, FakeMetadataQuery

__all__ = ["LINUX", "MACOS", "WINDOWS", "FakeMetadataQuery"]
