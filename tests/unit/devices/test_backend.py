"""Unit tests for platform backend selection and discovery."""

import pytest

from dlist.devices.backend import DeviceBackend, UnsupportedPlatformError, select_backend
from dlist.devices.discovery import DeviceDiscovery
from dlist.devices.enumerator import DirectoryNotFoundError, FlatPrefixScan, LivenessPathScan
from dlist.devices.ignore_list import BUILTIN_IGNORES
from dlist.devices.metadata import BulkMetadataQuery, NullMetadataQuery, PerDeviceMetadataQuery
from tests.infrastructure.mocks.device_mocks import LINUX, MACOS, WINDOWS


class TestSelectBackend:

    def test_macos_uses_flat_scan_and_bulk_query(self):
        backend = select_backend(MACOS, BUILTIN_IGNORES)

        assert isinstance(backend.enumerator, FlatPrefixScan)
        assert isinstance(backend.metadata, BulkMetadataQuery)
        assert backend.enumerator.ignores == BUILTIN_IGNORES
        assert backend.metadata.ignores == BUILTIN_IGNORES

    def test_linux_uses_liveness_scan_and_per_device_query(self):
        backend = select_backend(LINUX, BUILTIN_IGNORES)

        assert isinstance(backend.enumerator, LivenessPathScan)
        assert isinstance(backend.metadata, PerDeviceMetadataQuery)

    def test_other_platforms_unsupported(self):
        with pytest.raises(UnsupportedPlatformError, match="win32"):
            select_backend(WINDOWS)


class TestDeviceDiscovery:

    def test_linux_scan_is_pruned(self, device_dir_factory):
        root = device_dir_factory("ttyUSB0", "ttyUSB1", "ttyS0")
        backend = DeviceBackend(LivenessPathScan(str(root)), NullMetadataQuery())

        devices = DeviceDiscovery(backend, ["ttyUSB1", *BUILTIN_IGNORES]).discover()

        assert devices == ["ttyUSB0"]

    def test_macos_scan_is_pruned(self, device_dir_factory):
        root = device_dir_factory("cu.usbmodem1101", "cu.debug-console", "cu.Bluetooth-Incoming-Port")
        ignores = list(BUILTIN_IGNORES)
        backend = DeviceBackend(FlatPrefixScan(str(root), ignores=ignores), NullMetadataQuery())

        assert DeviceDiscovery(backend, ignores).discover() == ["cu.usbmodem1101"]

    def test_discovery_is_repeatable(self, device_dir_factory):
        root = device_dir_factory("ttyACM0", "ttyUSB0", "ttyUSB1")
        backend = DeviceBackend(LivenessPathScan(str(root)), NullMetadataQuery())
        discovery = DeviceDiscovery(backend, list(BUILTIN_IGNORES))

        assert discovery.discover() == discovery.discover()

    def test_missing_root_propagates(self, tmp_path):
        backend = DeviceBackend(LivenessPathScan(str(tmp_path / "missing")), NullMetadataQuery())

        with pytest.raises(DirectoryNotFoundError):
            DeviceDiscovery(backend, []).discover()
