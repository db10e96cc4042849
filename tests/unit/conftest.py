"""Unit test fixtures for isolated, fast test execution.

This conftest provides fixtures that:
- Run in complete isolation (no real /dev or /sys access)
- Replace pyserial's registry queries with canned port data
- Capture both output channels in memory
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Dict, Generator, Iterable, Optional
from unittest.mock import patch

import pytest
from serial.tools.list_ports_common import ListPortInfo

from dlist.core.terminal import Terminal
from tests.infrastructure.mocks.device_mocks import FakeMetadataQuery


# =============================================================================
# Isolated Environment Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every dlist path constant at a temporary directory.

    Returns:
        The temporary config directory (empty).
    """
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    monkeypatch.setenv("DLIST_CONFIG_DIR", str(config_dir))
    monkeypatch.setattr("dlist.core.paths.USER_CONFIG_DIR", config_dir)
    monkeypatch.setattr("dlist.devices.ignore_list.IGNORE_FILE", config_dir / "ignore")
    monkeypatch.setattr("dlist.app.application.CONFIG_PATH", config_dir / "config.txt")
    monkeypatch.delenv("NO_COLOR", raising=False)

    return config_dir


@pytest.fixture(scope="function")
def terminal() -> Terminal:
    """A Terminal writing both channels to StringIO, never styled."""
    return Terminal(stdout=io.StringIO(), stderr=io.StringIO(), color="never")


@pytest.fixture(scope="function")
def fake_metadata() -> FakeMetadataQuery:
    return FakeMetadataQuery()


# =============================================================================
# Device Directory Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def device_dir_factory(tmp_path: Path) -> Callable[..., Path]:
    """Factory for scan roots populated with empty device entries.

    Example:
        def test_scan(device_dir_factory):
            root = device_dir_factory("ttyUSB0", "ttyS0")
    """
    counter = {"n": 0}

    def factory(*names: str) -> Path:
        counter["n"] += 1
        root = tmp_path / f"devroot{counter['n']}"
        root.mkdir()
        for name in names:
            (root / name).touch()
        return root

    return factory


# =============================================================================
# pyserial Fixtures
# =============================================================================

@pytest.fixture(scope="function")
def port_info_factory() -> Callable[..., ListPortInfo]:
    """Factory for pyserial ListPortInfo records."""

    def factory(
        device: str,
        product: Optional[str] = None,
        manufacturer: Optional[str] = None,
        serial_number: Optional[str] = None,
        vid: Optional[int] = None,
        pid: Optional[int] = None,
    ) -> ListPortInfo:
        info = ListPortInfo(device, skip_link_detection=True)
        info.product = product
        info.manufacturer = manufacturer
        info.serial_number = serial_number
        info.vid = vid
        info.pid = pid
        return info

    return factory


@pytest.fixture(scope="function")
def patch_comports() -> Generator[Callable[[Iterable[ListPortInfo]], None], None, None]:
    """Patch serial.tools.list_ports.comports with canned ports."""
    with patch("serial.tools.list_ports.comports") as mock_comports:
        mock_comports.return_value = []

        def set_ports(ports: Iterable[ListPortInfo]) -> None:
            mock_comports.return_value = list(ports)

        set_ports.mock = mock_comports
        yield set_ports


@pytest.fixture(scope="function")
def patch_sysfs() -> Generator[Callable[[Dict[str, ListPortInfo]], None], None, None]:
    """Patch pyserial's per-device sysfs reader with a path -> port map."""
    with patch("serial.tools.list_ports_linux.SysFS") as mock_sysfs:
        ports: Dict[str, ListPortInfo] = {}

        def sysfs(path: str) -> ListPortInfo:
            if path in ports:
                return ports[path]
            return ListPortInfo(path, skip_link_detection=True)

        mock_sysfs.side_effect = sysfs

        def set_ports(mapping: Dict[str, ListPortInfo]) -> None:
            ports.clear()
            ports.update(mapping)

        set_ports.mock = mock_sysfs
        yield set_ports
