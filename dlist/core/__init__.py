"""Core infrastructure shared by the dlist CLI: paths, logging, config, output."""

from .config_manager import ConfigManager, get_config_manager
from .logging_config import configure_logging
from .logging_utils import get_module_logger
from .platform_info import PlatformInfo, get_platform_info
from .terminal import Terminal

__all__ = [
    "ConfigManager",
    "get_config_manager",
    "configure_logging",
    "get_module_logger",
    "PlatformInfo",
    "get_platform_info",
    "Terminal",
]
