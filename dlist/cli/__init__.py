"""Command line helpers for dlist."""

from .common import (
    LOG_LEVELS,
    CliArgumentParser,
    InterruptedBySignal,
    UsageError,
    add_common_cli_arguments,
    install_exception_handlers,
    install_signal_handlers,
    parse_device_index,
)

__all__ = [
    "LOG_LEVELS",
    "CliArgumentParser",
    "InterruptedBySignal",
    "UsageError",
    "add_common_cli_arguments",
    "install_exception_handlers",
    "install_signal_handlers",
    "parse_device_index",
]
