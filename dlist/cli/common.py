from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import Optional


LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

NOT_AN_INTEGER_MESSAGE = "Device reference is not an integer. List available devices to get this value."


class UsageError(Exception):
    """Bad command line. Reported as a fatal error rather than argparse's exit(2)."""


class CliArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input.

    Exit code 2 belongs to 'device directory not found', so argparse must
    not use it for usage errors.
    """

    def error(self, message: str):
        raise UsageError(message)

    def _print_message(self, message, file=None):
        # Help and version text are status output; stdout only carries a path
        super()._print_message(message, sys.stderr)


class InterruptedBySignal(KeyboardInterrupt):
    """Raised from the signal handler so the app can unwind and report."""

    def __init__(self, signum: int):
        super().__init__(signum)
        self.signum = signum

    @property
    def exit_code(self) -> int:
        return 128 + self.signum


def parse_device_index(value: Optional[str]) -> Optional[int]:
    """Validate the optional positional device index.

    Returns None when no index was given. Raises ArgumentTypeError for
    non-integer, zero or negative input.
    """
    if value is None:
        return None
    text = value.strip()
    if text.startswith("-"):
        raise argparse.ArgumentTypeError(f"Device reference {text} is invalid (negative integer)")
    try:
        parsed = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(NOT_AN_INTEGER_MESSAGE) from exc
    if parsed == 0:
        raise argparse.ArgumentTypeError(f"Device reference {text} is invalid (zero)")
    return parsed


def add_common_cli_arguments(
    parser: argparse.ArgumentParser,
    *,
    default_log_level: str = "warning",
    default_log_file: Optional[Path] = None,
) -> None:
    parser.add_argument(
        "--log-level",
        choices=sorted(LOG_LEVELS.keys()),
        default=default_log_level,
        help="Diagnostic logging verbosity, written to stderr (default: %(default)s)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=default_log_file,
        help="Optional path to also write diagnostic logs",
    )


def install_exception_handlers(logger: logging.Logger) -> None:
    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return
        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback)
        )

    sys.excepthook = handle_exception


def install_signal_handlers() -> None:
    """Turn SIGINT/SIGTERM into InterruptedBySignal in the main thread."""

    def signal_handler(sig, frame):
        raise InterruptedBySignal(sig)

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, signal_handler)
