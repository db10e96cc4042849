import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from dlist import __version__
from dlist.cli import (
    CliArgumentParser,
    InterruptedBySignal,
    UsageError,
    add_common_cli_arguments,
    install_exception_handlers,
    install_signal_handlers,
    parse_device_index,
)
from dlist.core.config_manager import get_config_manager
from dlist.core.logging_config import configure_logging
from dlist.core.logging_utils import get_module_logger
from dlist.core.paths import CONFIG_PATH, IGNORE_FILE
from dlist.core.platform_info import PlatformInfo, get_platform_info
from dlist.core.terminal import COLOR_MODES, Terminal
from dlist.devices import (
    DeviceDiscovery,
    DirectoryNotFoundError,
    UnsupportedPlatformError,
    load_ignore_list,
    select_backend,
    show_devices,
)


logger = get_module_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_DIRECTORY_NOT_FOUND = 2
EXIT_INTERRUPTED = 130

DESCRIPTION = "List connected USB-to-serial adaptors"

EPILOG = """\
Call dlist to view or use a connected adaptor's device path.
If multiple adaptors are connected, dlist will list them. In
this case, to use one of them, call dlist with the required
adaptor's index in the list.

Examples:
  One device connected:  minicom -D $(dlist) -b 9600
  Two devices connected, use number 1:  minicom -D $(dlist 1) -b 9600

Devices can be hidden by listing them, one per line, in:
  {ignore_file}
"""


@dataclass(frozen=True)
class Options:
    """Parsed command line, built once and passed down explicitly."""
    selection: Optional[int] = None
    verbose: bool = False
    log_level: str = "warning"
    log_file: Optional[Path] = None
    color: str = "auto"


def build_parser(config: Optional[dict] = None) -> argparse.ArgumentParser:
    config_manager = get_config_manager()
    config = config or {}

    default_log_level = config_manager.get_choice(config, 'log_level', ('debug', 'info', 'warning', 'error', 'critical'), 'warning')
    default_log_file = config_manager.get_str(config, 'log_file', default='')
    default_verbose = config_manager.get_bool(config, 'info', default=False)

    parser = CliArgumentParser(
        prog="dlist",
        description=DESCRIPTION,
        epilog=EPILOG.format(ignore_file=IGNORE_FILE),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-i", "--info",
        dest="verbose",
        action="store_true",
        default=default_verbose,
        help="Show product and vendor data for the listed or selected device",
    )

    parser.add_argument(
        "index",
        nargs="?",
        default=None,
        help="1-based index of a device from a previous listing",
    )

    add_common_cli_arguments(
        parser,
        default_log_level=default_log_level,
        default_log_file=Path(default_log_file).expanduser() if default_log_file else None,
    )

    return parser


def parse_args(argv: Optional[Sequence[str]] = None, config_path: Optional[Path] = None) -> Options:
    """Parse command-line arguments with config file defaults.

    Raises UsageError or argparse.ArgumentTypeError for bad input.
    """
    config_manager = get_config_manager()
    config = config_manager.read_config(config_path or CONFIG_PATH)

    args = build_parser(config).parse_args(argv)

    return Options(
        selection=parse_device_index(args.index),
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=args.log_file,
        color=config_manager.get_choice(config, 'color', COLOR_MODES, 'auto'),
    )


def run(
    options: Options,
    terminal: Terminal,
    platform_info: Optional[PlatformInfo] = None,
    ignore_file: Optional[Path] = None,
) -> int:
    """Discover devices and present them. Returns the process exit code."""
    ignores = load_ignore_list(ignore_file)

    try:
        backend = select_backend(platform_info or get_platform_info(), ignores)
    except UnsupportedPlatformError as exc:
        terminal.report_fatal(str(exc))
        return EXIT_FAILURE

    discovery = DeviceDiscovery(backend, ignores, logger=logger)
    try:
        devices = discovery.discover()
    except DirectoryNotFoundError as exc:
        terminal.report_fatal(f"{exc.path} cannot be found")
        return EXIT_DIRECTORY_NOT_FOUND

    show_devices(devices, options.selection, options.verbose, terminal, backend.metadata)
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None, terminal: Optional[Terminal] = None) -> int:
    install_signal_handlers()

    try:
        try:
            options = parse_args(argv)
        except (UsageError, argparse.ArgumentTypeError) as exc:
            terminal = terminal or Terminal()
            terminal.report_fatal(str(exc))
            return EXIT_FAILURE

        terminal = terminal or Terminal(color=options.color)
        configure_logging(options.log_level, stream=terminal.stderr, log_file=options.log_file)
        install_exception_handlers(logger)
        logger.debug("dlist %s starting with %s", __version__, options)

        return run(options, terminal)
    except InterruptedBySignal as exc:
        _report_interrupted(terminal)
        return exc.exit_code
    except KeyboardInterrupt:
        _report_interrupted(terminal)
        return EXIT_INTERRUPTED


def _report_interrupted(terminal: Optional[Terminal]) -> None:
    terminal = terminal or Terminal()
    terminal.report_interrupted()
    terminal.flush()
