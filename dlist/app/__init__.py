"""dlist application entry point."""

from .application import (
    EXIT_DIRECTORY_NOT_FOUND,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_SUCCESS,
    Options,
    main,
    parse_args,
    run,
)

__all__ = [
    "EXIT_DIRECTORY_NOT_FOUND",
    "EXIT_FAILURE",
    "EXIT_INTERRUPTED",
    "EXIT_SUCCESS",
    "Options",
    "main",
    "parse_args",
    "run",
]
