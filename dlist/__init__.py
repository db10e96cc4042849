"""Top-level package for dlist, the USB-to-serial adaptor lister."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("dlist")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"

from .app.application import main  # noqa: E402

__all__ = ["__version__", "main"]
