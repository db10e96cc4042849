"""Allow ``python -m dlist``."""

from __future__ import annotations

import sys

from dlist.app.application import main


if __name__ == "__main__":
    sys.exit(main())
