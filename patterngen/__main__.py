"""Allow ``python -m patterngen``."""

from __future__ import annotations

import sys

from patterngen.cli import main

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
