"""`python -m main` desde `src/`: mismo comando que el script `creational-demos`."""

from __future__ import annotations

import sys

# The banner prints non-ASCII bullets; cp1252 consoles reject them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
