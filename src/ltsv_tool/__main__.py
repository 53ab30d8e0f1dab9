"""Module entrypoint.

Allows:
    python -m ltsv_tool
"""

from __future__ import annotations

from ltsv_tool.cli import main

if __name__ == "__main__":
    main()
