"""Run script.

Why it exists:
- Lets `python -m main ...` start the CLI from `src/` during development.
- Keeps a simple entry point next to the `adlist-search` console script.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8),
# IDN domains are echoed back in the output.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
