"""Development entry point (no install needed).

Run the CLI from the repository root with:
- `python -m main -k KEY -s SECRET`

The code lives under `src/`, so without an editable install Python cannot
find `cli`, `core` or `adapters` on its own.
"""

from __future__ import annotations

import sys
from pathlib import Path


def _prepare_streams() -> None:
    # Rich tables use box-drawing characters that cp1252 consoles cannot encode.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))
    _prepare_streams()

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
