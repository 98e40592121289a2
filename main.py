"""Development entry point (without an editable install).

Allows running the CLI with:
- `python main.py --user <name> <package>...`

The code lives in `src/`, so without `pip install -e .` the path is added
by hand.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from ghcr_cleaner.cli.main import run_cli  # noqa: PLC0415

    run_cli()


if __name__ == "__main__":
    main()
