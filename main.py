"""Repository-level entrypoint for the TIP5 hash calculator.

Allows ``python main.py -m varlen 1 2 3`` from a source checkout without
installing the console script.
"""

from __future__ import annotations

import sys
from typing import Sequence


def main(argv: Sequence[str] | None = None) -> int:
    from tip5cli.cli import main as cli_main

    args = list(argv) if argv is not None else sys.argv[1:]
    return cli_main(args)


if __name__ == "__main__":
    raise SystemExit(main())
