"""
Tiny ANSI color utilities for CLI output.

Respects NO_COLOR to disable. Enables only when the target stream is a TTY
unless FORCE_COLOR is set.
"""

from __future__ import annotations

import os
import sys
from typing import TextIO


def enabled(stream: TextIO | None = None) -> bool:
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("FORCE_COLOR") is not None:
        return True
    target = stream if stream is not None else sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(isatty and isatty())


class _Codes:
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    CYAN = "\x1b[36m"


def color(text: str, *, fg: str | None = None, bold: bool = False, stream: TextIO | None = None) -> str:
    if (fg is None and not bold) or not enabled(stream):
        return text
    parts: list[str] = []
    if bold:
        parts.append(_Codes.BOLD)
    if fg:
        parts.append(getattr(_Codes, fg.upper(), ""))
    return "".join(parts) + text + _Codes.RESET
