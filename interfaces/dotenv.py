"""
Tiny .env loader with no external dependencies.

Reads KEY=value pairs (for example ``TIP5_BACKEND``) from .env files without
overwriting variables that are already exported.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

SKIP_DOTENV_ENV = "TIP5_SKIP_DOTENV"

log = logging.getLogger(__name__)


def parse_dotenv(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in text.splitlines():
        s = line.strip()
        if s.startswith("export "):
            s = s[len("export "):].lstrip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        k, v = s.split("=", 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if k:
            values[k] = v
    return values


def load_dotenv_files(paths: Iterable[Path]) -> list[Path]:
    """Load each existing file in order and return the ones that were read."""

    loaded: list[Path] = []
    for p in paths:
        if not p.is_file():
            continue
        try:
            text = p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            log.warning("skipping %s: %s", p, exc)
            continue
        for k, v in parse_dotenv(text).items():
            os.environ.setdefault(k, v)
        loaded.append(p)
    return loaded


def load_local_dotenv(here: Path | None = None) -> list[Path]:
    """Load .env from the working directory and the package folder.

    Does not overwrite existing environment variables.
    """
    if os.getenv(SKIP_DOTENV_ENV) == "1":
        return []
    if here is None:
        here = Path(__file__).resolve().parent.parent
    candidates: list[Path] = [Path.cwd() / ".env", here / ".env"]

    unique_candidates: list[Path] = []
    seen: set[Path] = set()
    for path in candidates:
        resolved = path.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)
        unique_candidates.append(path)

    return load_dotenv_files(unique_candidates)
