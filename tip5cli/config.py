"""Runtime configuration loader for tip5cli."""

from __future__ import annotations

import json
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .connector import BACKEND_ENV
from .hashing import Mode

__all__ = [
    "Tip5Config",
    "CONFIG_ENV",
    "LOG_LEVEL_ENV",
    "load_config",
]

CONFIG_ENV = "TIP5_CONFIG"
LOG_LEVEL_ENV = "TIP5_LOG_LEVEL"

log = logging.getLogger(__name__)


def _global_config_roots() -> List[Path]:
    roots: List[Path] = []
    env_root = os.getenv("TIP5_CONFIG_HOME")
    if env_root:
        roots.append(Path(env_root).expanduser())
    home = Path.home()
    if sys.platform == "win32":
        roots.append(Path(os.getenv("APPDATA", home / "AppData" / "Roaming")) / "tip5cli")
    elif sys.platform == "darwin":
        roots.append(home / "Library/Application Support" / "tip5cli")
    else:
        xdg = Path(os.getenv("XDG_CONFIG_HOME", home / ".config"))
        roots.extend([xdg / "tip5cli", home / ".config/tip5cli"])
    deduped: List[Path] = []
    for root in roots:
        expanded = root.expanduser()
        if expanded not in deduped:
            deduped.append(expanded)
    return deduped


def _default_config_locations() -> List[Path]:
    locations = [
        Path("config/tip5.local.json"),
        Path("config/tip5.json"),
        Path("tip5.local.json"),
        Path("tip5.json"),
    ]
    for root in _global_config_roots():
        candidate = root / "tip5.json"
        if candidate not in locations:
            locations.append(candidate)
    return locations


@dataclass(slots=True)
class Tip5Config:
    mode: Mode = Mode.PAIR
    backend: Optional[str] = None
    log_level: str = "WARNING"
    source: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], *, source: Optional[Path] = None) -> "Tip5Config":
        mode_raw = data.get("mode", Mode.PAIR.value)
        try:
            mode = Mode.parse(mode_raw)
        except ValueError as exc:
            log.warning("%s; using pair", exc)
            mode = Mode.PAIR
        backend_raw = data.get("backend")
        backend = str(backend_raw).strip() if backend_raw is not None else None
        log_level = str(data.get("log_level") or "WARNING").strip().upper()
        return cls(mode=mode, backend=backend or None, log_level=log_level, source=source)

    def with_environment(self) -> "Tip5Config":
        """Apply environment overrides on top of the file values."""

        backend = os.getenv(BACKEND_ENV) or self.backend
        log_level = (os.getenv(LOG_LEVEL_ENV) or self.log_level).upper()
        return Tip5Config(mode=self.mode, backend=backend, log_level=log_level, source=self.source)

    def describe(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "backend": self.backend,
            "log_level": self.log_level,
            "source": str(self.source) if self.source else None,
        }


def _candidate_paths(explicit: Optional[Path]) -> Iterable[Path]:
    if explicit is not None:
        yield explicit
    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()
    yield from _default_config_locations()


def _read_config(path: Path) -> Optional[Tip5Config]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        log.warning("skipping config %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        log.warning("skipping config %s: top level is not an object", path)
        return None
    return Tip5Config.from_dict(data, source=path)


def load_config(path: Optional[Path] = None) -> Tip5Config:
    """Return the first readable configuration, with environment overrides applied."""

    if path is not None and not path.is_file():
        log.warning("config file %s not found; searching default locations", path)
    for candidate in _candidate_paths(path):
        if not candidate.is_file():
            continue
        config = _read_config(candidate)
        if config is not None:
            log.debug("loaded config from %s", candidate)
            return config.with_environment()
    return Tip5Config().with_environment()
