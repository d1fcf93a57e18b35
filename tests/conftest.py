"""Ensure project root is on sys.path and register a fake hash backend."""

from __future__ import annotations

import hashlib
import sys
import types
from pathlib import Path
from typing import List, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FAKE_BACKEND = "fake_tip5"


class FakeDigest:
    def __init__(self, words: Sequence[int]) -> None:
        self.words = tuple(words)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FakeDigest) and other.words == self.words

    def __repr__(self) -> str:
        return f"Digest({list(self.words)})"


class RecordingBackend:
    """Deterministic stand-in for a TIP5 library that records its calls."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    @staticmethod
    def _digest(tag: str, values: Sequence[int]) -> FakeDigest:
        raw = hashlib.sha256((tag + ":" + ",".join(str(v) for v in values)).encode()).digest()
        return FakeDigest(int.from_bytes(raw[i : i + 8], "little") for i in range(0, 40, 8))

    def hash_pair(self, left, right):
        self.calls.append(("pair", tuple(left), tuple(right)))
        return self._digest("pair", list(left) + list(right))

    def hash_varlen(self, values):
        self.calls.append(("varlen", list(values)))
        return self._digest("varlen", values)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture(autouse=True)
def _tip5_env_defaults(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment, config files and .env."""

    monkeypatch.setenv("TIP5_SKIP_DOTENV", "1")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("TIP5_CONFIG_HOME", str(tmp_path / "config-home"))
    monkeypatch.setenv("NO_COLOR", "1")
    for key in ("TIP5_BACKEND", "TIP5_CONFIG", "TIP5_LOG_LEVEL", "FORCE_COLOR"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)

    module = types.ModuleType(FAKE_BACKEND)
    shared = RecordingBackend()
    module.hash_pair = shared.hash_pair
    module.hash_varlen = shared.hash_varlen
    module.Tip5 = RecordingBackend
    module.backend = shared
    monkeypatch.setitem(sys.modules, FAKE_BACKEND, module)
