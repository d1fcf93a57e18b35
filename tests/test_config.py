from __future__ import annotations

import json
from pathlib import Path

from tip5cli.config import Tip5Config, load_config
from tip5cli.hashing import Mode


def _write(path: Path, data) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_defaults_without_files() -> None:
    config = load_config()
    assert config.mode is Mode.PAIR
    assert config.backend is None
    assert config.log_level == "WARNING"
    assert config.source is None


def test_local_config_file_is_used(tmp_path: Path) -> None:
    path = _write(tmp_path / "config" / "tip5.json", {"mode": "varlen", "backend": "fake_tip5"})
    config = load_config()
    assert config.mode is Mode.VARLEN
    assert config.backend == "fake_tip5"
    assert config.source == Path("config/tip5.json")
    assert path.exists()


def test_local_override_wins_over_shared(tmp_path: Path) -> None:
    _write(tmp_path / "config" / "tip5.json", {"mode": "varlen"})
    _write(tmp_path / "config" / "tip5.local.json", {"mode": "pair", "log_level": "debug"})
    config = load_config()
    assert config.mode is Mode.PAIR
    assert config.log_level == "DEBUG"


def test_explicit_path_and_env_path(monkeypatch, tmp_path: Path) -> None:
    explicit = _write(tmp_path / "explicit.json", {"backend": "explicit_backend"})
    env_file = _write(tmp_path / "env.json", {"backend": "env_backend"})
    monkeypatch.setenv("TIP5_CONFIG", str(env_file))

    assert load_config(explicit).backend == "explicit_backend"
    assert load_config().backend == "env_backend"


def test_global_config_root(tmp_path: Path) -> None:
    _write(tmp_path / "config-home" / "tip5.json", {"mode": "varlen"})
    assert load_config().mode is Mode.VARLEN


def test_invalid_files_are_skipped(tmp_path: Path, caplog) -> None:
    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "tip5.local.json").write_text("{not json", encoding="utf-8")
    _write(tmp_path / "config" / "tip5.json", ["not", "an", "object"])
    _write(tmp_path / "tip5.json", {"backend": "fallback_backend"})

    with caplog.at_level("WARNING", logger="tip5cli.config"):
        config = load_config()

    assert config.backend == "fallback_backend"
    assert "skipping config" in caplog.text


def test_non_utf8_file_is_skipped(tmp_path: Path, caplog) -> None:
    (tmp_path / "tip5.local.json").write_bytes(b'{"mode": "\xff"}')
    _write(tmp_path / "tip5.json", {"mode": "varlen"})

    with caplog.at_level("WARNING", logger="tip5cli.config"):
        config = load_config()

    assert config.mode is Mode.VARLEN
    assert "skipping config tip5.local.json" in caplog.text


def test_missing_explicit_path_warns(tmp_path: Path, caplog) -> None:
    _write(tmp_path / "tip5.json", {"backend": "fallback_backend"})

    with caplog.at_level("WARNING", logger="tip5cli.config"):
        config = load_config(tmp_path / "nope.json")

    assert config.backend == "fallback_backend"
    assert "nope.json not found" in caplog.text


def test_unknown_mode_falls_back_to_pair(caplog) -> None:
    with caplog.at_level("WARNING", logger="tip5cli.config"):
        config = Tip5Config.from_dict({"mode": "triple"})
    assert config.mode is Mode.PAIR
    assert "unknown mode" in caplog.text


def test_environment_overrides_file(monkeypatch, tmp_path: Path) -> None:
    _write(tmp_path / "tip5.json", {"backend": "file_backend", "log_level": "ERROR"})
    monkeypatch.setenv("TIP5_BACKEND", "env_backend")
    monkeypatch.setenv("TIP5_LOG_LEVEL", "info")

    config = load_config()

    assert config.backend == "env_backend"
    assert config.log_level == "INFO"
    assert config.describe()["source"] == "tip5.json"
