from __future__ import annotations

from pathlib import Path

import pytest

from config import runtime_config as CFG

import main
import overworld
import settings as S


def test_log_lines_are_timestamped(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    log_path = tmp_path / "logs" / "tilewalk.log"
    monkeypatch.setenv("TILEWALK_LOG_PATH", str(log_path))
    CFG.log_event("session started")
    CFG.log_error("content rejected: spawn blocked")

    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[") and lines[0].endswith("INFO: session started")
    assert lines[1].endswith("ERROR: content rejected: spawn blocked")


def test_unwritable_log_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("TILEWALK_LOG_PATH", str(blocker / "nested.log"))
    CFG.log_error("still playable")


def test_build_config_uses_settings_and_content_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TILEWALK_CONTENT_DIR", str(tmp_path))
    config = main.build_config()
    assert config.resolution == (S.WINDOW_W, S.WINDOW_H)
    assert config.tile_px == S.TILE * S.SCALE
    assert config.step_duration_ms == 110.0
    assert config.content_path == tmp_path / S.CONTENT_FILE


def test_main_reports_bad_content(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / S.CONTENT_FILE).write_text("map: {width: 5, height: 5}\nspawn: [0, 0]\n", encoding="utf-8")
    monkeypatch.setenv("TILEWALK_CONTENT_DIR", str(tmp_path))
    monkeypatch.setenv("TILEWALK_LOG_PATH", str(tmp_path / "run.log"))
    assert main.main([]) == 1
    assert "Spawn tile (0, 0)" in (tmp_path / "run.log").read_text(encoding="utf-8")


def test_default_content_ships_inside_the_overworld_package(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TILEWALK_CONTENT_DIR", raising=False)
    config = main.build_config()
    assert config.content_path.parent == Path(overworld.__file__).resolve().parent / "data"
    assert config.content_path.is_file()
