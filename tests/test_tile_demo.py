from __future__ import annotations

import logging
import sys

import pytest

import tile_demo
from errors import AssetLoadError
from logging_config import parse_level, setup_logging


def test_parse_args_defaults_to_bundled_assets(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["tile_demo.py"])

    args = tile_demo._parse_args()

    assert args.map.endswith("data/tilemap.json")
    assert args.atlas.endswith("data/tiles.png")
    assert args.font is None
    assert args.log_level == "INFO"


def test_parse_args_normalizes_log_level(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["tile_demo.py", "--log-level", "debug"])

    assert tile_demo._parse_args().log_level == "DEBUG"


def test_runtime_config_defaults():
    runtime = tile_demo.RuntimeConfig()

    assert (runtime.window_width, runtime.window_height) == (920, 920)
    assert runtime.tile_size == 16
    assert runtime.tile_map_width == 15
    assert runtime.tps == 60
    assert runtime.player_speed == 100.0
    assert runtime.zoom == 4.0
    assert runtime.title == "Icosahedron Games: Tower Defense"


def test_main_hands_loaded_world_to_runtime(monkeypatch, tmp_path):
    seen = {}

    def fake_run(world, runtime, *, atlas_path, font_path=None):
        seen["world"] = world
        seen["atlas"] = atlas_path
        seen["font"] = font_path

    monkeypatch.setattr(sys, "argv", ["tile_demo.py", "--atlas", str(tmp_path / "atlas.png")])
    monkeypatch.setattr(tile_demo, "run_arcade", fake_run)

    tile_demo.main()

    assert len(seen["world"].layers) == 2
    assert seen["atlas"] == tmp_path / "atlas.png"
    assert seen["font"] is None


def test_missing_map_is_fatal(monkeypatch, tmp_path, caplog):
    monkeypatch.setattr(sys, "argv", ["tile_demo.py", "--map", str(tmp_path / "missing.json")])
    monkeypatch.setattr(tile_demo, "run_arcade", lambda *a, **k: pytest.fail("runtime must not start"))

    with caplog.at_level(logging.CRITICAL, logger="tile_demo"):
        with pytest.raises(SystemExit) as info:
            tile_demo.main()

    assert info.value.code == 1
    assert "cannot load tile map" in caplog.text


def test_asset_failure_during_startup_is_fatal(monkeypatch):
    def broken_run(*_args, **_kwargs):
        raise AssetLoadError("cannot load tile atlas tiles.png")

    monkeypatch.setattr(sys, "argv", ["tile_demo.py"])
    monkeypatch.setattr(tile_demo, "run_arcade", broken_run)

    with pytest.raises(SystemExit) as info:
        tile_demo.main()

    assert info.value.code == 1
    assert isinstance(info.value.__cause__, AssetLoadError)


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" Warning ") == logging.WARNING
    with pytest.raises(ValueError):
        parse_level("loud")


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "demo.log"

    logger = setup_logging(logging.INFO, str(log_file))
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger("tile_demo.player").info("hello")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    assert "[INFO] tile_demo.player: hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
