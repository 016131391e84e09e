"""
tests/test_config.py
Config layer: defaults, overrides, corrupt files, normalisation.
"""

import json
import logging

from relove.config import CONFIG_FILENAME, DEFAULT_CONFIG, ensure_config, load_config, save_config


def test_defaults_when_file_missing(tmp_path):
    assert load_config(tmp_path) == DEFAULT_CONFIG


def test_file_values_override_defaults(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text(json.dumps({"port": 9100}), encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg["port"] == 9100
    assert cfg["host"] == DEFAULT_CONFIG["host"]


def test_corrupt_file_falls_back_to_defaults(tmp_path, caplog):
    (tmp_path / CONFIG_FILENAME).write_text("{broken", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="relove.config"):
        cfg = load_config(tmp_path)
    assert cfg == DEFAULT_CONFIG
    assert "Config load failed" in caplog.text


def test_non_object_file_falls_back_to_defaults(tmp_path):
    (tmp_path / CONFIG_FILENAME).write_text("[1, 2]", encoding="utf-8")
    assert load_config(tmp_path) == DEFAULT_CONFIG


def test_save_then_load(tmp_path):
    path = save_config({**DEFAULT_CONFIG, "log_level": "DEBUG"}, tmp_path)
    assert path.name == CONFIG_FILENAME
    assert load_config(tmp_path)["log_level"] == "DEBUG"


def test_ensure_config_reads_env_dir(tmp_path, monkeypatch):
    save_config({"service_name": "relove-test"}, tmp_path)
    monkeypatch.setenv("RELOVE_CONFIG_DIR", str(tmp_path))
    assert ensure_config()["service_name"] == "relove-test"


def test_ensure_config_normalises_bad_values(tmp_path):
    save_config({"log_level": "chatty", "port": "not-a-port"}, tmp_path)
    cfg = ensure_config(tmp_path)
    assert cfg["log_level"] == "INFO"
    assert cfg["port"] == DEFAULT_CONFIG["port"]


def test_ensure_config_upcases_level_and_casts_port(tmp_path):
    save_config({"log_level": "debug", "port": "9000"}, tmp_path)
    cfg = ensure_config(tmp_path)
    assert cfg["log_level"] == "DEBUG"
    assert cfg["port"] == 9000
