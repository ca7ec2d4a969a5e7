# tests/test_general_utils.py
"""Tests for general utils (load_config, log) with cache/env handling."""

from __future__ import annotations

import json
import os
from importlib import import_module

import pytest

LC = import_module("color_class_generator.general.utils.load_config")
LOG = import_module("color_class_generator.general.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config
clear_config_cache = LC.clear_config_cache
temp_data_dir = LC.temp_data_dir


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point loader via PALETTE_DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.setenv("PALETTE_DATA_DIR", str(data))
    clear_config_cache()
    return data


@pytest.fixture(autouse=True)
def _reset_env_and_cache(monkeypatch):
    """Reset debug topics and config cache between tests."""
    monkeypatch.delenv("PALETTE_DEBUG_TOPICS", raising=False)
    clear_config_cache()
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- load_config tests ----------
def test_load_config_raw_and_cache_hit(tmp_data_dir):
    p = tmp_data_dir / "tokens.json"
    p.write_text(json.dumps(["rose", "beige"]), encoding="utf-8")
    stat = p.stat()

    out1 = load_config("tokens")
    assert out1 == ["rose", "beige"]

    # same mtime → served from cache
    p.write_text(json.dumps(["changed"]), encoding="utf-8")
    os.utime(p, ns=(stat.st_atime_ns, stat.st_mtime_ns))
    assert load_config("tokens") is out1

    clear_config_cache()
    assert load_config("tokens") == ["changed"]


def test_load_config_validated_dict_and_errors(tmp_data_dir):
    conf = tmp_data_dir / "settings.json"
    conf.write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    out = load_config("settings", mode="validated_dict", validator=validator)
    assert out == {"alpha": 1, "beta": "ok"}

    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops", mode="validated_dict")

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist", mode="raw")


def test_load_config_validator_failure_wrapped(tmp_data_dir):
    (tmp_data_dir / "v.json").write_text("{}", encoding="utf-8")

    def boom(d: dict) -> dict:
        raise KeyError("colors")

    with pytest.raises(ConfigParseError, match="validator failed"):
        load_config("v", mode="validated_dict", validator=boom)


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "bad.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("bad")


def test_load_config_unknown_mode(tmp_data_dir):
    (tmp_data_dir / "x.json").write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError, match="Unknown mode"):
        load_config("x", mode="set")


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret", mode="raw")


def test_explicit_base_dir_wins_over_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "c.json").write_text('{"where": "explicit"}', encoding="utf-8")
    (tmp_data_dir / "c.json").write_text('{"where": "env"}', encoding="utf-8")
    assert load_config("c", base_dir=other) == {"where": "explicit"}
    assert load_config("c") == {"where": "env"}


def test_default_data_dir_raises_when_nothing_found(tmp_path, monkeypatch):
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "data"])
    with pytest.raises(DataDirNotFound):
        LC._default_data_dir()


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    monkeypatch.setenv("PALETTE_DATA_DIR", "/somewhere/else")
    (tmp_path / "t.json").write_text('{"ok": true}', encoding="utf-8")
    with temp_data_dir(tmp_path):
        assert load_config("t") == {"ok": True}
    assert os.environ["PALETTE_DATA_DIR"] == "/somewhere/else"


# ---------- log.debug tests ----------
def test_log_debug_silent_without_topics(capsys):
    LOG.debug("nobody listens", topic="expand")
    assert capsys.readouterr().err == ""


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "emit")
    LOG.reload_topics()

    LOG.debug("hello on emit", topic="emit")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "[emit][DEBUG] hello on emit" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="warning")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "[bar][WARNING] m2" in captured.err
