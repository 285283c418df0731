# tests/test_general_utils.py
"""General utils: load_config (data dir resolution, validation, errors) and topic debug logging."""

from __future__ import annotations

import json
from importlib import import_module

import pytest

LC = import_module("color_palette_generator.general.utils.load_config")
LOG = import_module("color_palette_generator.general.utils.log")

DataDirNotFound = LC.DataDirNotFound
ConfigFileNotFound = LC.ConfigFileNotFound
ConfigParseError = LC.ConfigParseError
ConfigTypeError = LC.ConfigTypeError
load_config = LC.load_config


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it via DATA_DIR."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("DATA_DIR", str(data))
    return data


@pytest.fixture(autouse=True)
def _reset_debug_topics(monkeypatch):
    """Reset debug topics between tests."""
    monkeypatch.delenv("PALETTE_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    yield
    LOG.reload_topics()


# ---------- load_config ----------
def test_load_config_reads_object_with_or_without_suffix(tmp_data_dir):
    p = tmp_data_dir / "schemes.json"
    p.write_text(json.dumps({"a3": ["#000", "#111", "#222"]}), encoding="utf-8")
    assert load_config("schemes") == {"a3": ["#000", "#111", "#222"]}

    p.write_text(json.dumps({"changed": ["#fff"]}), encoding="utf-8")
    assert load_config("schemes.json") == {"changed": ["#fff"]}


def test_load_config_validator_and_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        d = dict(d)
        d["beta"] = "ok"
        return d

    assert load_config("settings", validator=validator) == {"alpha": 1, "beta": "ok"}

    (tmp_data_dir / "oops.json").write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with pytest.raises(ConfigTypeError):
        load_config("oops")

    def failing(d: dict) -> dict:
        raise ValueError("bad table")

    with pytest.raises(ConfigParseError, match="bad table"):
        load_config("settings", validator=failing)

    with pytest.raises(ConfigFileNotFound):
        load_config("does_not_exist")


def test_load_config_invalid_json(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{nope", encoding="utf-8")
    with pytest.raises(ConfigParseError):
        load_config("broken")


def test_load_config_allow_comments_with_fake_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json").write_text('{"a":1, /*c*/ "b":2, }', encoding="utf-8")

    class _FakeJson5:
        @staticmethod
        def load(f):
            return {"a": 1, "b": 2}

    monkeypatch.setattr(LC, "_json5", _FakeJson5)
    assert load_config("cmt", allow_comments=True) == {"a": 1, "b": 2}

    monkeypatch.setattr(LC, "_json5", None)
    with pytest.raises(ConfigParseError):
        load_config("cmt", allow_comments=True)


def test_load_config_refuses_escape_from_data_dir(tmp_data_dir):
    outside = tmp_data_dir.parent / "secret.json"
    outside.write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(ConfigFileNotFound):
        load_config("../secret")


def test_explicit_base_dir_beats_env(tmp_data_dir, tmp_path):
    other = tmp_path / "other"
    other.mkdir()
    (other / "t.json").write_text(json.dumps({"from": "other"}), encoding="utf-8")
    (tmp_data_dir / "t.json").write_text(json.dumps({"from": "env"}), encoding="utf-8")
    assert load_config("t") == {"from": "env"}
    assert load_config("t", base_dir=other) == {"from": "other"}


def test_resolve_data_dir_env_alias(tmp_path, monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.setenv("COLOR_PALETTE_DATA_DIR", str(tmp_path))
    assert LC.resolve_data_dir() == tmp_path.resolve()


def test_resolve_data_dir_discovery_failure(monkeypatch, tmp_path):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("COLOR_PALETTE_DATA_DIR", raising=False)
    monkeypatch.setattr(LC, "_candidate_data_dirs", lambda start=None: [tmp_path / "missing"])
    with pytest.raises(DataDirNotFound):
        LC.resolve_data_dir()


# ---------- log.debug ----------
def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "schemes")
    LOG.reload_topics()

    LOG.debug("hello schemes", topic="schemes")
    LOG.debug("should be silent", topic="expansion")

    err = capsys.readouterr().err
    assert "hello schemes" in err and "[schemes][DEBUG]" in err
    assert "should be silent" not in err


def test_log_debug_all_and_silent_default(monkeypatch, capsys):
    LOG.debug("nobody listens", topic="schemes")
    assert capsys.readouterr().err == ""

    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "ALL")
    LOG.reload_topics()
    assert LOG.topic_enabled("anything")
    LOG.debug("loud", topic="Expansion", level="warning")
    assert "[expansion][WARNING] loud" in capsys.readouterr().err
