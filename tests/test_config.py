import pytest

from responder.config import ResponderConfig, load_config


def test_load_config_defaults(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("encoding: ascii", encoding="utf-8")

    cfg = load_config(path)

    assert isinstance(cfg, ResponderConfig)
    assert cfg.encoding == "ascii"
    assert cfg.responses_path == "responses.txt"
    assert cfg.defaults_path == "default.txt"
    assert cfg.seed is None
    assert cfg.url_timeout_sec == 5.0


def test_empty_config_file(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.encoding == "utf-8"


def test_env_overrides(monkeypatch, tmp_path):
    source = tmp_path / "config.yml"
    source.write_text("responses_path: a.txt\nseed: 1", encoding="utf-8")

    monkeypatch.setenv("RESPONDER_DEFAULTS_PATH", "b.txt")
    monkeypatch.setenv("RESPONDER_SEED", "42")
    monkeypatch.setenv("RESPONDER_URL_TIMEOUT_SEC", "1.5")

    cfg = load_config(source)

    assert cfg.responses_path == "a.txt"
    assert cfg.defaults_path == "b.txt"
    assert cfg.seed == 42
    assert cfg.url_timeout_sec == 1.5


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_shipped_defaults_load():
    cfg = load_config("config/responder.defaults.yml")

    assert cfg.responses_path == "data/responses.txt"
    assert cfg.defaults_path == "data/default.txt"


def test_unknown_encoding_rejected(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("encoding: no-such-codec", encoding="utf-8")

    with pytest.raises(ValueError, match="Unknown encoding"):
        load_config(path)


def test_unknown_encoding_from_env(monkeypatch, tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("RESPONDER_ENCODING", "klingon")

    with pytest.raises(ValueError):
        load_config(path)
