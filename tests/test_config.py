import argparse

import pytest

from jwt_codec import config
from jwt_codec.config import AppConfig, ConfigError, load_config, merge_cli_overrides


def _write(tmp_path, text: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_defaults_when_default_file_missing() -> None:
    cfg = load_config()
    assert cfg == AppConfig()
    assert cfg.output.mode == "base64"
    assert cfg.output.indent == 4
    assert cfg.log.verbose is False
    assert cfg.log.log_file == ""


def test_default_file_is_used_when_present(tmp_path, monkeypatch) -> None:
    path = _write(tmp_path, "output:\n  mode: plain\n")
    monkeypatch.setattr(config, "DEFAULT_CONFIG_PATH", path)
    assert load_config().output.mode == "plain"


def test_explicit_missing_file_is_an_error(tmp_path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(str(tmp_path / "missing.yaml"))


def test_yaml_values(tmp_path) -> None:
    path = _write(
        tmp_path,
        "output:\n  mode: plain\n  indent: 2\n"
        "logging:\n  verbose: true\n  log_file: logs/codec.log\n",
    )
    cfg = load_config(path)
    assert cfg.output.mode == "plain"
    assert cfg.output.indent == 2
    assert cfg.log.verbose is True
    assert cfg.log.log_file == "logs/codec.log"


def test_empty_file_yields_defaults(tmp_path) -> None:
    assert load_config(_write(tmp_path, "")) == AppConfig()


def test_env_overrides_yaml(tmp_path, monkeypatch) -> None:
    path = _write(tmp_path, "output:\n  mode: base64\nlogging:\n  verbose: true\n")
    monkeypatch.setenv("JWT_CODEC_MODE", "plain")
    monkeypatch.setenv("JWT_CODEC_VERBOSE", "no")
    cfg = load_config(path)
    assert cfg.output.mode == "plain"
    assert cfg.log.verbose is False


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "output:\n  mode: hex\n",
        "output:\n  indent: -1\n",
        "output:\n  indent: wide\n",
        "output: plain\n",
        "logging:\n  log_file: 3\n",
        "output: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path, text: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, text))


def test_merge_cli_overrides() -> None:
    args = argparse.Namespace(mode="plain", verbose=True, log_file="debug.log")
    cfg = merge_cli_overrides(AppConfig(), args)
    assert cfg.output.mode == "plain"
    assert cfg.output.indent == 4
    assert cfg.log.verbose is True
    assert cfg.log.log_file == "debug.log"


def test_merge_keeps_config_when_args_unset() -> None:
    base = load_config()
    args = argparse.Namespace(mode=None, verbose=False, log_file=None)
    assert merge_cli_overrides(base, args) == base
    assert merge_cli_overrides(base, argparse.Namespace()) == base


def test_merge_rejects_unknown_mode() -> None:
    with pytest.raises(ConfigError):
        merge_cli_overrides(AppConfig(), argparse.Namespace(mode="hex"))
