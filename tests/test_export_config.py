"""Tests for src.export.config covering CLI parsing and required-flag handling.

Run with coverage:
    pytest tests/test_export_config.py --maxfail=1 -v --cov=src.export.config --cov-report=term-missing
"""

from importlib import reload
from pathlib import Path

import pytest

from src.export import config
from src.export.errors import MissingArgument

QUERY = '{"query": {"match_all": {}}}'


def test_resolve_settings_from_cli():
    args = config.parse_args([
        "-u",
        "http://localhost:9200",
        "-i",
        "tweets_2020_05_*",
        "-q",
        QUERY,
        "-o",
        "out.csv",
        "--username",
        "user",
        "--password",
        "pass",
        "--verify-tls",
    ])
    settings = config.resolve_settings(args)
    assert settings.url == "http://localhost:9200"
    assert settings.index == "tweets_2020_05_*"
    assert settings.query == QUERY
    assert settings.output == Path("out.csv")
    assert settings.username == "user"
    assert settings.password == "pass"
    assert settings.verify_tls is True


def test_long_flags_and_missing_output():
    args = config.parse_args(["--url", "http://es:9200", "--index", "logs", "--query", "{}"])
    settings = config.resolve_settings(args)
    assert settings.output is None
    assert settings.index == "logs"


def test_empty_api_key_is_treated_as_absent():
    args = config.parse_args(["-u", "http://es", "-i", "x", "-q", "{}", "--api-key", ""])
    assert config.resolve_settings(args).api_key is None


@pytest.mark.parametrize(
    "argv, flag",
    [
        (["-i", "x", "-q", "{}"], "--url"),
        (["-u", "http://es", "-q", "{}"], "--index"),
        (["-u", "http://es", "-i", "x"], "--query"),
    ],
)
def test_missing_required_flag_raises(argv, flag):
    with pytest.raises(MissingArgument) as excinfo:
        config.resolve_settings(config.parse_args(argv))
    assert excinfo.value.flag == flag
    assert excinfo.value.exit_code == 1
    assert flag in str(excinfo.value)


def test_query_is_not_validated_by_the_parser():
    args = config.parse_args(["-u", "not a url", "-i", "x", "-q", "not json"])
    settings = config.resolve_settings(args)
    assert settings.query == "not json"


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        config.parse_args(["--version"])
    assert excinfo.value.code == 0
    assert config.VERSION in capsys.readouterr().out


def test_pagination_window_constants():
    assert config.SEARCH_FROM == 0
    assert config.SEARCH_SIZE == 10


def test_tls_verification_is_on_without_secrets(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(tmp_path / "absent.json"))
    reloaded = reload(config)
    try:
        settings = reloaded.resolve_settings(reloaded.parse_args(["-u", "https://es", "-i", "x", "-q", "{}"]))
        assert settings.verify_tls is True
    finally:
        monkeypatch.delenv("LOCAL_SECRETS_FILE", raising=False)
        reload(config)


def test_verify_tls_can_be_switched_off_from_cli(monkeypatch):
    monkeypatch.setattr(config, "DEFAULT_VERIFY_TLS", True)
    args = config.parse_args(["-u", "https://es", "-i", "x", "-q", "{}", "--no-verify-tls"])
    assert config.resolve_settings(args).verify_tls is False


def test_empty_output_path_is_rejected():
    args = config.parse_args(["-u", "http://es", "-i", "x", "-q", "{}", "-o", ""])
    with pytest.raises(MissingArgument) as excinfo:
        config.resolve_settings(args)
    assert excinfo.value.flag == "--output"


def test_help_lists_exit_codes(capsys):
    with pytest.raises(SystemExit):
        config.parse_args(["--help"])
    assert "3 malformed query" in " ".join(capsys.readouterr().out.split())
