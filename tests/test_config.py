import os

import pytest

from api_record.client import DEFAULT_BASE_URL
from api_record.config import client_config_from_env, load_env_config


def test_defaults_when_env_is_empty(monkeypatch):
    monkeypatch.delenv("API_RECORD_BASE_URL", raising=False)
    monkeypatch.delenv("API_RECORD_TIMEOUT_SECONDS", raising=False)

    assert load_env_config(use_dotenv=False) == (DEFAULT_BASE_URL, 10.0)


def test_reads_env(monkeypatch):
    monkeypatch.setenv("API_RECORD_BASE_URL", " https://api.example.com ")
    monkeypatch.setenv("API_RECORD_TIMEOUT_SECONDS", "2.5")

    config = client_config_from_env(use_dotenv=False)

    assert config.base_url == "https://api.example.com"
    assert config.timeout_seconds == 2.5


@pytest.mark.parametrize("raw", ["soon", "0", "-1"])
def test_rejects_bad_timeout(monkeypatch, raw):
    monkeypatch.setenv("API_RECORD_TIMEOUT_SECONDS", raw)

    with pytest.raises(ValueError):
        load_env_config(use_dotenv=False)


def test_dotenv_file_in_working_directory_is_loaded(monkeypatch, tmp_path):
    monkeypatch.delenv("API_RECORD_BASE_URL", raising=False)
    monkeypatch.delenv("API_RECORD_TIMEOUT_SECONDS", raising=False)
    (tmp_path / ".env").write_text("API_RECORD_BASE_URL=https://from-dotenv.test\n")
    monkeypatch.chdir(tmp_path)

    try:
        base_url, timeout = load_env_config()
    finally:
        os.environ.pop("API_RECORD_BASE_URL", None)

    assert base_url == "https://from-dotenv.test"
    assert timeout == 10.0
