"""Tests for txview/config.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from txview.config import get_default_config_path, load_credential
from txview.exceptions import ConfigError, CredentialMissingError, HomeDirUnsetError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TXVIEW_API_KEY", raising=False)
    monkeypatch.delenv("TXVIEW_CONFIG_PATH", raising=False)


def test_default_path_is_under_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_default_config_path() == tmp_path / ".config" / "txview" / "config"


def test_default_path_requires_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(HomeDirUnsetError) as exc_info:
        get_default_config_path()
    assert isinstance(exc_info.value, ConfigError)
    assert exc_info.value.exit_code == 5


def test_load_credential_from_home(credential_file: Path) -> None:
    assert load_credential() == "KEY123"


def test_load_credential_strips_trailing_newline(credential_file: Path) -> None:
    credential_file.write_text("  KEY123\n")
    assert load_credential() == "KEY123"


def test_load_credential_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    with pytest.raises(CredentialMissingError) as exc_info:
        load_credential()
    assert exc_info.value.details["path"].endswith(".config/txview/config")
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_load_credential_empty_file(credential_file: Path) -> None:
    credential_file.write_text("\n")
    with pytest.raises(CredentialMissingError):
        load_credential()


def test_load_credential_directory_is_unreadable(credential_file: Path) -> None:
    credential_file.unlink()
    credential_file.mkdir()
    with pytest.raises(CredentialMissingError):
        load_credential()


def test_load_credential_home_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(HomeDirUnsetError):
        load_credential()


def test_explicit_path_does_not_need_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    key_file = tmp_path / "key"
    key_file.write_text("EXPLICIT")
    assert load_credential(str(key_file)) == "EXPLICIT"


def test_env_path_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    key_file = tmp_path / "key"
    key_file.write_text("FROM_ENV_PATH")
    monkeypatch.setenv("TXVIEW_CONFIG_PATH", str(key_file))
    assert load_credential() == "FROM_ENV_PATH"


def test_env_key_wins_over_file(credential_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TXVIEW_API_KEY", "ENVKEY")
    assert load_credential() == "ENVKEY"


def test_blank_env_key_is_ignored(credential_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TXVIEW_API_KEY", "   ")
    assert load_credential() == "KEY123"
