"""
Credential loading for txview.

Receipt-style chains need an Infura API key. Sources, highest precedence first:
  1. TXVIEW_API_KEY environment variable
  2. The file at an explicit path (--config / TXVIEW_CONFIG_PATH)
  3. $HOME/.config/txview/config

The file holds nothing but the key. Surrounding whitespace, including the
trailing newline most editors add, is stripped.

Usage:
    from txview.config import load_credential
    key = load_credential()
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from txview.exceptions import CredentialMissingError, HomeDirUnsetError

logger = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path(".config") / "txview" / "config"

ENV_API_KEY = "TXVIEW_API_KEY"
ENV_CONFIG_PATH = "TXVIEW_CONFIG_PATH"


def get_default_config_path() -> Path:
    """
    Return $HOME/.config/txview/config.

    Raises:
        HomeDirUnsetError: HOME is unset or empty
    """
    home = os.environ.get("HOME")
    if not home:
        raise HomeDirUnsetError(
            "HOME is not set; cannot locate the txview config file",
            details={"env": "HOME"},
        )
    return Path(home) / CONFIG_RELATIVE_PATH


def load_credential(path: str | None = None) -> str:
    """
    Load the API credential.

    Args:
        path: Override config file path. If None, uses TXVIEW_CONFIG_PATH
              or the default under $HOME.

    Raises:
        HomeDirUnsetError: No override given and HOME is unset.
        CredentialMissingError: File missing, unreadable or empty.
    """
    env_key = os.environ.get(ENV_API_KEY)
    if env_key and env_key.strip():
        logger.debug("Using credential from %s", ENV_API_KEY)
        return env_key.strip()

    config_path = _resolve_config_path(path)
    logger.debug("Reading credential from %s", config_path)
    try:
        credential = config_path.read_text(encoding="utf-8").strip()
    except FileNotFoundError as e:
        raise CredentialMissingError(
            f"Config file not found: {config_path}. "
            "Save your Infura API key there (https://infura.io/).",
            details={"path": str(config_path)},
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialMissingError(
            f"Unable to read config file {config_path}: {e}",
            details={"path": str(config_path)},
        ) from e

    if not credential:
        raise CredentialMissingError(
            f"Config file {config_path} is empty",
            details={"path": str(config_path)},
        )
    return credential


# ──────────────────────────────────────────────────────────────
# Private helpers
# ──────────────────────────────────────────────────────────────


def _resolve_config_path(path: str | None) -> Path:
    if path:
        return Path(path).expanduser()
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()
    return get_default_config_path()
